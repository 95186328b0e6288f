"""
CMS plugin registration.
"""
from apps.registry.base_plugin import BasePlugin, PluginDetails


class CmsPlugin(BasePlugin):
    """Pages, layouts and the menus that link to them."""

    @property
    def code(self):
        return 'cms'

    @property
    def details(self):
        return PluginDetails(
            name='Pages',
            description='Theme pages, static pages, layouts and menus',
            icon='file-text',
        )

    def boot(self):
        from apps.menus.signals import resolve_item
        from .resolvers import resolve_page_item

        resolve_item.connect(resolve_page_item, dispatch_uid='cms.resolve_page_item')
