"""
Menu Item Session Check plugin registration.
"""
from django.conf import settings

from apps.registry.base_plugin import BasePlugin, PluginDetails


class SessionCheckPlugin(BasePlugin):
    """
    Hide menu items by checking the session component settings on the
    referenced page or its layout.
    """

    @property
    def code(self):
        return 'session_check'

    @property
    def details(self):
        return PluginDetails(
            name='Menu Item Session Check',
            description='Hide menu item(s) by checking the session settings of the referenced page or layout',
            author='Ryan Showers',
            icon='sitemap',
            requires=['cms', 'users'],
            is_enabled=getattr(settings, 'SESSION_CHECK_ENABLED', True),
        )

    def boot(self):
        from apps.menus.signals import (
            references_aborted, references_generated, references_generating, resolve_item
        )
        from . import hooks

        references_generating.connect(hooks.on_references_generating, dispatch_uid='session_check.begin')
        resolve_item.connect(hooks.on_resolve_item, dispatch_uid='session_check.resolve_item')
        references_generated.connect(hooks.on_references_generated, dispatch_uid='session_check.apply')
        references_aborted.connect(hooks.on_references_aborted, dispatch_uid='session_check.abort')
