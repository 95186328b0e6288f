"""
Users plugin registration.
"""
from apps.registry.base_plugin import BasePlugin, PluginDetails


class UsersPlugin(BasePlugin):
    """Front-end users and user groups."""

    @property
    def code(self):
        return 'users'

    @property
    def details(self):
        return PluginDetails(
            name='Users',
            description='Front-end user groups and the current-visitor binding',
            icon='users',
        )
