"""
Central plugin registry that discovers and boots all CMS plugins.
Similar to WordPress hooks system and Django admin registry.
"""
import importlib
import logging
from typing import Dict, Optional, Type

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .base_plugin import BasePlugin

logger = logging.getLogger(__name__)


class PluginRegistry:
    """
    Singleton registry for all CMS plugins.
    Handles discovery, registration, requirement checks and boot order.
    """

    _instance = None
    _plugins: Dict[str, BasePlugin] = {}
    _booted = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._plugins = {}
            cls._instance._booted = False
        return cls._instance

    def register(self, plugin_class: Type[BasePlugin]) -> None:
        """
        Register a plugin with the registry.

        Args:
            plugin_class: The plugin class to register
        """
        plugin = plugin_class()
        code = plugin.code

        if code in self._plugins:
            logger.warning(f"Plugin '{code}' already registered, skipping.")
            return

        self._plugins[code] = plugin
        plugin.register()
        logger.info(f"Registered plugin: {code} (v{plugin.details.version})")

    def autodiscover(self) -> None:
        """
        Automatically discover, register and boot all plugins.
        Looks for 'plugin.py' in each app listed in settings.CMS_PLUGINS.
        """
        if self._booted:
            return

        for app_name in getattr(settings, 'CMS_PLUGINS', []):
            try:
                module = importlib.import_module(f"{app_name}.plugin")
            except ModuleNotFoundError as e:
                if e.name != f"{app_name}.plugin":
                    raise
                # App doesn't have a plugin.py file, skip it
                logger.debug(f"No plugin registration found for {app_name}: {e}")
                continue

            # Look for a class that inherits from BasePlugin
            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (isinstance(attr, type) and
                        issubclass(attr, BasePlugin) and
                        attr is not BasePlugin and
                        attr.__module__ == module.__name__):
                    self.register(attr)
                    break

        self.boot()

    def boot(self) -> None:
        """Check requirements and call boot() on every enabled plugin."""
        if self._booted:
            return

        for code, plugin in self._plugins.items():
            missing = [
                name for name in plugin.details.requires
                if name not in self._plugins
            ]
            if missing:
                raise ImproperlyConfigured(
                    f"Plugin '{code}' requires missing plugin(s): {', '.join(missing)}"
                )

        self._booted = True

        for plugin in self.get_enabled_plugins().values():
            plugin.boot()
            logger.debug(f"Booted plugin: {plugin.code}")

    def reset(self) -> None:
        """Forget every registered plugin. Used by tests."""
        self._plugins = {}
        self._booted = False

    def get_plugin(self, code: str) -> Optional[BasePlugin]:
        """Get a specific plugin by code."""
        return self._plugins.get(code)

    def get_all_plugins(self) -> Dict[str, BasePlugin]:
        """Get all registered plugins."""
        return self._plugins.copy()

    def get_enabled_plugins(self) -> Dict[str, BasePlugin]:
        """Get only enabled plugins."""
        return {
            code: plugin
            for code, plugin in self._plugins.items()
            if plugin.details.is_enabled
        }


# Global registry instance
registry = PluginRegistry()
