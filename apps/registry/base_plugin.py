"""
Base plugin class that all CMS plugins must inherit from.
Similar to WordPress plugin registration pattern.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List


@dataclass
class PluginDetails:
    """Plugin information shown in the admin plugin list."""
    name: str
    description: str = ""
    author: str = ""
    icon: str = ""
    version: str = "1.0.0"
    # Names of plugins that must be registered before this one boots
    requires: List[str] = field(default_factory=list)
    is_enabled: bool = True


class BasePlugin(ABC):
    """
    Abstract base class for all pluggable CMS extensions.

    Each plugin lives in a ``plugin.py`` inside its Django app and is picked
    up by the registry's autodiscover, like Django admin's autodiscover.
    """

    @property
    @abstractmethod
    def code(self) -> str:
        """Unique plugin identifier used in ``requires`` lists."""
        pass

    @property
    @abstractmethod
    def details(self) -> PluginDetails:
        """Return the plugin details."""
        pass

    def register(self):
        """Hook called when plugin is registered. Override for setup tasks."""
        pass

    def boot(self):
        """
        Hook called once every plugin is registered and requirements are met.
        Override to bind event listeners.
        """
        pass
