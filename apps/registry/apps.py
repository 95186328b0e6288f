from django.apps import AppConfig


class RegistryConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.registry'
    verbose_name = 'Plugin Registry'

    def ready(self):
        """Discover, register and boot all plugins when Django starts."""
        from .plugin_registry import registry
        registry.autodiscover()
