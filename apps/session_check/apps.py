from django.apps import AppConfig


class SessionCheckConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.session_check'
    verbose_name = 'Menu Item Session Check'
