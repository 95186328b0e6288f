"""
Context processors for global template variables.
"""
from django.conf import settings

from apps.cms.models import Theme
from apps.core.auth import bind_user

from .services import MenuService


def navigation(request):
    """
    Add the menus named in settings.MENU_CONTEXT_CODES to all templates.
    Entries hidden from the current visitor are already removed.
    """
    theme = Theme.get_active()
    if theme is None:
        return {'menus': {}}

    service = MenuService(theme)
    menus = {}
    with bind_user(request.user):
        for code in getattr(settings, 'MENU_CONTEXT_CODES', []):
            menus[code] = service.get_visible_references(code, request.path)

    return {'menus': menus}
