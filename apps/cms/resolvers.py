"""
Menu item resolution for CMS and static pages.
"""
from .models import CmsPage, StaticPage

PAGE_MODELS = {
    'cms-page': CmsPage,
    'static-page': StaticPage,
}


def resolve_page_item(sender, type, item, current_url, theme, **kwargs):
    """
    resolve_item receiver: give cms-page and static-page items their URL.

    Returns None for other item types and for references that don't match a
    page, which leaves the generated entry without a URL.
    """
    model = PAGE_MODELS.get(type)
    if model is None:
        return None

    page = model.load_cached(theme, item.reference)
    if page is None:
        return None

    return {
        'url': page.url,
        'is_active': page.url == current_url,
    }
