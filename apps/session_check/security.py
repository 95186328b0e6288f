"""
Session security lookup and the hide rule.

Pages and layouts restrict access through their session component settings:

    components.session.security           "user", "guest" or "all"
    components.session.allowedUserGroups  list of user group codes

Page values win over layout values, one property at a time, so a page can
set the security mode while the allowed groups still come from its layout.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple

from apps.cms.models import CmsPage, Layout, StaticPage, get_path

from .visitor import VisitorContext

SECURITY_PATH = 'components.session.security'
ALLOWED_GROUPS_PATH = 'components.session.allowedUserGroups'

SECURITY_USER = 'user'
SECURITY_GUEST = 'guest'


@dataclass(frozen=True)
class TargetType:
    """How to find the page behind a menu item type, and the page's layout key."""
    load_page: Callable[[Any, str], Any]
    layout_path: str


TARGET_TYPES: Dict[str, TargetType] = {
    'cms-page': TargetType(load_page=CmsPage.load_cached, layout_path='layout'),
    'static-page': TargetType(load_page=StaticPage.load_cached, layout_path='components.viewBag.layout'),
}


@dataclass(frozen=True)
class ResolvedTarget:
    page: Any = None
    layout: Any = None


def resolve_target(item, theme) -> ResolvedTarget:
    """
    Look up the page a menu item points to and that page's layout.
    Unknown item types and missing references resolve to an empty target.
    """
    target_type = TARGET_TYPES.get(item.type)
    if target_type is None:
        return ResolvedTarget()

    page = target_type.load_page(theme, item.reference)
    if page is None:
        return ResolvedTarget()

    layout_name = get_path(page.settings, target_type.layout_path)
    return ResolvedTarget(page=page, layout=Layout.load_cached(theme, layout_name))


def _first_setting(path, *sources):
    for source in sources:
        if source is None:
            continue
        value = get_path(source.settings, path)
        if value:
            return value
    return None


def _as_group_set(value) -> Optional[FrozenSet[str]]:
    if not value:
        return None
    if isinstance(value, str):
        return frozenset([value])
    return frozenset(str(code) for code in value)


def extract_security(page, layout) -> Tuple[Optional[str], Optional[FrozenSet[str]]]:
    """
    Effective (security mode, allowed groups) for a page and its layout.
    Either value is None when neither object sets it.
    """
    security = _first_setting(SECURITY_PATH, page, layout)
    allowed_groups = _as_group_set(_first_setting(ALLOWED_GROUPS_PATH, page, layout))
    return security, allowed_groups


def decide_hidden(security: Optional[str],
                  allowed_groups: Optional[FrozenSet[str]],
                  visitor: VisitorContext) -> bool:
    """True when the visitor must not see an item with these settings."""
    if security == SECURITY_USER and not visitor.is_authenticated:
        return True

    if security == SECURITY_GUEST and visitor.is_authenticated:
        return True

    if allowed_groups and not visitor.is_authenticated:
        return True

    if allowed_groups and visitor.is_authenticated:
        if not allowed_groups & visitor.group_codes:
            return True

    return False
