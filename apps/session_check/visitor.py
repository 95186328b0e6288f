"""
Who is looking at the menu.
"""
from dataclasses import dataclass, field
from typing import FrozenSet

from apps.core import auth


@dataclass(frozen=True)
class VisitorContext:
    """Authentication state and group codes of the current visitor."""
    is_authenticated: bool = False
    group_codes: FrozenSet[str] = field(default_factory=frozenset)


ANONYMOUS = VisitorContext()


def load_visitor_context() -> VisitorContext:
    """Query the identity layer. Anonymous visitors get no group codes."""
    if not auth.is_authenticated():
        return ANONYMOUS
    return VisitorContext(
        is_authenticated=True,
        group_codes=frozenset(auth.current_user_group_codes()),
    )
