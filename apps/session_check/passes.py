"""
Two-phase menu visibility.

Phase A (record_item) runs while the menu is being resolved, once per item
whose type is not "url". It decides whether the item's target hides it from
the visitor and records the answer under a sequential index.

Phase B (apply_decisions) walks the generated reference tree afterwards and
numbers the non-url entries with the same rule, depth-first, parents before
children, so position N in the tree receives decision N.

Both walks must see the same tree shape in the same order. If the host adds,
drops or reorders items between the two phases the decisions land on the
wrong entries; nothing here can detect that.
"""
import logging
from typing import Dict, Iterable, Optional

from apps.menus.items import URL_TYPE

from .security import decide_hidden, extract_security, resolve_target
from .visitor import VisitorContext, load_visitor_context

logger = logging.getLogger(__name__)


class VisibilityIndex:
    """Sequential item index -> hide flag. Only hides are stored."""

    def __init__(self):
        self._hidden: Dict[int, bool] = {}

    def record_hidden(self, index: int) -> None:
        self._hidden[index] = True

    def should_hide(self, index: int) -> bool:
        return self._hidden.get(index, False)

    def hidden_indexes(self):
        return sorted(self._hidden)


class PassContext:
    """
    State of one menu generation pass.

    Create a new one per pass; nothing carries over between passes.
    """

    def __init__(self, visitor_loader=load_visitor_context):
        self.index = VisibilityIndex()
        self.counter = 0
        self._visitor_loader = visitor_loader
        self._visitor: Optional[VisitorContext] = None

    def resolve_visitor_context(self) -> VisitorContext:
        """The visitor, loaded on first use and reused for the rest of the pass."""
        if self._visitor is None:
            self._visitor = self._visitor_loader()
        return self._visitor

    def next_index(self) -> int:
        index = self.counter
        self.counter += 1
        return index


def _is_numbered(item) -> bool:
    return item.type != URL_TYPE


def record_item(pass_context: PassContext, item, theme) -> bool:
    """
    Phase A for one menu item. Returns True when a hide was recorded.

    The item takes an index even when its page cannot be found, because
    apply_decisions numbers every non-url entry.
    """
    if not _is_numbered(item):
        return False

    index = pass_context.next_index()

    target = resolve_target(item, theme)
    if target.page is None:
        logger.debug(f"Menu item {index} ({item.type}: {item.reference}) has no page")
        return False

    security, allowed_groups = extract_security(target.page, target.layout)
    if not decide_hidden(security, allowed_groups, pass_context.resolve_visitor_context()):
        return False

    pass_context.index.record_hidden(index)
    logger.debug(f"Menu item {index} ({item.type}: {item.reference}) hidden")
    return True


def apply_decisions(pass_context: PassContext, items: Iterable) -> None:
    """Phase B: set hidden on entries whose index was recorded in phase A."""
    counter = 0

    def walk(nodes):
        nonlocal counter
        for node in nodes:
            if _is_numbered(node):
                if pass_context.index.should_hide(counter):
                    node.hidden = True
                counter += 1
            if node.items:
                walk(node.items)

    walk(items)
