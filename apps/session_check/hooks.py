"""
Menu event receivers.

The PassContext for the menu being generated lives in a context variable:
references_generating starts a fresh one, resolve_item feeds it,
references_generated applies it and drops it, and references_aborted drops
it without applying anything.
"""
from contextvars import ContextVar
from typing import Optional

from .passes import PassContext, apply_decisions, record_item

_active_pass: ContextVar[Optional[PassContext]] = ContextVar('menu_session_check_pass', default=None)


def begin_pass() -> PassContext:
    pass_context = PassContext()
    _active_pass.set(pass_context)
    return pass_context


def current_pass() -> PassContext:
    """The active pass, started on demand if the host skipped references_generating."""
    pass_context = _active_pass.get()
    if pass_context is None:
        pass_context = begin_pass()
    return pass_context


def end_pass() -> None:
    _active_pass.set(None)


def on_references_generating(sender, **kwargs):
    begin_pass()


def on_resolve_item(sender, type, item, current_url, theme, **kwargs):
    record_item(current_pass(), item, theme)


def on_references_generated(sender, items, **kwargs):
    try:
        apply_decisions(current_pass(), items)
    finally:
        end_pass()
    return items


def on_references_aborted(sender, **kwargs):
    end_pass()
