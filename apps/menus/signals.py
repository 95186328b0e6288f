"""
Menu generation events.

references_generating
    Sent once before a menu's references are built.
    kwargs: menu, theme
resolve_item
    Sent for every menu item whose type is not "url", in depth-first
    pre-order, parents before children. Receivers may return a dict with
    "url" and "is_active"; the first dict returned is used.
    kwargs: type, item, current_url, theme
references_generated
    Sent once with the full generated reference tree. Receivers may change
    the references in place.
    kwargs: items
references_aborted
    Sent instead of references_generated when building the tree raised.
    The error is re-raised after receivers run.
    kwargs: menu, theme
"""
from django.dispatch import Signal

references_generating = Signal()
resolve_item = Signal()
references_generated = Signal()
references_aborted = Signal()
