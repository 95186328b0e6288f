"""
Tests for the menu event receivers.
"""
import pytest

from apps.menus.items import MenuItem, MenuItemReference
from apps.session_check import hooks

pytestmark = pytest.mark.django_db


def test_begin_pass_replaces_previous_pass():
    first = hooks.begin_pass()
    first.next_index()

    second = hooks.begin_pass()

    assert second is not first
    assert second.counter == 0
    assert hooks.current_pass() is second


def test_resolve_without_generating_event_starts_a_pass(theme, make_cms_page):
    make_cms_page('account', security='user')

    hooks.on_resolve_item(None, type='cms-page', item=MenuItem(type='cms-page', reference='account'),
                          current_url='/', theme=theme)

    assert hooks.current_pass().index.hidden_indexes() == [0]


def test_references_generated_applies_and_ends_pass(theme, make_cms_page):
    make_cms_page('account', security='user')
    hooks.on_references_generating(None, menu=None, theme=theme)
    hooks.on_resolve_item(None, type='cms-page', item=MenuItem(type='cms-page', reference='account'),
                          current_url='/', theme=theme)
    tree = [MenuItemReference(type='cms-page')]

    result = hooks.on_references_generated(None, items=tree)

    assert result is tree
    assert tree[0].hidden is True
    assert hooks._active_pass.get() is None


def test_references_aborted_drops_pass(theme, make_cms_page):
    make_cms_page('account', security='user')
    hooks.on_references_generating(None, menu=None, theme=theme)
    hooks.on_resolve_item(None, type='cms-page', item=MenuItem(type='cms-page', reference='account'),
                          current_url='/', theme=theme)

    hooks.on_references_aborted(None, menu=None, theme=theme)

    assert hooks._active_pass.get() is None
    assert hooks.current_pass().counter == 0
