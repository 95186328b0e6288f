"""
Tests for the two-phase decision index.
"""
import pytest

from apps.menus.items import MenuItem, MenuItemReference
from apps.session_check.passes import (
    PassContext, VisibilityIndex, apply_decisions, record_item
)
from apps.session_check.visitor import ANONYMOUS, VisitorContext


def anonymous_pass():
    return PassContext(visitor_loader=lambda: ANONYMOUS)


def ref(type='cms-page', items=None):
    return MenuItemReference(type=type, items=items or [])


class TestVisibilityIndex:

    def test_empty(self):
        index = VisibilityIndex()
        assert index.hidden_indexes() == []
        assert index.should_hide(0) is False

    def test_record_hidden(self):
        index = VisibilityIndex()
        index.record_hidden(3)
        index.record_hidden(1)

        assert index.should_hide(1) is True
        assert index.should_hide(2) is False
        assert index.should_hide(3) is True
        assert index.hidden_indexes() == [1, 3]


class TestApplyDecisions:

    def test_flat(self):
        pass_context = anonymous_pass()
        pass_context.index.record_hidden(1)
        tree = [ref(), ref(), ref()]

        apply_decisions(pass_context, tree)

        assert [node.hidden for node in tree] == [False, True, False]

    def test_url_entries_take_no_index(self):
        pass_context = anonymous_pass()
        pass_context.index.record_hidden(1)
        tree = [ref(), ref(type='url'), ref()]

        apply_decisions(pass_context, tree)

        assert [node.hidden for node in tree] == [False, False, True]

    def test_preorder_numbering(self):
        # 0: a, 1: a.1, 2: a.1.1, 3: a.2, (url b), 4: b.1, 5: c
        pass_context = anonymous_pass()
        for index in (2, 4):
            pass_context.index.record_hidden(index)

        a = ref(items=[ref(items=[ref()]), ref()])
        b = ref(type='url', items=[ref()])
        c = ref()
        apply_decisions(pass_context, [a, b, c])

        assert a.hidden is False
        assert a.items[0].hidden is False
        assert a.items[0].items[0].hidden is True
        assert a.items[1].hidden is False
        assert b.hidden is False
        assert b.items[0].hidden is True
        assert c.hidden is False

    def test_never_unhides(self):
        pass_context = anonymous_pass()
        node = ref()
        node.hidden = True

        apply_decisions(pass_context, [node])

        assert node.hidden is True

    def test_parent_not_affected_by_child(self):
        pass_context = anonymous_pass()
        pass_context.index.record_hidden(1)
        parent = ref(items=[ref()])

        apply_decisions(pass_context, [parent])

        assert parent.hidden is False
        assert parent.items[0].hidden is True


@pytest.mark.django_db
class TestRecordItem:

    def test_hidden_item_is_recorded(self, theme, make_cms_page):
        make_cms_page('account', security='user')
        pass_context = anonymous_pass()

        assert record_item(pass_context, MenuItem(type='cms-page', reference='account'), theme) is True
        assert pass_context.index.hidden_indexes() == [0]
        assert pass_context.counter == 1

    def test_visible_item_advances_counter_only(self, theme, make_cms_page):
        make_cms_page('about')
        pass_context = anonymous_pass()

        assert record_item(pass_context, MenuItem(type='cms-page', reference='about'), theme) is False
        assert pass_context.index.hidden_indexes() == []
        assert pass_context.counter == 1

    def test_unresolved_reference_still_takes_an_index(self, theme, make_cms_page):
        make_cms_page('account', security='user')
        pass_context = anonymous_pass()

        record_item(pass_context, MenuItem(type='cms-page', reference='missing'), theme)
        record_item(pass_context, MenuItem(type='blog-post', reference='first-post'), theme)
        record_item(pass_context, MenuItem(type='cms-page', reference='account'), theme)

        assert pass_context.counter == 3
        assert pass_context.index.hidden_indexes() == [2]

    def test_url_item_takes_no_index(self, theme):
        pass_context = anonymous_pass()

        assert record_item(pass_context, MenuItem(type='url', url='/blog'), theme) is False
        assert pass_context.counter == 0

    def test_visitor_not_loaded_for_unresolved_items(self, theme):
        calls = []

        def loader():
            calls.append(1)
            return ANONYMOUS

        pass_context = PassContext(visitor_loader=loader)
        record_item(pass_context, MenuItem(type='cms-page', reference='missing'), theme)

        assert calls == []

    def test_layout_security_applies(self, theme, make_cms_page, make_layout):
        make_layout('members', security='user')
        make_cms_page('account', layout='members')
        member = VisitorContext(True, frozenset())

        anonymous = anonymous_pass()
        signed_in = PassContext(visitor_loader=lambda: member)
        item = MenuItem(type='cms-page', reference='account')

        assert record_item(anonymous, item, theme) is True
        assert record_item(signed_in, item, theme) is False

    def test_phases_line_up(self, theme, make_cms_page, make_static_page):
        make_cms_page('account', security='user')
        make_static_page('team', groups=['admin'])
        make_cms_page('about')
        definitions = [
            MenuItem(type='cms-page', reference='about', items=[
                MenuItem(type='url', url='/news'),
                MenuItem(type='static-page', reference='team'),
            ]),
            MenuItem(type='cms-page', reference='account'),
        ]
        pass_context = anonymous_pass()

        def walk(items):
            for item in items:
                if item.is_resolvable:
                    record_item(pass_context, item, theme)
                walk(item.items)

        walk(definitions)
        tree = [
            ref(items=[ref(type='url'), ref(type='static-page')]),
            ref(),
        ]
        apply_decisions(pass_context, tree)

        assert tree[0].hidden is False
        assert tree[0].items[0].hidden is False
        assert tree[0].items[1].hidden is True
        assert tree[1].hidden is True
