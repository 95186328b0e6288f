"""
Tests for cached page lookups, settings paths and menu definitions.
"""
import pytest
from django.core.exceptions import ValidationError

from apps.cms.models import CmsPage, Layout, StaticPage, Theme, get_path
from apps.core.models import UserGroup
from apps.menus.items import MenuItem
from apps.menus.models import Menu


def test_get_path():
    data = {'components': {'session': {'security': 'user'}}, 'layout': 'default'}

    assert get_path(data, 'layout') == 'default'
    assert get_path(data, 'components.session.security') == 'user'
    assert get_path(data, 'components.viewBag.layout') is None
    assert get_path(data, 'layout.name', 'fallback') == 'fallback'
    assert get_path(data, '') is None


@pytest.mark.django_db
class TestLoadCached:

    def test_missing(self, theme):
        assert CmsPage.load_cached(theme, 'missing') is None
        assert CmsPage.load_cached(theme, None) is None
        assert CmsPage.load_cached(None, 'about') is None

    def test_second_lookup_hits_cache(self, theme, make_cms_page, django_assert_num_queries):
        make_cms_page('about')

        with django_assert_num_queries(1):
            CmsPage.load_cached(theme, 'about')
        with django_assert_num_queries(0):
            page = CmsPage.load_cached(theme, 'about')

        assert page.title == 'About'

    def test_save_drops_cache_entry(self, theme, make_cms_page):
        page = make_cms_page('about')
        CmsPage.load_cached(theme, 'about')

        page.title = 'About us'
        page.save()

        assert CmsPage.load_cached(theme, 'about').title == 'About us'

    def test_rename_drops_old_entry(self, theme, make_cms_page):
        page = make_cms_page('about')
        CmsPage.load_cached(theme, 'about')

        page.file_name = 'about-us'
        page.save()

        assert CmsPage.load_cached(theme, 'about') is None
        assert CmsPage.load_cached(theme, 'about-us').pk == page.pk

    def test_delete_drops_cache_entry(self, theme, make_layout):
        layout = make_layout('default')
        assert Layout.load_cached(theme, 'default') is not None

        layout.delete()

        assert Layout.load_cached(theme, 'default') is None

    def test_moving_to_another_theme_drops_old_entry(self, theme, make_cms_page):
        page = make_cms_page('about')
        other = Theme.objects.create(code='other', name='Other')
        CmsPage.load_cached(theme, 'about')

        page.theme = other
        page.save()

        assert CmsPage.load_cached(theme, 'about') is None
        assert CmsPage.load_cached(other, 'about').pk == page.pk

    def test_moving_a_loaded_page_drops_old_entry(self, theme, make_cms_page):
        make_cms_page('about')
        other = Theme.objects.create(code='other', name='Other')
        CmsPage.load_cached(theme, 'about')

        page = CmsPage.objects.get(theme=theme, file_name='about')
        page.theme = other
        page.save()

        assert CmsPage.load_cached(theme, 'about') is None

    def test_queryset_delete_drops_cache_entries(self, theme, make_cms_page):
        make_cms_page('about')
        CmsPage.load_cached(theme, 'about')

        CmsPage.objects.filter(theme=theme).delete()

        assert CmsPage.load_cached(theme, 'about') is None

    def test_deleting_theme_drops_its_entries(self, theme, make_cms_page, make_layout, make_static_page):
        make_layout('default')
        make_cms_page('about', layout='default')
        make_static_page('team')
        assert CmsPage.load_cached(theme, 'about') is not None
        assert Layout.load_cached(theme, 'default') is not None
        assert StaticPage.load_cached(theme, 'team') is not None

        theme.delete()
        replacement = Theme.objects.create(code='demo', name='Demo again')

        assert CmsPage.load_cached(replacement, 'about') is None
        assert Layout.load_cached(replacement, 'default') is None
        assert StaticPage.load_cached(replacement, 'team') is None

    def test_theme_code_change_drops_entries_under_old_code(self, theme, make_cms_page):
        make_cms_page('about')
        CmsPage.load_cached(theme, 'about')

        theme.code = 'renamed'
        theme.save()
        replacement = Theme.objects.create(code='demo', name='New demo')

        assert CmsPage.load_cached(replacement, 'about') is None
        assert CmsPage.load_cached(theme, 'about') is not None

    def test_lookups_are_per_theme(self, theme, make_static_page):
        make_static_page('team')
        other = Theme.objects.create(code='other', name='Other')

        assert StaticPage.load_cached(other, 'team') is None
        assert StaticPage.load_cached(theme, 'team') is not None

    def test_layout_name(self, make_cms_page, make_static_page):
        assert make_cms_page('about', layout='default').layout_name == 'default'
        assert make_static_page('team', layout='members').layout_name == 'members'

    def test_active_theme(self, theme, settings):
        assert Theme.get_active() == theme

        settings.CMS_ACTIVE_THEME = None
        assert Theme.get_active() is None


@pytest.mark.django_db
class TestMenuDefinitions:

    def test_items_are_parsed(self, make_menu):
        menu = make_menu([
            {'title': 'About', 'type': 'cms-page', 'reference': 'about', 'cssClass': 'nav-about', 'items': [
                {'title': 'Blog', 'url': '/blog', 'isHidden': True},
            ]},
        ])

        items = menu.get_items()

        assert items == [
            MenuItem(title='About', type='cms-page', reference='about', css_class='nav-about', items=[
                MenuItem(title='Blog', type='url', url='/blog', hidden=True),
            ]),
        ]
        assert items[0].is_resolvable is True
        assert items[0].items[0].is_resolvable is False

    def test_each_call_returns_fresh_items(self, make_menu):
        menu = make_menu([{'title': 'Blog', 'url': '/blog'}])

        first = menu.get_items()
        first[0].hidden = True

        assert menu.get_items()[0].hidden is False

    def test_invalid_items(self, theme):
        menu = Menu(theme=theme, code='broken', name='Broken', items=[{'title': 'ok', 'items': ['bad']}])

        with pytest.raises(ValidationError):
            menu.full_clean()

        menu.items = {'title': 'not a list'}
        with pytest.raises(ValidationError):
            menu.full_clean()

    def test_valid_items(self, theme):
        Menu(theme=theme, code='main', name='Main', items=[{'title': 'Blog', 'url': '/blog'}]).full_clean()


@pytest.mark.django_db
def test_user_group_code_from_name():
    group = UserGroup.objects.create(name='Site Editors')

    assert group.code == 'site-editors'


@pytest.mark.django_db
def test_registered_group_is_seeded():
    assert UserGroup.objects.filter(code='registered').exists()
