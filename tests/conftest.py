import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache

from apps.cms.models import CmsPage, Layout, StaticPage, Theme
from apps.core.models import UserGroup
from apps.menus.models import Menu
from apps.session_check import hooks

from .helpers import session


@pytest.fixture(autouse=True)
def clean_state():
    cache.clear()
    hooks.end_pass()
    yield
    hooks.end_pass()
    cache.clear()


@pytest.fixture
def theme(db):
    return Theme.objects.create(code='demo', name='Demo')


@pytest.fixture
def admin_group(db):
    return UserGroup.objects.create(name='Admin', code='admin')


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(username='visitor', password='pass12345')


@pytest.fixture
def admin_user(user, admin_group):
    admin_group.users.add(user)
    return user


@pytest.fixture
def make_layout(theme):
    def make(file_name, **session_kwargs):
        return Layout.objects.create(
            theme=theme,
            file_name=file_name,
            settings={'components': session(**session_kwargs)},
        )
    return make


@pytest.fixture
def make_cms_page(theme):
    def make(file_name, layout=None, **session_kwargs):
        settings = {'components': session(**session_kwargs)}
        if layout:
            settings['layout'] = layout
        return CmsPage.objects.create(
            theme=theme,
            file_name=file_name,
            title=file_name.title(),
            url=f'/{file_name}',
            settings=settings,
        )
    return make


@pytest.fixture
def make_static_page(theme):
    def make(file_name, layout=None, **session_kwargs):
        components = session(**session_kwargs)
        if layout:
            components['viewBag'] = {'layout': layout}
        return StaticPage.objects.create(
            theme=theme,
            file_name=file_name,
            title=file_name.title(),
            url=f'/{file_name}',
            settings={'components': components},
        )
    return make


@pytest.fixture
def make_menu(theme):
    def make(items, code='main-menu'):
        return Menu.objects.create(theme=theme, code=code, name=code.title(), items=items)
    return make
