"""
Identity lookups for the current visitor.

The request user is bound to a context variable by CurrentUserMiddleware
(or explicitly with bind_user) so code running below the view layer, such as
menu event receivers, can ask who is browsing without a request object.
"""
from contextlib import contextmanager
from contextvars import ContextVar
from typing import FrozenSet, Optional

from django.contrib.auth.models import AnonymousUser

_current_user: ContextVar[Optional[object]] = ContextVar('current_user', default=None)


def current_user():
    """Return the bound user, or an AnonymousUser when nothing is bound."""
    user = _current_user.get()
    if user is None:
        return AnonymousUser()
    return user


@contextmanager
def bind_user(user):
    token = _current_user.set(user)
    try:
        yield user
    finally:
        _current_user.reset(token)


def is_authenticated() -> bool:
    return bool(current_user().is_authenticated)


def current_user_group_codes() -> FrozenSet[str]:
    """Codes of the UserGroups the current user belongs to."""
    user = current_user()
    if not user.is_authenticated:
        return frozenset()

    from .models import UserGroup

    return frozenset(
        UserGroup.objects.filter(users=user).values_list('code', flat=True)
    )
