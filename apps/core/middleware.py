"""
Core middleware.
"""
from .auth import bind_user


class CurrentUserMiddleware:
    """
    Bind request.user for the duration of the request.

    Must come after AuthenticationMiddleware. Anything that asks
    apps.core.auth for the current visitor (menu visibility checks, mostly)
    sees this user until the response is returned.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        user = getattr(request, 'user', None)
        if user is None:
            return self.get_response(request)

        with bind_user(user):
            return self.get_response(request)
