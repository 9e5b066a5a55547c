"""Route helpers and an in-memory navigator.

The presentation layer owns real navigation. The gateway only needs to read the
current route and request a new one, so anything satisfying
``NavigatorProtocol`` can be plugged in.
"""

from __future__ import annotations

from urllib.parse import quote, urlsplit

# encodeURIComponent leaves these unescaped in addition to quote()'s defaults.
_URI_COMPONENT_SAFE = "!*'()"


def route_path(route: str) -> str:
    """Return the path part of a route, without query string or fragment."""
    return urlsplit(route).path or "/"


def is_auth_route(route: str, *, login_route: str, first_login_route: str) -> bool:
    """True when ``route`` is the login page or the first-login page."""
    path = route_path(route)
    return path == login_route or path.startswith(first_login_route)


def build_login_redirect(login_route: str, next_route: str) -> str:
    """Login URL carrying ``next_route`` so the user can resume after sign-in."""
    return f"{login_route}?next={quote(next_route, safe=_URI_COMPONENT_SAFE)}"


class InMemoryNavigator:
    """Navigator that records the route history instead of rendering pages."""

    def __init__(self, initial_route: str = "/") -> None:
        self._current_route = initial_route
        self.history: list[str] = []

    @property
    def current_route(self) -> str:
        return self._current_route

    def navigate_by_url(self, url: str) -> None:
        self.history.append(url)
        self._current_route = url
