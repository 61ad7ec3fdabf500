"""Babelroute exception hierarchy.

Shared across the route table, the router, and the ASGI adapter so every
module raises and catches the same types.
"""

from dataclasses import dataclass
from http import HTTPStatus


class BabelrouteError(Exception):
    """Base for all babelroute-specific errors."""


class ConfigurationError(BabelrouteError):
    """Raised when router configuration is invalid.

    Typically raised while routes are being registered, before serving.
    """


class DuplicateRouteName(ConfigurationError):  # noqa: N818 — reads as a condition
    """A named route was registered twice in the same language."""

    def __init__(self, name: str, lang: str) -> None:
        self.name = name
        self.lang = lang
        super().__init__(f"Route name {name!r} is already registered for language {lang!r}")


class InvalidRoutePattern(ConfigurationError):  # noqa: N818 — reads as a condition
    """A route template compiled to an invalid regular expression."""

    def __init__(self, template: str, regex: str, reason: str) -> None:
        self.template = template
        self.regex = regex
        super().__init__(f"Route {template!r} compiles to invalid pattern {regex!r}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(BabelrouteError):
    """An error that maps directly to an HTTP status code.

    Raised by ``Router.resolve()`` and turned into a response by the
    ASGI adapter.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodMismatch(HTTPError):  # noqa: N818
    """403 — a route matched the path but not the request method.

    Includes an ``Allow`` header listing the route's methods and embeds
    them in the detail string for developer visibility.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(m.upper() for m in allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=403,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )


class SlashRedirect(HTTPError):  # noqa: N818
    """301 (or the configured 3xx) — the path lacks its canonical trailing slash."""

    def __init__(self, location: str, status: int = 301) -> None:
        super().__init__(
            status=status,
            detail=f"{HTTPStatus(status).phrase}: {location}",
            headers=(("Location", location),),
        )

    @property
    def location(self) -> str:
        return dict(self.headers)["Location"]
