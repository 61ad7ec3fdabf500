"""Route, RouteMatch, Redirect, and MatchResult."""

import re
from dataclasses import dataclass, field
from typing import Any

from babelroute.errors import ConfigurationError


@dataclass(slots=True)
class Route:
    """A compiled route stored in the route table.

    Returned by ``Router.add_route()`` so callers can attach middleware
    and flags before the router is frozen. The core never interprets
    ``controller``, ``middleware`` or ``sensitive``.
    """

    methods: frozenset[str]
    template: str
    regex: str
    pattern: re.Pattern[str]
    controller: str
    name: str = ""
    lang: str = ""
    middleware_stack: list[tuple[str, dict[str, Any]]] = field(default_factory=list)
    is_sensitive: bool = False
    frozen: bool = field(default=False, repr=False, compare=False)

    def middleware(self, controller: str, data: dict[str, Any] | None = None) -> "Route":
        """Attach a middleware controller id with optional data. Chainable."""
        self._check_mutable()
        self.middleware_stack.append((controller, dict(data or {})))
        return self

    def sensitive(self, flag: bool = True) -> "Route":
        """Mark the route as sensitive. Chainable."""
        self._check_mutable()
        self.is_sensitive = flag
        return self

    def allows(self, method: str) -> bool:
        """Whether *method* (any case) is one of this route's methods."""
        return method.lower() in self.methods

    def _check_mutable(self) -> None:
        if self.frozen:
            msg = f"Route {self.template!r} cannot be modified after the router is frozen."
            raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a structural route match.

    ``params`` holds one entry per capturing group, in capture order.
    A group that did not take part in the match is ``None``; a group
    that matched the empty string is ``""``.
    """

    route: Route
    params: tuple[str | None, ...]
    base_uri: str = "/"
    server: str = ""

    @property
    def methods(self) -> frozenset[str]:
        return self.route.methods

    @property
    def regex(self) -> str:
        return self.route.regex

    @property
    def controller(self) -> str:
        return self.route.controller

    @property
    def name(self) -> str:
        return self.route.name

    @property
    def lang(self) -> str:
        return self.route.lang

    @property
    def middleware(self) -> tuple[tuple[str, dict[str, Any]], ...]:
        return tuple(self.route.middleware_stack)

    @property
    def sensitive(self) -> bool:
        return self.route.is_sensitive

    @property
    def base_url(self) -> str:
        """``scheme://host`` followed by the app base URI."""
        return join_base_url(self.server, self.base_uri)


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect signal. Emitting the response is up to the caller."""

    url: str
    status: int = 301


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of one ``Router.match()`` call.

    ========  =========================  ===============
    status    match                      redirect
    ========  =========================  ===============
    200       matched route              ``None``
    403       route matched by path only ``None``
    404       ``None``                   ``None``
    301       ``None``                   ``Redirect``
    ========  =========================  ===============
    """

    status: int
    match: RouteMatch | None = None
    redirect: Redirect | None = None

    @property
    def is_match(self) -> bool:
        return self.status == 200

    @property
    def is_method_mismatch(self) -> bool:
        return self.status == 403

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    @property
    def is_redirect(self) -> bool:
        return self.redirect is not None


def join_base_url(server: str, base_uri: str) -> str:
    """Join ``scheme://host`` and a base URI without doubling slashes."""
    return server.rstrip("/") + base_uri
