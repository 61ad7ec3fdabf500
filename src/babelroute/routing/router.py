"""Multilingual regex router.

Routes are registered during setup into per-language buckets and the
table is frozen before serving. Matching is a linear scan of one bucket
in registration order; the first route whose pattern matches wins.
"""

import logging
from collections.abc import Iterable
from typing import Any

from babelroute.config import RouterConfig
from babelroute.context import http_code_var
from babelroute.errors import MethodMismatch, NotFound, SlashRedirect
from babelroute.http.request import Request
from babelroute.routing.normalize import (
    lang_from_path,
    request_path,
    slash_redirect,
    under_base_uri,
)
from babelroute.routing.pattern import compile_route_pattern, lang_prefix
from babelroute.routing.route import MatchResult, Route, RouteMatch, join_base_url
from babelroute.routing.table import RouteTable

logger = logging.getLogger("babelroute.routing")


class Router:
    """Multilingual regex router.

    Usage::

        router = Router(default_lang="en")
        router.add_route(["get"], "/about", "Pages:about", name="about")
        router.add_route(["get"], "/acerca", "Pages:about", name="about", lang="es")
        router.freeze()

        result = router.match("GET", "/es/acerca/")
        result.status            # 200
        result.match.controller  # "Pages:about"
    """

    __slots__ = ("config", "table")

    def __init__(self, config: RouterConfig | None = None, **overrides: Any) -> None:
        if config is None:
            config = RouterConfig(**overrides)
        elif overrides:
            msg = "Pass either a RouterConfig or keyword overrides, not both."
            raise TypeError(msg)
        self.config = config
        self.table = RouteTable()

    # -- Registration --

    def add_route(
        self,
        methods: Iterable[str],
        route: str,
        controller: str,
        name: str = "",
        lang: str = "",
    ) -> Route:
        """Register a route and return its handle.

        Args:
            methods: HTTP methods, any case, e.g. ``["get", "post"]``.
            route: Regex template, e.g. ``"/user/([0-9]+)/"``. Leading and
                trailing slashes are optional.
            controller: Opaque handler id, e.g. ``"Users:show"``.
            name: Optional name, unique within the language.
            lang: Language code. Defaults to ``config.default_lang``.

        Raises:
            DuplicateRouteName: *name* is already used in *lang*.
            InvalidRoutePattern: the template is not a valid regex.
            ConfigurationError: the router is frozen.
        """
        default_lang = self.config.default_lang.lower()
        lang = (lang or default_lang).lower()

        prefix = ""
        if self.config.default_lang_in_uri or lang != default_lang:
            prefix = lang_prefix(lang)

        regex, pattern = compile_route_pattern(
            route, prefix, case_sensitive=self.config.case_sensitive
        )
        compiled = Route(
            methods=frozenset(m.lower() for m in methods),
            template=route,
            regex=regex,
            pattern=pattern,
            controller=controller,
            name=name,
            lang=lang,
        )
        self.table.add(compiled)
        logger.debug(
            "Registered %s %s -> %s (lang=%s)",
            sorted(compiled.methods),
            regex,
            controller,
            compiled.lang,
        )
        return compiled

    def freeze(self) -> None:
        """End registration. Routes can no longer be added or modified."""
        self.table.freeze()

    @property
    def routes(self) -> list[Route]:
        """All registered routes, grouped by language in registration order."""
        return list(self.table)

    @property
    def languages(self) -> frozenset[str]:
        return self.table.languages

    def get_route(self, name: str, lang: str = "") -> Route | None:
        """Look up a named route. *lang* defaults to the default language."""
        return self.table.get(name, (lang or self.config.default_lang).lower())

    # -- URLs --

    def base_url(self, scheme: str, host: str) -> str:
        """Return the base URL of the app, e.g. ``https://example.com/app``."""
        return join_base_url(f"{scheme}://{host}", self.config.base_uri)

    def resolve_lang(self, path: str) -> str:
        """Language of a normalized request path, falling back to the default."""
        return lang_from_path(path, self.table.languages) or self.config.default_lang.lower()

    # -- Matching --

    def match(self, method: str, path: str, query: str = "", *, server: str = "") -> MatchResult:
        """Match a request against the route table.

        *path* is the raw request path; anything from the first ``?`` on
        is treated as the query string. *server* (``scheme://host``) is
        only carried into the result for ``RouteMatch.base_url``.

        Returns a ``MatchResult`` whose status is 200 (matched), 403 (path
        matched, method did not), 404 (nothing matched) or the redirect
        status when the path is not in canonical trailing-slash form. The
        status is also published to ``babelroute.context.http_code_var``.
        """
        result = self._match(method, path, query, server)
        http_code_var.set(result.status)
        return result

    def match_request(self, request: Request) -> MatchResult:
        """Match a ``Request`` read from the hosting environment."""
        return self.match(request.method, request.path, request.query.raw, server=request.server)

    def resolve(self, method: str, path: str, query: str = "", *, server: str = "") -> RouteMatch:
        """Match a request, raising instead of returning non-200 outcomes.

        Returns a ``RouteMatch`` on success.
        Raises ``SlashRedirect`` if the path needs a trailing-slash redirect.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodMismatch`` if the path matches but the method doesn't.
        """
        result = self.match(method, path, query, server=server)
        if result.redirect is not None:
            raise SlashRedirect(result.redirect.url, result.redirect.status)
        if result.match is None:
            raise NotFound(f"No route matches {method} {path!r}")
        if result.status == 403:
            raise MethodMismatch(result.match.methods)
        return result.match

    @property
    def http_code(self) -> int:
        """Status of the last ``match()`` in the current context."""
        return http_code_var.get()

    def _match(self, method: str, raw_path: str, query: str, server: str) -> MatchResult:
        raw_path, _, embedded_query = raw_path.partition("?")
        query = query or embedded_query
        if not under_base_uri(raw_path, self.config.base_uri):
            logger.debug("404 %s %s (outside %s)", method, raw_path, self.config.base_uri)
            return MatchResult(status=404)
        path = request_path(raw_path, self.config.base_uri)

        redirect = slash_redirect(path, self.config.base_uri, query, self.config.redirect_status)
        if redirect is not None:
            logger.debug("Redirecting %r to %r", raw_path, redirect.url)
            return MatchResult(status=redirect.status, redirect=redirect)

        lang = self.resolve_lang(path)
        request_method = method.lower()

        for route in self.table.bucket(lang):
            found = route.pattern.fullmatch(path)
            if found is None:
                continue

            status = 200 if request_method in route.methods else 403
            route_match = RouteMatch(
                route=route,
                params=found.groups(),
                base_uri=self.config.base_uri,
                server=server,
            )
            logger.debug("%d %s %s -> %s", status, method, path, route.controller)
            return MatchResult(status=status, match=route_match)

        logger.debug("404 %s %s (lang=%s)", method, path, lang)
        return MatchResult(status=404)
