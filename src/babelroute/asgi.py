"""ASGI adapter — runs the router in front of a dispatcher.

Reads the request from the ASGI scope, emits the trailing-slash redirect
and the 404 / 403 responses itself, and hands matched routes to a
user-supplied dispatcher that turns a controller id into application
logic.
"""

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

from babelroute.errors import ConfigurationError, HTTPError, MethodMismatch, NotFound, SlashRedirect
from babelroute.http.request import Request
from babelroute.routing.route import RouteMatch
from babelroute.routing.router import Router

logger = logging.getLogger("babelroute.asgi")

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
Dispatch: TypeAlias = Callable[[RouteMatch, Scope, Receive, Send], Awaitable[None]]


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    return not (100 <= status < 200 or status in {204, 304})


async def send_error(exc: HTTPError, send: Send) -> None:
    """Translate an ``HTTPError`` into ASGI send() calls (plain text body)."""
    body = exc.detail.encode("utf-8") if _body_allowed(exc.status) else b""
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", b"text/plain; charset=utf-8"),
    ]
    for name, value in exc.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": exc.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )


class RoutingApp:
    """ASGI application that routes requests with a ``Router``.

    Usage::

        async def dispatch(match, scope, receive, send):
            handler = CONTROLLERS[match.controller]
            await handler(match.params, scope, receive, send)

        app = RoutingApp(router, dispatch)

    The router is frozen on construction.
    """

    __slots__ = ("dispatch", "router")

    def __init__(self, router: Router, dispatch: Dispatch) -> None:
        router.freeze()
        self.router = router
        self.dispatch = dispatch

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            msg = f"RoutingApp only handles 'http' scopes, got {scope['type']!r}"
            raise ConfigurationError(msg)

        request = Request.from_asgi(scope)
        result = self.router.match_request(request)

        if result.redirect is not None:
            logger.debug("%d %s -> %s", result.status, request.url, result.redirect.url)
            await send_error(SlashRedirect(result.redirect.url, result.redirect.status), send)
            return

        if result.match is None:
            logger.debug("404 %s %s", request.method, request.url)
            await send_error(NotFound(f"No route matches {request.method} {request.path!r}"), send)
            return

        if not result.is_match:
            logger.debug("403 %s %s", request.method, request.url)
            await send_error(MethodMismatch(result.match.methods), send)
            return

        await self.dispatch(result.match, scope, receive, send)
