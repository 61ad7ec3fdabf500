"""Immutable request metadata read from the hosting environment.

Only what routing needs: method, path, query string, scheme, and host.
Factories cover ASGI scopes, WSGI environs, and plain URLs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlsplit

from babelroute.http.query import QueryParams

# RFC 3986 pchar plus "/", minus "%": a decoded path never holds escapes.
_PATH_SAFE = "/:@!$&'()*+,;=~"


@dataclass(frozen=True, slots=True)
class Request:
    """The routing view of an HTTP request.

    ``path`` never contains the query string; ``query`` holds it.
    """

    method: str
    path: str
    query: QueryParams
    scheme: str = "http"
    host: str = ""

    @property
    def server(self) -> str:
        """Scheme and host, e.g. ``https://example.com``."""
        return f"{self.scheme}://{self.host}"

    @property
    def url(self) -> str:
        """Request path plus query string."""
        if self.query.raw:
            return f"{self.path}?{self.query.raw}"
        return self.path

    # -- Factories --

    @classmethod
    def from_url(cls, method: str, url: str) -> Request:
        """Create a Request from a method and a path or absolute URL."""
        parts = urlsplit(url)
        return cls(
            method=method,
            path=parts.path or "/",
            query=QueryParams(parts.query),
            scheme=parts.scheme or "http",
            host=parts.netloc,
        )

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope.

        The path is the percent-encoded ``raw_path`` when the server sends
        it, otherwise the decoded ``path`` re-quoted, so matching and the
        redirect ``Location`` only ever see ASCII.
        """
        raw_path = scope.get("raw_path")
        if raw_path:
            path = raw_path.decode("latin-1").partition("?")[0]
        else:
            path = quote(scope["path"], safe=_PATH_SAFE)
        host = ""
        for name, value in scope.get("headers", ()):
            if name.lower() == b"host":
                host = value.decode("latin-1")
                break
        if not host and scope.get("server"):
            server_host, port = scope["server"]
            host = server_host if port in (None, 80, 443) else f"{server_host}:{port}"
        return cls(
            method=scope["method"],
            path=path,
            query=QueryParams(scope.get("query_string", b"")),
            scheme=scope.get("scheme", "http"),
            host=host,
        )

    @classmethod
    def from_wsgi(cls, environ: Mapping[str, Any]) -> Request:
        """Create a Request from a WSGI environ.

        The host is ``SERVER_NAME``, then ``HTTP_HOST``, then
        ``SERVER_ADDR``. The path is ``SCRIPT_NAME`` + ``PATH_INFO``.
        The scheme is ``https`` when ``HTTPS`` is set to anything but
        ``off``, otherwise ``wsgi.url_scheme``.
        """
        https = environ.get("HTTPS", "")
        if https and https.lower() != "off":
            scheme = "https"
        else:
            scheme = environ.get("wsgi.url_scheme", "http")
        host = (
            environ.get("SERVER_NAME")
            or environ.get("HTTP_HOST")
            or environ.get("SERVER_ADDR", "")
        )
        return cls(
            method=environ["REQUEST_METHOD"],
            path=(environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")) or "/",
            query=QueryParams(environ.get("QUERY_STRING", "")),
            scheme=scheme,
            host=host,
        )
