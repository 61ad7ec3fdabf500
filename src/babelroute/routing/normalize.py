"""Request path normalization.

Strips the query string and the app base URI from a raw request path,
decides whether a trailing-slash redirect is needed, and finds the
language segment embedded in the path.
"""

import re
from collections.abc import Container

from babelroute.routing.route import Redirect

_LANG_SEGMENT = re.compile(r"/([a-z]{2})/", re.IGNORECASE)


def strip_query(raw_path: str) -> str:
    """Return *raw_path* up to, not including, the first ``?``."""
    return raw_path.partition("?")[0]


def under_base_uri(raw_path: str, base_uri: str) -> bool:
    """True if *raw_path* is *base_uri* itself or lies below it.

    ``/app`` covers ``/app`` and ``/app/...`` but not ``/application``.
    """
    prefix = base_uri.rstrip("/")
    if not prefix:
        return True
    path = strip_query(raw_path)
    return path == prefix or path.startswith(prefix + "/")


def request_path(raw_path: str, base_uri: str) -> str:
    """Remove the base URI prefix from *raw_path* by length.

    Check ``under_base_uri`` first. The root base ``"/"`` removes
    nothing so the path keeps its leading slash.
    """
    prefix = base_uri.rstrip("/")
    return strip_query(raw_path)[len(prefix) :]


def is_canonical(path: str) -> bool:
    """True if *path* ends with exactly one ``/``."""
    return path.endswith("/") and not path.endswith("//")


def slash_redirect(
    path: str,
    base_uri: str,
    query: str = "",
    status: int = 301,
) -> Redirect | None:
    """Return a redirect to the single-trailing-slash form of *path*.

    Returns ``None`` when *path* is already canonical. *query* is
    reattached as-is, without its leading ``?``.
    """
    if is_canonical(path):
        return None
    location = base_uri.rstrip("/") + path.rstrip("/") + "/"
    if query:
        location = f"{location}?{query}"
    return Redirect(location, status)


def lang_from_path(path: str, languages: Container[str]) -> str:
    """Return the language code embedded in *path*, lower-cased.

    Only the first ``/xx/`` segment is considered. If it is not one of
    *languages*, the result is ``""`` and the caller falls back to the
    default language.
    """
    found = _LANG_SEGMENT.search(path)
    if found is None:
        return ""
    lang = found.group(1).lower()
    return lang if lang in languages else ""
