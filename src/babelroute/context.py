"""Request-scoped match status via ContextVar.

Provides:
- ``http_code_var``: status of the last ``Router.match()`` in this task/thread.
- ``get_http_code()``: read it.

``MatchResult.status`` carries the same value and is the preferred way
to read it. The ContextVar exists for callers that match in one place
and read the status in another.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. Concurrent requests never see each other's status.
"""

from contextvars import ContextVar

http_code_var: ContextVar[int] = ContextVar("babelroute_http_code", default=404)
"""Status of the most recent match: 200, 403, 404, or a redirect code."""


def get_http_code() -> int:
    """Return the status of the last match in the current context.

    Defaults to 404 when nothing has been matched yet.
    """
    return http_code_var.get()
