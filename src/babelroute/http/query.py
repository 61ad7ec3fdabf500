"""Query string carried alongside the request path.

Routing only needs the raw string, which the trailing-slash redirect
reattaches untouched. Field access parses it on first use.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Read-only view of a query string.

    Indexing gives the first value of a field; ``get_list`` gives all of
    them. Blank values are kept.
    """

    __slots__ = ("_fields", "_raw")

    def __init__(self, query_string: str | bytes = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        self._raw = query_string.removeprefix("?")
        self._fields: dict[str, list[str]] | None = None

    @property
    def raw(self) -> str:
        """The query string as received, without the leading ``?``."""
        return self._raw

    @property
    def _parsed(self) -> dict[str, list[str]]:
        if self._fields is None:
            self._fields = parse_qs(self._raw, keep_blank_values=True)
        return self._fields

    def __getitem__(self, key: str) -> str:
        return self._parsed[key][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._parsed)

    def __len__(self) -> int:
        return len(self._parsed)

    def __bool__(self) -> bool:
        return bool(self._raw)

    def __repr__(self) -> str:
        return f"QueryParams({dict(self)!r})"

    def get_list(self, key: str) -> list[str]:
        return list(self._parsed.get(key, ()))
