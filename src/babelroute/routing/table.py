"""Route table — compiled routes grouped into per-language buckets.

Routes are added during setup and the table is frozen before serving.
Bucket order is insertion order and is the match precedence.
"""

from collections.abc import Iterator

from babelroute.errors import ConfigurationError, DuplicateRouteName
from babelroute.routing.route import Route


class RouteTable:
    """Per-language route buckets plus the set of known languages.

    Usage::

        table = RouteTable()
        table.add(route)
        table.freeze()
        for route in table.bucket("es"):
            ...
    """

    __slots__ = ("_buckets", "_frozen", "_named", "_snapshot")

    def __init__(self) -> None:
        self._buckets: dict[str, list[Route]] = {}
        self._named: dict[str, dict[str, Route]] = {}
        self._frozen = False
        self._snapshot: dict[str, tuple[Route, ...]] = {}

    def add(self, route: Route) -> Route:
        """Store *route* in the bucket for ``route.lang``.

        Raises ``DuplicateRouteName`` if a route with the same non-empty
        name already exists in that language.
        """
        if self._frozen:
            msg = "Cannot add routes after the route table is frozen."
            raise ConfigurationError(msg)

        if route.name:
            names = self._named.setdefault(route.lang, {})
            if route.name in names:
                raise DuplicateRouteName(route.name, route.lang)
            names[route.name] = route

        self._buckets.setdefault(route.lang, []).append(route)
        return route

    def freeze(self) -> None:
        """Make the table and every stored route read-only."""
        self._frozen = True
        self._snapshot = {lang: tuple(routes) for lang, routes in self._buckets.items()}
        for route in self:
            route.frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def bucket(self, lang: str) -> tuple[Route, ...]:
        """Routes registered for *lang*, in insertion order.

        An unknown language yields an empty tuple. Once frozen, the same
        tuple is returned on every call.
        """
        if self._frozen:
            return self._snapshot.get(lang, ())
        return tuple(self._buckets.get(lang, ()))

    def get(self, name: str, lang: str) -> Route | None:
        """Look up a named route in *lang*."""
        return self._named.get(lang, {}).get(name)

    def has_language(self, lang: str) -> bool:
        return lang.lower() in self._buckets

    @property
    def languages(self) -> frozenset[str]:
        """Languages with at least one registered route."""
        return frozenset(self._buckets)

    def __iter__(self) -> Iterator[Route]:
        for routes in self._buckets.values():
            yield from routes

    def __len__(self) -> int:
        return sum(len(routes) for routes in self._buckets.values())
