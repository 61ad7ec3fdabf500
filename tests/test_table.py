"""Tests for babelroute.routing.table — per-language route buckets."""

import pytest

from babelroute.errors import ConfigurationError, DuplicateRouteName
from babelroute.routing.pattern import compile_route_pattern
from babelroute.routing.route import Route
from babelroute.routing.table import RouteTable


def _route(template: str, controller: str = "Page", name: str = "", lang: str = "en") -> Route:
    regex, pattern = compile_route_pattern(template)
    return Route(
        methods=frozenset({"get"}),
        template=template,
        regex=regex,
        pattern=pattern,
        controller=controller,
        name=name,
        lang=lang,
    )


class TestRouteTableAdd:
    def test_returns_route(self) -> None:
        table = RouteTable()
        route = _route("/about")
        assert table.add(route) is route

    def test_bucket_keeps_insertion_order(self) -> None:
        table = RouteTable()
        first = table.add(_route("/a", name="a"))
        second = table.add(_route("/b"))
        third = table.add(_route("/c", name="c"))
        assert table.bucket("en") == (first, second, third)

    def test_buckets_are_per_language(self) -> None:
        table = RouteTable()
        en = table.add(_route("/about", lang="en"))
        es = table.add(_route("/acerca", lang="es"))
        assert table.bucket("en") == (en,)
        assert table.bucket("es") == (es,)

    def test_unknown_language_is_empty(self) -> None:
        table = RouteTable()
        table.add(_route("/about"))
        assert table.bucket("fr") == ()

    def test_unnamed_duplicates_allowed(self) -> None:
        table = RouteTable()
        table.add(_route("/about"))
        table.add(_route("/about"))
        assert len(table.bucket("en")) == 2


class TestRouteTableNames:
    def test_duplicate_name_rejected(self) -> None:
        table = RouteTable()
        table.add(_route("/about", name="about"))
        with pytest.raises(DuplicateRouteName) as exc_info:
            table.add(_route("/about-us", name="about"))
        assert exc_info.value.name == "about"
        assert exc_info.value.lang == "en"

    def test_rejected_route_not_stored(self) -> None:
        table = RouteTable()
        original = table.add(_route("/about", name="about"))
        with pytest.raises(DuplicateRouteName):
            table.add(_route("/about-us", name="about"))
        assert table.bucket("en") == (original,)
        assert table.get("about", "en") is original

    def test_same_name_in_other_language(self) -> None:
        table = RouteTable()
        table.add(_route("/about", name="about", lang="en"))
        es = table.add(_route("/acerca", name="about", lang="es"))
        assert table.get("about", "es") is es

    def test_get_missing(self) -> None:
        table = RouteTable()
        assert table.get("about", "en") is None
        assert table.get("about", "fr") is None

    def test_duplicate_name_is_configuration_error(self) -> None:
        assert issubclass(DuplicateRouteName, ConfigurationError)


class TestRouteTableLanguages:
    def test_empty(self) -> None:
        assert RouteTable().languages == frozenset()

    def test_language_present_after_add(self) -> None:
        table = RouteTable()
        table.add(_route("/about", lang="en"))
        table.add(_route("/acerca", lang="es"))
        assert table.languages == frozenset({"en", "es"})
        assert table.has_language("ES") is True
        assert table.has_language("fr") is False


class TestRouteTableFreeze:
    def test_add_after_freeze_raises(self) -> None:
        table = RouteTable()
        table.freeze()
        with pytest.raises(ConfigurationError, match="frozen"):
            table.add(_route("/about"))

    def test_freeze_locks_routes(self) -> None:
        table = RouteTable()
        route = table.add(_route("/about"))
        table.freeze()
        assert table.frozen is True
        with pytest.raises(ConfigurationError):
            route.middleware("Auth")

    def test_frozen_bucket_is_reused(self) -> None:
        table = RouteTable()
        first = table.add(_route("/about"))
        second = table.add(_route("/contact"))
        table.freeze()
        assert table.bucket("en") == (first, second)
        assert table.bucket("en") is table.bucket("en")
        assert table.bucket("fr") == ()


class TestRouteTableIteration:
    def test_iter_and_len(self) -> None:
        table = RouteTable()
        a = table.add(_route("/a", lang="en"))
        b = table.add(_route("/b", lang="es"))
        c = table.add(_route("/c", lang="en"))
        assert list(table) == [a, c, b]
        assert len(table) == 3
