"""Tests for babelroute.errors — exception hierarchy and error messages."""

import pytest

from babelroute.errors import (
    BabelrouteError,
    ConfigurationError,
    DuplicateRouteName,
    HTTPError,
    InvalidRoutePattern,
    MethodMismatch,
    NotFound,
    SlashRedirect,
)


class TestHierarchy:
    def test_http_error_is_babelroute_error(self) -> None:
        assert issubclass(HTTPError, BabelrouteError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_method_mismatch_is_http_error(self) -> None:
        assert issubclass(MethodMismatch, HTTPError)

    def test_slash_redirect_is_http_error(self) -> None:
        assert issubclass(SlashRedirect, HTTPError)

    def test_configuration_error_is_babelroute_error(self) -> None:
        assert issubclass(ConfigurationError, BabelrouteError)

    def test_registration_errors_are_configuration_errors(self) -> None:
        assert issubclass(DuplicateRouteName, ConfigurationError)
        assert issubclass(InvalidRoutePattern, ConfigurationError)


class TestHTTPError:
    def test_status_and_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad request")
        assert err.status == 400
        assert err.detail == "Bad request"

    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad request")) == "400: Bad request"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_custom_detail(self) -> None:
        assert NotFound("Page /foo/ not found").detail == "Page /foo/ not found"


class TestMethodMismatch:
    def test_defaults(self) -> None:
        err = MethodMismatch(frozenset({"get", "post"}))
        assert err.status == 403
        assert "GET" in err.detail
        assert "POST" in err.detail

    def test_allow_header_sorted_upper_case(self) -> None:
        err = MethodMismatch(frozenset({"post", "get", "delete"}))
        assert dict(err.headers)["Allow"] == "DELETE, GET, POST"

    def test_custom_detail(self) -> None:
        assert MethodMismatch(frozenset({"get"}), detail="Nope").detail == "Nope"

    def test_catchable_as_http_error(self) -> None:
        with pytest.raises(HTTPError):
            raise MethodMismatch(frozenset({"get"}))


class TestSlashRedirect:
    def test_location(self) -> None:
        err = SlashRedirect("/about/?x=1")
        assert err.status == 301
        assert err.location == "/about/?x=1"
        assert dict(err.headers)["Location"] == "/about/?x=1"

    def test_custom_status(self) -> None:
        assert SlashRedirect("/a/", 308).status == 308

    def test_detail_uses_reason_of_default_status(self) -> None:
        assert SlashRedirect("/a/").detail == "Moved Permanently: /a/"

    @pytest.mark.parametrize(
        ("status", "reason"),
        [(302, "Found"), (307, "Temporary Redirect"), (308, "Permanent Redirect")],
    )
    def test_detail_uses_reason_of_actual_status(self, status: int, reason: str) -> None:
        assert SlashRedirect("/a/", status).detail == f"{reason}: /a/"


class TestRegistrationErrors:
    def test_duplicate_route_name(self) -> None:
        err = DuplicateRouteName("about", "es")
        assert err.name == "about"
        assert err.lang == "es"
        assert "'about'" in str(err)
        assert "'es'" in str(err)

    def test_invalid_route_pattern(self) -> None:
        err = InvalidRoutePattern("/(x", "/(x/", "missing )")
        assert err.template == "/(x"
        assert err.regex == "/(x/"
        assert "missing )" in str(err)


class TestErrorExports:
    """Error types are importable from the top-level babelroute package."""

    @pytest.mark.parametrize(
        "cls",
        [
            BabelrouteError,
            ConfigurationError,
            DuplicateRouteName,
            HTTPError,
            InvalidRoutePattern,
            MethodMismatch,
            NotFound,
            SlashRedirect,
        ],
    )
    def test_exported(self, cls: type) -> None:
        import babelroute

        assert getattr(babelroute, cls.__name__) is cls
