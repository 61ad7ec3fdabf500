"""Babelroute — a multilingual regex URL router.

Routes are regular expressions bound to HTTP methods, a controller id,
an optional name, and a language. Every language but the default one is
addressed with a ``/xx`` URI prefix.

Basic usage::

    from babelroute import Router

    router = Router(default_lang="en")
    router.add_route(["get"], "/", "Home")
    router.add_route(["get"], "/user/([0-9]+)/", "Users:show", name="user")
    router.add_route(["get"], "/usuario/([0-9]+)/", "Users:show", name="user", lang="es")
    router.freeze()

    result = router.match("GET", "/es/usuario/7/")
    result.status        # 200
    result.match.params  # ("7",)
"""

__version__ = "0.1.0"
__all__ = [
    "BabelrouteError",
    "ConfigurationError",
    "DuplicateRouteName",
    "HTTPError",
    "InvalidRoutePattern",
    "MatchResult",
    "MethodMismatch",
    "NotFound",
    "Redirect",
    "Request",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "RoutingApp",
    "SlashRedirect",
    "get_http_code",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "BabelrouteError": "babelroute.errors",
    "ConfigurationError": "babelroute.errors",
    "DuplicateRouteName": "babelroute.errors",
    "HTTPError": "babelroute.errors",
    "InvalidRoutePattern": "babelroute.errors",
    "MethodMismatch": "babelroute.errors",
    "NotFound": "babelroute.errors",
    "SlashRedirect": "babelroute.errors",
    "MatchResult": "babelroute.routing.route",
    "Redirect": "babelroute.routing.route",
    "Route": "babelroute.routing.route",
    "RouteMatch": "babelroute.routing.route",
    "Router": "babelroute.routing.router",
    "RouterConfig": "babelroute.config",
    "Request": "babelroute.http.request",
    "RoutingApp": "babelroute.asgi",
    "get_http_code": "babelroute.context",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import babelroute`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
