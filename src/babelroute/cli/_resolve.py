"""Locate the Router a CLI command should inspect.

Targets are written ``package.module:name``. ``name`` defaults to
``router`` and may also be a zero-argument function that builds one.
"""

import importlib
import sys

from babelroute.routing.router import Router

DEFAULT_ATTRIBUTE = "router"


def resolve_router(target: str) -> Router:
    """Import *target* and return the Router it names.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` when the target
    does not exist, and ``TypeError`` when it is not a Router and no
    factory produced one.
    """
    module_name, _, attribute = target.partition(":")
    obj = getattr(importlib.import_module(module_name), attribute or DEFAULT_ATTRIBUTE)

    if callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Calling {target!r} to build a router failed: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Router):
        msg = f"{target!r} is a {type(obj).__name__}, not a babelroute.Router instance"
        raise TypeError(msg)
    return obj


def load_router(target: str) -> Router:
    """Like ``resolve_router`` but reports the problem and exits with status 1."""
    try:
        return resolve_router(target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
