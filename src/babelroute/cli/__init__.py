"""Babelroute CLI — inspect and exercise a route table.

Entry point registered as ``babelroute`` in ``pyproject.toml``::

    [project.scripts]
    babelroute = "babelroute.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``babelroute`` command."""
    parser = argparse.ArgumentParser(
        prog="babelroute",
        description="Babelroute — a multilingual regex URL router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- babelroute routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp.urls:router)",
    )

    # -- babelroute match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a request against the routes")
    match_parser.add_argument(
        "router",
        help="Import string (e.g. myapp.urls:router)",
    )
    match_parser.add_argument("method", help="HTTP method (e.g. GET)")
    match_parser.add_argument("url", help="Request path or URL (e.g. /es/about/?page=2)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from babelroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from babelroute.cli._match import run_match

        run_match(args)
