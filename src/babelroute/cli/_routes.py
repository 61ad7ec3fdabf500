"""``babelroute routes`` — list registered routes.

Resolves an import string to a Router and prints every route with
language, methods, compiled pattern, and controller.
"""

import argparse

from babelroute.cli._resolve import load_router


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of LANG, METHODS, PATTERN, and CONTROLLER."""
    router = load_router(args.router)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        methods_str = ", ".join(m.upper() for m in sorted(route.methods)) or "-"
        controller = route.controller
        if route.name:
            controller = f"{controller} ({route.name})"
        rows.append((route.lang, methods_str, route.regex, controller))

    max_lang = max(max(len(r[0]) for r in rows), 4)  # "LANG" header
    max_methods = max(max(len(r[1]) for r in rows), 7)  # "METHODS" header
    max_regex = max(max(len(r[2]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_lang}}}  {{:<{max_methods}}}  {{:<{max_regex}}}  {{}}"
    print(fmt.format("LANG", "METHODS", "PATTERN", "CONTROLLER"))
    sep_len = max_lang + max_methods + max_regex + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
