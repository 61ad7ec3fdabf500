"""``babelroute match`` — show how a request would be routed."""

import argparse

from babelroute.cli._resolve import load_router
from babelroute.http.request import Request


def run_match(args: argparse.Namespace) -> None:
    """Print the status and, when a route matched, its controller and params.

    Exits with status 1 when nothing matched.
    """
    router = load_router(args.router)
    request = Request.from_url(args.method, args.url)
    result = router.match_request(request)

    print(f"Status: {result.status}")
    if result.redirect is not None:
        print(f"Location: {result.redirect.url}")
        return
    if result.match is None:
        raise SystemExit(1)

    match = result.match
    print(f"Controller: {match.controller}")
    if match.name:
        print(f"Name: {match.name}")
    print(f"Lang: {match.lang}")
    print(f"Methods: {', '.join(m.upper() for m in sorted(match.methods))}")
    params = ", ".join("-" if p is None else repr(p) for p in match.params)
    print(f"Params: {params or '-'}")
