"""``signpost resolve`` — resolve one request against a route table."""

import argparse
import sys

from signpost.cli._resolve import load_router_or_exit
from signpost.errors import NotFound


def run_resolve(args: argparse.Namespace) -> None:
    """Print the handler, API flag, and params that ``args.path`` resolves to.

    Exits 1 with the error on stderr when nothing matches.
    """
    router = load_router_or_exit(args)

    try:
        route = router.resolve(args.method, args.path)
    except NotFound as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc

    controller = route.controller
    print(f"handler: {controller.__module__}.{controller.__qualname__}.{route.action}")
    print(f"api:     {'yes' if route.is_api else 'no'}")
    if route.params:
        print("params:")
        for name, value in route.params.items():
            print(f"  {name} = {value!r}")
