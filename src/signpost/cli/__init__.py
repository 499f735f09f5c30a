"""Signpost CLI — inspect and exercise a route table.

Entry point registered as ``signpost`` in ``pyproject.toml``::

    [project.scripts]
    signpost = "signpost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``signpost`` command."""
    parser = argparse.ArgumentParser(
        prog="signpost",
        description="Signpost — a request router for class-based handlers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- signpost routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "routes",
        help="Import string of a route mapping (e.g. myapp.routes:ROUTES)",
    )

    # -- signpost resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve one request method and path"
    )
    resolve_parser.add_argument(
        "routes",
        help="Import string of a route mapping (e.g. myapp.routes:ROUTES)",
    )
    resolve_parser.add_argument("method", help="HTTP method (e.g. GET)")
    resolve_parser.add_argument("path", help="Request path (e.g. /users/42)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from signpost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from signpost.cli._match import run_resolve

        run_resolve(args)
