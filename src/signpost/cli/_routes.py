"""``signpost routes`` — list registered routes.

Loads a route mapping and prints every entry with method, template, and
handler, in the order they are tried.
"""

import argparse

from signpost.cli._resolve import load_router_or_exit


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATH, and HANDLER for ``args.routes``."""
    router = load_router_or_exit(args)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (method, template, handler)
    rows: list[tuple[str, str, str]] = [
        (method.upper(), entry.pattern, str(entry.callback)) for method, entry in routes
    ]

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, handler in rows:
        print(fmt.format(method, path, handler))
