"""Route table import — resolves ``"module:attribute"`` strings to a Router.

Shared utility used by ``signpost routes`` and ``signpost resolve``.
"""

import argparse
import importlib
import sys
from collections.abc import Mapping

from signpost.errors import ConfigurationError
from signpost.routing.router import Router, get_instance, unset_instance


def load_router(import_string: str) -> Router:
    """Load a route mapping and register it on a fresh router.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"ROUTES"``. If the attribute is callable it is
    called with no arguments and must return the mapping.

    The process-wide router is reset first.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the attribute is neither a mapping nor a factory for one,
            or the factory raised.
        ConfigurationError: If the mapping fails route validation.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "ROUTES"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Mapping):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Mapping):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a route mapping"
        raise TypeError(msg)

    unset_instance()
    router = get_instance()
    router.add_routes(obj)
    return router


def load_router_or_exit(args: argparse.Namespace) -> Router:
    """``load_router(args.routes)``, printing the error and exiting 1 on failure."""
    try:
        return load_router(args.routes)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
