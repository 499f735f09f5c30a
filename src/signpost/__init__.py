"""Signpost — a request router for class-based handlers.

Maps an HTTP method and URL path to a ``(controller, action)`` pair and
the path parameters encoded in the URL.

Basic usage::

    from signpost import get_instance

    router = get_instance()
    router.add_routes({
        "get": {
            "/": [HomeController, "index"],
            "users/{id:int}": [UserController, "show"],
        },
        "api": {
            "users/{name}": ["myapp.api:UserApi", "lookup"],
        },
    })

    route = router.resolve("GET", "/users/42")
    getattr(route.controller(), route.action)(**route.params)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "CompiledRoute",
    "ConfigurationError",
    "HTTPError",
    "InvalidCallback",
    "InvalidHttpMethod",
    "InvalidRoutesList",
    "InvalidTemplate",
    "NotFound",
    "Route",
    "Router",
    "RouterConfig",
    "SignpostError",
    "get_instance",
    "unset_instance",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import signpost`` fast while providing a clean top-level API.
    """
    if name in ("Router", "get_instance", "unset_instance"):
        from signpost.routing import router as _router

        return getattr(_router, name)

    if name in ("Route", "CompiledRoute"):
        from signpost.routing import route as _route

        return getattr(_route, name)

    if name == "RouterConfig":
        from signpost.config import RouterConfig

        return RouterConfig

    if name in (
        "ConfigurationError",
        "HTTPError",
        "InvalidCallback",
        "InvalidHttpMethod",
        "InvalidRoutesList",
        "InvalidTemplate",
        "NotFound",
        "SignpostError",
    ):
        from signpost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
