"""Route registry and resolver.

One process-wide Router holds, per HTTP method, an ordered list of
compiled templates. Resolution scans them in registration order and the
first match wins::

    router = get_instance()
    router.get("users/{id:int}", [UserController, "show"])
    router.get("users/{name}", [UserController, "by_name"])

    route = router.resolve("GET", "/users/42")
    # Route(controller=UserController, action="show", params={"id": 42})

Registration is expected to finish before requests are resolved. There is
no internal locking.
"""

import logging
import re
from collections.abc import Iterator, Mapping

from signpost.config import RouterConfig
from signpost.errors import (
    ConfigurationError,
    InvalidHttpMethod,
    InvalidRoutesList,
    InvalidTemplate,
    NotFound,
)
from signpost.routing.callbacks import resolve_callback
from signpost.routing.route import CompiledRoute, Route
from signpost.routing.template import compile_template, normalize_path

logger = logging.getLogger("signpost.router")

_METHOD_NAME = re.compile(r"[A-Za-z][A-Za-z_-]*")

# Only get_instance() holds this; Router() without it is a programming error.
_CONSTRUCT = object()

_instance: "Router | None" = None


def _method_key(method: object) -> str:
    """Validate a method group name and return its stored (lower-case) form."""
    if not isinstance(method, str) or not _METHOD_NAME.fullmatch(method):
        msg = f"Invalid HTTP method {method!r}: expected a name like 'get', 'post' or 'api'"
        raise InvalidHttpMethod(msg)
    return method.lower()


class Router:
    """Ordered route registry with first-match resolution.

    Obtain the shared instance with ``get_instance()``; direct construction
    raises ``TypeError``.
    """

    __slots__ = ("_config", "_routes")

    def __init__(self, config: RouterConfig | None = None, *, _token: object = None) -> None:
        if _token is not _CONSTRUCT:
            msg = "Router cannot be instantiated directly; use signpost.get_instance()."
            raise TypeError(msg)
        self._config = config or RouterConfig()
        # method -> entries in registration order
        self._routes: dict[str, list[CompiledRoute]] = {}

    @property
    def config(self) -> RouterConfig:
        return self._config

    # -- Registration ------------------------------------------------------

    def _compile(self, path: object, target: object) -> CompiledRoute:
        """Validate one (path, target) pair without touching the registry."""
        callback = resolve_callback(target)
        if not isinstance(path, str):
            msg = f"Route template must be a string, got {path!r}"
            raise InvalidTemplate(msg, repr(path))
        template = compile_template(
            path,
            param_pattern=self._config.param_pattern,
            case_sensitive=self._config.case_sensitive,
        )
        return CompiledRoute(pattern=path, template=template, callback=callback)

    def add(self, method: str, path: str, target: object) -> CompiledRoute:
        """Register one route under *method*.

        Raises ``InvalidHttpMethod``, ``InvalidCallback`` or
        ``InvalidTemplate``; the registry is unchanged on failure.
        """
        key = _method_key(method)
        entry = self._compile(path, target)
        self._routes.setdefault(key, []).append(entry)
        logger.debug("Registered %s %r -> %s", key.upper(), path, entry.callback)
        return entry

    def get(self, path: str, target: object) -> CompiledRoute:
        return self.add("get", path, target)

    def post(self, path: str, target: object) -> CompiledRoute:
        return self.add("post", path, target)

    def put(self, path: str, target: object) -> CompiledRoute:
        return self.add("put", path, target)

    def patch(self, path: str, target: object) -> CompiledRoute:
        return self.add("patch", path, target)

    def delete(self, path: str, target: object) -> CompiledRoute:
        return self.add("delete", path, target)

    def head(self, path: str, target: object) -> CompiledRoute:
        return self.add("head", path, target)

    def options(self, path: str, target: object) -> CompiledRoute:
        return self.add("options", path, target)

    def api(self, path: str, target: object) -> CompiledRoute:
        """Register a route in the API group; it resolves with ``is_api=True``."""
        return self.add(self._config.api_group, path, target)

    def add_routes(self, routes: Mapping[str, Mapping[str, object]]) -> None:
        """Register a whole ``{method: {template: target}}`` mapping.

        Every entry is validated before any is stored: on error the registry
        is left exactly as it was.

        Raises ``InvalidRoutesList`` when *routes* or a per-method value is
        not a mapping, plus anything ``add()`` raises.
        """
        if not isinstance(routes, Mapping):
            msg = f"Routes list must be a mapping of method -> routes, got {type(routes).__name__}"
            raise InvalidRoutesList(msg)

        staged: dict[str, list[CompiledRoute]] = {}
        for method, entries in routes.items():
            if not isinstance(entries, Mapping):
                msg = (
                    f"Routes for method {method!r} must be a mapping of "
                    f"template -> target, got {type(entries).__name__}"
                )
                raise InvalidRoutesList(msg, method=str(method))
            key = _method_key(method)
            bucket = staged.setdefault(key, [])
            for path, target in entries.items():
                bucket.append(self._compile(path, target))

        for key, bucket in staged.items():
            self._routes.setdefault(key, []).extend(bucket)
            for entry in bucket:
                logger.debug("Registered %s %r -> %s", key.upper(), entry.pattern, entry.callback)

    # -- Resolution --------------------------------------------------------

    def resolve(self, method: str, path: str) -> Route:
        """Resolve a request method and path to a ``Route``.

        *method* is case-insensitive; *path* may carry leading and trailing
        separators. Raises ``NotFound`` when the method has no routes or
        none of its templates match.
        """
        key = method.lower()
        entries = self._routes.get(key)
        if not entries:
            raise NotFound()

        candidate = normalize_path(path)
        for entry in entries:
            params = entry.match(candidate)
            if params is None:
                continue
            logger.debug("Resolved %s %r -> %s", key.upper(), path, entry.callback)
            return Route(
                controller=entry.callback.controller,
                action=entry.callback.action,
                is_api=key == self._config.api_group.lower(),
                params=params,
            )
        raise NotFound()

    # -- Introspection -----------------------------------------------------

    @property
    def methods(self) -> tuple[str, ...]:
        """Registered method groups, in first-registration order."""
        return tuple(self._routes)

    @property
    def routes(self) -> list[tuple[str, CompiledRoute]]:
        """All ``(method, entry)`` pairs, in registration order per method."""
        return list(self._iter_routes())

    def _iter_routes(self) -> Iterator[tuple[str, CompiledRoute]]:
        for method, entries in self._routes.items():
            for entry in entries:
                yield method, entry

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._routes.values())


def get_instance(config: RouterConfig | None = None) -> Router:
    """Return the process-wide Router, creating an empty one on first call.

    *config* only applies when the router is created. Raises
    ``InvalidHttpMethod`` if its ``api_group`` is not a valid method name,
    and ``ConfigurationError`` if a different config is passed to an
    existing router.
    """
    global _instance
    if _instance is None:
        if config is not None:
            _method_key(config.api_group)
        _instance = Router(config, _token=_CONSTRUCT)
    elif config is not None and config != _instance.config:
        msg = "Router already exists with a different config; call unset_instance() first."
        raise ConfigurationError(msg)
    return _instance


def unset_instance() -> None:
    """Discard the process-wide Router.

    The next ``get_instance()`` builds a fresh, empty one. Meant for test
    isolation and re-initialization, not for use while serving requests.
    """
    global _instance
    _instance = None
