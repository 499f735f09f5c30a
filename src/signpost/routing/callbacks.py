"""Route target validation.

Targets are ``[controller, "action"]`` pairs. The controller is a class,
or an import string naming one (``"myapp.controllers:UserController"`` or
``"myapp.controllers.UserController"``). Validation happens at
registration time; nothing is instantiated.
"""

import importlib
import inspect

from signpost.errors import InvalidCallback
from signpost.routing.route import Callback


def public_methods(controller: type) -> frozenset[str]:
    """Names of the public callables a controller exposes.

    Includes inherited methods, classmethods and staticmethods. Nested
    classes and properties are not actions.
    """
    return frozenset(
        name
        for name, member in inspect.getmembers(controller)
        if not name.startswith("_") and callable(member) and not inspect.isclass(member)
    )


def resolve_controller(ref: object) -> type:
    """Resolve a controller reference to a class.

    Raises ``InvalidCallback`` if the reference is not a class and not an
    import string that leads to one.
    """
    if inspect.isclass(ref):
        return ref
    if not isinstance(ref, str) or not ref:
        msg = f"Controller must be a class or an import string, got {ref!r}"
        raise InvalidCallback(msg)

    if ":" in ref:
        module_path, _, attr_path = ref.partition(":")
    else:
        module_path, _, attr_path = ref.rpartition(".")
    if not module_path or not attr_path:
        msg = (
            f"Controller {ref!r} not found: expected 'module:Class' "
            "or 'module.Class'"
        )
        raise InvalidCallback(msg)

    try:
        obj: object = importlib.import_module(module_path)
    except (ImportError, TypeError, ValueError) as exc:
        # relative or malformed module paths raise TypeError / ValueError
        msg = f"Controller {ref!r} not found: could not import module {module_path!r}"
        raise InvalidCallback(msg) from exc

    try:
        for attr in attr_path.split("."):
            obj = getattr(obj, attr)
    except AttributeError as exc:
        msg = f"Controller {ref!r} not found: module {module_path!r} has no {attr_path!r}"
        raise InvalidCallback(msg) from exc

    if not inspect.isclass(obj):
        msg = f"Controller {ref!r} resolved to {type(obj).__name__}, not a class"
        raise InvalidCallback(msg)
    return obj


def resolve_callback(target: object) -> Callback:
    """Validate a route target and return its ``Callback``.

    Raises ``InvalidCallback`` when the target is not a two-element list or
    tuple, the controller cannot be found, or the action is empty, private,
    missing, or not callable.
    """
    if not isinstance(target, (list, tuple)) or len(target) != 2:
        msg = f"Route target must be a [controller, action] pair, got {target!r}"
        raise InvalidCallback(msg)

    controller_ref, action = target
    controller = resolve_controller(controller_ref)

    if not isinstance(action, str) or not action:
        msg = f"Action for {controller.__qualname__} must be a method name, got {action!r}"
        raise InvalidCallback(msg)
    if action.startswith("_"):
        msg = f"Action {controller.__qualname__}.{action} is not public"
        raise InvalidCallback(msg)
    if action not in public_methods(controller):
        msg = f"Controller {controller.__qualname__} has no public method {action!r}"
        raise InvalidCallback(msg)

    return Callback(controller=controller, action=action)
