"""Route, Callback and CompiledRoute frozen dataclasses."""

from dataclasses import dataclass, field
from typing import Any

from signpost.routing.template import CompiledTemplate, convert_param


@dataclass(frozen=True, slots=True)
class Callback:
    """A validated ``(controller, action)`` target.

    ``action`` is known to be a public callable on ``controller``.
    """

    controller: type
    action: str

    def __str__(self) -> str:
        return f"{self.controller.__module__}.{self.controller.__qualname__}.{self.action}"


@dataclass(frozen=True, slots=True)
class Route:
    """Result of a successful resolution.

    Calling ``action`` on an instance of ``controller`` is the caller's job.
    """

    controller: type
    action: str
    is_api: bool = False
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CompiledRoute:
    """One registered template under one method group."""

    pattern: str
    template: CompiledTemplate
    callback: Callback

    @property
    def param_names(self) -> tuple[str, ...]:
        return self.template.param_names

    def match(self, path: str) -> dict[str, Any] | None:
        """Match an already-normalized path.

        Returns the params mapping, or ``None`` when the whole path does not
        match. Converter params are coerced; everything else stays ``str``.
        Text the converter rejects (e.g. an int too long to convert) is no match.
        """
        m = self.template.matcher.fullmatch(path)
        if m is None:
            return None
        params: dict[str, Any] = {}
        for name in self.template.param_names:
            value = m.group(name)
            param_type = self.template.converters.get(name)
            if param_type is None:
                params[name] = value
                continue
            try:
                params[name] = convert_param(value, param_type)
            except ValueError:
                return None
        return params
