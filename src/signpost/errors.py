"""Signpost exception hierarchy.

Shared across the template compiler, callback validation, and the Router
so every module raises and catches the same types.
"""

from dataclasses import dataclass


class SignpostError(Exception):
    """Base for all signpost-specific errors."""


class ConfigurationError(SignpostError):
    """Raised when route configuration is invalid.

    These are startup failures, not end-user input problems.
    """


class InvalidRoutesList(ConfigurationError):  # noqa: N818
    """A bulk route mapping is not a mapping of mappings.

    ``method`` names the offending method key, or is ``None`` when the
    top-level value itself is the problem.
    """

    def __init__(self, message: str, method: str | None = None) -> None:
        super().__init__(message)
        self.method = method


class InvalidCallback(ConfigurationError):  # noqa: N818
    """A route target is not a valid ``(class, method)`` pair."""


class InvalidHttpMethod(ConfigurationError):  # noqa: N818
    """A method key does not look like an HTTP verb or group name."""


class InvalidTemplate(ConfigurationError):  # noqa: N818
    """A path template cannot be compiled."""

    def __init__(self, message: str, template: str) -> None:
        super().__init__(message)
        self.template = template


@dataclass(frozen=True, slots=True)
class HTTPError(SignpostError):
    """An error that maps directly to an HTTP status code.

    The surrounding application turns these into responses.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request method and path."""

    def __init__(self, detail: str = "Page not found") -> None:
        super().__init__(status=404, detail=detail)
