"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(api_group="rpc", case_sensitive=True)
    """

    # Method group whose routes resolve with is_api=True
    api_group: str = "api"

    # Group body for unconstrained {name} placeholders
    param_pattern: str = r"[^/]+"

    # Template matching; method names are always case-insensitive
    case_sensitive: bool = False
