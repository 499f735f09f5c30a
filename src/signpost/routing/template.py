r"""Path template compilation.

A template is literal text with ``{name}`` and ``{name:constraint}``
placeholders::

    "users/{id:int}/posts/{slug}"
    "archive/{year:\d{4}}/{month:\d{2}}"

Each placeholder becomes a named capturing group. A constraint that names
a converter (``int``, ``float``, ``str``) supplies its own group body and
coerces the captured text; any other constraint is inserted verbatim as
the group body.
"""

import re
from dataclasses import dataclass

from signpost.errors import InvalidTemplate

# (regex_pattern, python_type) for each named converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"\d+", int),
    "float": (r"\d+(?:\.\d+)?", float),
}

_PARAM_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A ``{name}`` or ``{name:constraint}`` occurrence in a template."""

    name: str
    constraint: str | None = None


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """Matcher plus the parameter bookkeeping needed to read its groups."""

    matcher: re.Pattern[str]
    param_names: tuple[str, ...]
    converters: dict[str, str]


def normalize_path(path: str) -> str:
    """Trim path separators from both ends.

    ``"/users/"``, ``"users/"``, ``"/users"`` and ``"users"`` all
    normalize to ``"users"``; ``"/"`` normalizes to ``""``.
    """
    return path.strip("/")


def convert_param(value: str, param_type: str) -> str | int | float:
    """Convert captured text with a named converter.

    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, target_type = CONVERTERS[param_type]
    return target_type(value)


def split_template(template: str) -> list[str | Placeholder]:
    """Split a template into literal runs and placeholders, in order.

    Examples::

        "users/{id}"        -> ["users/", Placeholder("id")]
        "v{major:\\d}.json" -> ["v", Placeholder("major", "\\d"), ".json"]

    Raises ``InvalidTemplate`` on unbalanced braces, a name that is not an
    identifier, or an empty constraint.
    """
    parts: list[str | Placeholder] = []
    literal_start = 0
    i = 0
    while i < len(template):
        char = template[i]
        if char == "}":
            msg = f"Unmatched '}}' at position {i} in route template {template!r}"
            raise InvalidTemplate(msg, template)
        if char != "{":
            i += 1
            continue
        end = _closing_brace(template, i)
        if literal_start < i:
            parts.append(template[literal_start:i])
        parts.append(_parse_placeholder(template, template[i + 1 : end]))
        i = literal_start = end + 1
    if literal_start < len(template):
        parts.append(template[literal_start:])
    return parts


def _closing_brace(template: str, start: int) -> int:
    """Index of the ``}`` closing the ``{`` at *start*.

    Braces inside a constraint (``\\d{4}``) nest; backslash-escaped braces
    do not count.
    """
    depth = 0
    i = start
    while i < len(template):
        char = template[i]
        if char == "\\":
            i += 2
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    msg = f"Unclosed '{{' at position {start} in route template {template!r}"
    raise InvalidTemplate(msg, template)


def _parse_placeholder(template: str, inner: str) -> Placeholder:
    name, sep, constraint = inner.partition(":")
    if not _PARAM_NAME.fullmatch(name):
        msg = (
            f"Invalid parameter name {name!r} in route template {template!r}. "
            "Names must be identifiers, e.g. {user_id} or {user_id:int}."
        )
        raise InvalidTemplate(msg, template)
    if sep and not constraint:
        msg = f"Empty constraint for parameter {name!r} in route template {template!r}"
        raise InvalidTemplate(msg, template)
    return Placeholder(name=name.lower(), constraint=constraint if sep else None)


def compile_template(
    template: str,
    *,
    param_pattern: str = r"[^/]+",
    case_sensitive: bool = False,
) -> CompiledTemplate:
    """Compile a template into a full-path matcher.

    The template is normalized first, so leading and trailing separators
    are insignificant. Parameter names are lower-cased; a name used twice
    (in any case) raises ``InvalidTemplate``.
    """
    pieces: list[str] = []
    param_names: list[str] = []
    converters: dict[str, str] = {}

    for part in split_template(normalize_path(template)):
        if isinstance(part, str):
            pieces.append(re.escape(part))
            continue
        if part.name in param_names:
            msg = f"Duplicate parameter {part.name!r} in route template {template!r}"
            raise InvalidTemplate(msg, template)
        param_names.append(part.name)

        if part.constraint is None:
            body = param_pattern
        elif part.constraint in CONVERTERS:
            body, _ = CONVERTERS[part.constraint]
            converters[part.name] = part.constraint
        else:
            body = part.constraint
        pieces.append(f"(?P<{part.name}>{body})")

    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        matcher = re.compile("".join(pieces), flags)
    except re.error as exc:
        msg = f"Invalid constraint in route template {template!r}: {exc}"
        raise InvalidTemplate(msg, template) from exc

    return CompiledTemplate(
        matcher=matcher,
        param_names=tuple(param_names),
        converters=converters,
    )
