"""Placeholder interpolation for selected branch text.

Tokens:
    {name}   value of ``name`` in the context
    {0}      positional value (context values in insertion order, minus 'count')
    {}       next positional value
    {?}      the plural count
    {{ }}    literal braces

Interpolation never fails. A token that cannot be filled (unknown name,
position out of range, ``{?}`` without a count) is emitted verbatim, as are
unbalanced braces, so a missing value shows up in the output instead of
aborting the whole message.

Values are rendered locale-independently; number formatting is the caller's
concern.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from linguacat.catalogue.types import Context
from linguacat.constants import COUNT_KEY, COUNT_PLACEHOLDER

__all__ = ["display_value", "interpolate"]

# Escaped braces first so that "{{name}}" renders as "{name}".
_TOKEN_PATTERN = re.compile(r"\{\{|\}\}|\{([^{}]*)\}")
_POSITION_PATTERN = re.compile(r"[0-9]+")


def display_value(value: object) -> str:
    """Render a context value as text.

    Booleans render as true/false and integral floats drop their ".0".
    Decimals and everything else use str().

    Example:
        >>> display_value(True)
        'true'
        >>> display_value(3.0)
        '3'
        >>> display_value(None)
        ''
    """
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case float():
            if value.is_integer():
                return str(int(value))
            return repr(value)
        case _:
            return str(value)


def interpolate(
    text: str,
    context: Context | None = None,
    *,
    count: object = None,
) -> str:
    """Replace placeholder tokens in text with context values.

    Args:
        text: Branch text (already selected from a plural template)
        context: Placeholder values by name
        count: Value for ``{?}``; also fills ``{count}`` when the context
            has no 'count' entry

    Returns:
        Text with every fillable token substituted

    Example:
        >>> interpolate("Hello, {name}!", {"name": "World"})
        'Hello, World!'
        >>> interpolate("{} and {}", {"a": 1, "b": 2})
        '1 and 2'
    """
    values: Context = context if context is not None else {}
    positional = [value for key, value in values.items() if key != COUNT_KEY]
    sequence = 0

    def substitute(match: re.Match[str]) -> str:
        nonlocal sequence
        token = match.group(0)
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"

        name = match.group(1).strip()
        if not name:
            index = sequence
            sequence += 1
            return display_value(positional[index]) if index < len(positional) else token
        if name == COUNT_PLACEHOLDER:
            return display_value(count) if count is not None else token
        if _POSITION_PATTERN.fullmatch(name):
            index = int(name)
            return display_value(positional[index]) if index < len(positional) else token
        if name in values:
            return display_value(values[name])
        if name == COUNT_KEY and count is not None:
            return display_value(count)
        return token

    return _TOKEN_PATTERN.sub(substitute, text)
