"""Enumerations for linguacat type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TemplateKind(StrEnum):
    """Shape of a parsed message template.

    StrEnum provides automatic string conversion: str(TemplateKind.PLURAL) == "plural"
    """

    SIMPLE = "simple"
    """Plain text with placeholders: Hello, {name}!"""

    PLURAL = "plural"
    """Guarded branches plus a default: {0} None | {1} One | {?} many"""


class CatalogueFormat(StrEnum):
    """On-disk message file format, keyed by file extension.

    StrEnum provides automatic string conversion: str(CatalogueFormat.TOML) == "toml"
    """

    TOML = "toml"
    """Flat TOML table: greeting = "Hello, {name}!" """

    JSON = "json"
    """Flat JSON object: {"greeting": "Hello, {name}!"}"""


__all__ = [
    "CatalogueFormat",
    "TemplateKind",
]
