"""Shared constants for linguacat.

Centralizes template syntax markers, context keys, cache limits and loader
defaults used across the catalogue and runtime packages. Placing them here
avoids circular imports between the parser, the interpolator and the
translator.

Constants are grouped by domain:
- Template syntax: branch separator, guard and placeholder markers
- Context: canonical key carrying the plural count
- Cache limits: memory bounds for parse and locale caches
- Loader defaults: message file extensions

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template syntax
    "BRANCH_SEPARATOR",
    "ESCAPED_BRANCH_SEPARATOR",
    "GUARD_OPEN",
    "GUARD_CLOSE",
    "GUARD_RANGE_OPERATOR",
    "GUARD_VALUE_SEPARATOR",
    "COUNT_PLACEHOLDER",
    # Context
    "COUNT_KEY",
    # Cache limits
    "MAX_TEMPLATE_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Loader defaults
    "DEFAULT_CATALOGUE_EXTENSIONS",
]

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

# A single pipe separates plural branches. Two pipes are a literal pipe.
BRANCH_SEPARATOR: str = "|"
ESCAPED_BRANCH_SEPARATOR: str = "||"

# Guards open every non-default branch: {0}, {1, 2}, {2..4}, {..5}, {10..}
GUARD_OPEN: str = "{"
GUARD_CLOSE: str = "}"
GUARD_RANGE_OPERATOR: str = ".."
GUARD_VALUE_SEPARATOR: str = ","

# Placeholder name that renders the plural count: "There are {?} apples"
COUNT_PLACEHOLDER: str = "?"

# ============================================================================
# CONTEXT
# ============================================================================

# Context key whose value drives plural branch selection.
COUNT_KEY: str = "count"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum parsed templates kept by parse_template().
# Catalogues of a typical application hold a few hundred distinct templates;
# 1024 keeps every one of them resident without unbounded growth.
MAX_TEMPLATE_CACHE_SIZE: int = 1024

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOADER DEFAULTS
# ============================================================================

# Message file extensions understood by DirectoryCatalogueLoader.
DEFAULT_CATALOGUE_EXTENSIONS: tuple[str, ...] = ("toml", "json")
