"""Translation runtime package.

Provides template parsing and plural branch selection, placeholder
interpolation and the Translator API. Depends on the catalogue package for
message storage.

Python 3.13+.
"""

from .interpolation import display_value, interpolate
from .plural import (
    ExactGuard,
    ParsedTemplate,
    PluralBranch,
    PluralGuard,
    PluralTemplate,
    RangeGuard,
    SimpleTemplate,
    clear_template_cache,
    parse_guard,
    parse_template,
    select_branch,
    to_comparable_count,
)
from .rwlock import RWLock
from .translator import FallbackInfo, Translator

__all__ = [
    "ExactGuard",
    "FallbackInfo",
    "ParsedTemplate",
    "PluralBranch",
    "PluralGuard",
    "PluralTemplate",
    "RWLock",
    "RangeGuard",
    "SimpleTemplate",
    "Translator",
    "clear_template_cache",
    "display_value",
    "interpolate",
    "parse_guard",
    "parse_template",
    "select_branch",
    "to_comparable_count",
]
