"""Diagnostic system for linguacat errors.

Provides structured error diagnostics with stable codes, hints and locations.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogueFrozenError,
    CatalogueLoadError,
    LocaleParseError,
    MessageNotFound,
    MissingPluralContext,
    TemplateError,
    TranslationError,
)
from .validation import ValidationError, ValidationResult

__all__ = [
    "CatalogueFrozenError",
    "CatalogueLoadError",
    "Diagnostic",
    "DiagnosticCode",
    "LocaleParseError",
    "MessageNotFound",
    "MissingPluralContext",
    "TemplateError",
    "TranslationError",
    "ValidationError",
    "ValidationResult",
]
