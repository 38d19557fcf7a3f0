"""Validation result types for catalogue validation.

Collects one structured error per malformed template found while walking a
catalogue or catalogue bag. Results are immutable and safe to share across
threads.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .codes import DiagnosticCode

if TYPE_CHECKING:
    from linguacat.locales import Locale

__all__ = [
    "ValidationError",
    "ValidationResult",
]


# ============================================================================
# VALIDATION ERROR
# ============================================================================


# Maximum template length before truncation when sanitizing
_SANITIZE_MAX_TEMPLATE_LENGTH: int = 100


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured error for one malformed template.

    Attributes:
        locale: Locale of the catalogue holding the template
        domain: Domain of the message
        message_id: Identifier of the message
        code: Diagnostic code of the parse failure
        message: Human-readable error message
        template: The raw template text
    """

    locale: Locale
    domain: str
    message_id: str
    code: DiagnosticCode
    message: str
    template: str = ""

    def format(self, *, sanitize: bool = False) -> str:
        """Format error as a single human-readable line.

        Args:
            sanitize: If True, truncate the echoed template. Catalogues loaded
                from untrusted sources may hold arbitrarily long values.

        Returns:
            Formatted error string

        Example:
            >>> error.format()
            "[GUARD_VALUE_INVALID] en/messages/apples: failed to parse value 'two' ..."
        """
        template = self.template
        if sanitize and len(template) > _SANITIZE_MAX_TEMPLATE_LENGTH:
            template = template[:_SANITIZE_MAX_TEMPLATE_LENGTH] + "..."
        return (
            f"[{self.code.name}] {self.locale}/{self.domain}/{self.message_id}: "
            f"{self.message} (template: {template!r})"
        )


# ============================================================================
# VALIDATION RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a catalogue or a catalogue bag.

    Errors are ordered by locale tag, then domain, then message id so that
    two runs over the same bag report identically.

    Attributes:
        errors: One entry per malformed template
        checked: Number of templates inspected

    Example:
        >>> result = validate_bag(bag)
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    checked: int = 0

    @property
    def is_valid(self) -> bool:
        """True when no template failed to parse."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of malformed templates."""
        return len(self.errors)

    def format(self, *, sanitize: bool = False) -> str:
        """Render every error on its own line, preceded by a summary line."""
        if self.is_valid:
            return f"{self.checked} template(s) checked, no errors"
        lines = [f"{self.checked} template(s) checked, {self.error_count} error(s)"]
        lines.extend(error.format(sanitize=sanitize) for error in self.errors)
        return "\n".join(lines)

    @staticmethod
    def valid(checked: int = 0) -> ValidationResult:
        """Create a result with no errors."""
        return ValidationResult(errors=(), checked=checked)

    @staticmethod
    def merge(results: tuple[ValidationResult, ...]) -> ValidationResult:
        """Combine several results into one, keeping their order."""
        errors: list[ValidationError] = []
        checked = 0
        for result in results:
            errors.extend(result.errors)
            checked += result.checked
        return ValidationResult(errors=tuple(errors), checked=checked)
