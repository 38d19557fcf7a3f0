"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages shared by every
linguacat error type.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]

# Maximum characters of user-controlled content echoed into a diagnostic line.
_MAX_ECHO_LENGTH: int = 200


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors (tag parsing)
        2000-2999: Template errors (plural guard syntax)
        3000-3999: Context errors (missing plural count)
        4000-4999: Lookup errors (message not found)
        5000-5999: Loading errors (catalogue files)
        6000-6999: Catalogue state errors (frozen mutation)
    """

    # Locale errors (1000-1999)
    LOCALE_UNKNOWN = 1001
    LOCALE_MALFORMED = 1002

    # Template errors (2000-2999)
    GUARD_UNOPENED = 2001
    GUARD_UNTERMINATED = 2002
    GUARD_VALUE_INVALID = 2003
    GUARD_RANGE_INVALID = 2004
    DEFAULT_BRANCH_MISSING = 2005
    DEFAULT_BRANCH_GUARDED = 2006

    # Context errors (3000-3999)
    PLURAL_COUNT_MISSING = 3001

    # Lookup errors (4000-4999)
    MESSAGE_NOT_FOUND = 4001

    # Loading errors (5000-5999)
    DIRECTORY_UNREADABLE = 5001
    FILE_UNREADABLE = 5002
    FILENAME_INVALID = 5003
    FILE_LOCALE_UNKNOWN = 5004
    FILE_PARSE_FAILED = 5005
    FILE_VALUE_INVALID = 5006

    # Catalogue state errors (6000-6999)
    CATALOGUE_FROZEN = 6001


def _escape_control_chars(text: str) -> str:
    """Escape line breaks and other control characters for single-line output."""
    escaped = "".join(
        ch.encode("unicode_escape").decode("ascii") if ch.isprintable() is False else ch
        for ch in text
    )
    if len(escaped) > _MAX_ECHO_LENGTH:
        return escaped[:_MAX_ECHO_LENGTH] + "..."
    return escaped


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries a stable code, a
    human-readable message and an optional hint for fixing the problem.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        location: Where the problem was found (file path, or
            "locale/domain/message-id" for catalogue entries)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MESSAGE_NOT_FOUND]: message 'bar' could not be found in 'messages' domain
              --> fr_CA, fr, en
              = help: Add the message to one of the attempted catalogues

        Control characters in the message and location are escaped so that a
        template read from an untrusted file cannot forge extra log lines.

        Returns:
            Formatted multi-line error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape_control_chars(self.message)}"]
        if self.location is not None:
            lines.append(f"  --> {_escape_control_chars(self.location)}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
