"""Translation exception hierarchy with structured diagnostics.

Every exception carries a Diagnostic with a stable code, a human-readable
message and an optional hint. ``str(error)`` is the diagnostic message;
``error.diagnostic.format_error()`` renders the multi-line form.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .codes import Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from linguacat.locales import Locale

__all__ = [
    "CatalogueFrozenError",
    "CatalogueLoadError",
    "LocaleParseError",
    "MessageNotFound",
    "MissingPluralContext",
    "TemplateError",
    "TranslationError",
]


def _entry_location(
    locale: Locale | None, domain: str | None, message_id: str | None
) -> str | None:
    """Render 'locale/domain/message-id' for whichever parts are known."""
    parts = [str(part) for part in (locale, domain, message_id) if part is not None]
    return "/".join(parts) if parts else None


class TranslationError(Exception):
    """Base exception for all linguacat errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TranslationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleParseError(TranslationError):
    """Locale tag is malformed or names an unsupported locale.

    Raised only by Locale.from_tag(). Lookups never parse tags.

    Attributes:
        tag: The tag that failed to parse
    """

    def __init__(
        self,
        tag: str,
        reason: str = "unknown or unsupported locale",
        *,
        code: DiagnosticCode = DiagnosticCode.LOCALE_UNKNOWN,
    ) -> None:
        super().__init__(
            Diagnostic(
                code=code,
                message=f"failed to parse locale tag '{tag}': {reason}",
                hint="Use a supported tag such as 'en', 'en_US' or 'pt-BR'",
            )
        )
        self.tag = tag


class TemplateError(TranslationError):
    """Malformed plural template.

    Parsing is context-free and cached, so an error raised by the parser
    knows only the template text and the offending branch. The translator
    attaches the catalogue coordinates with with_context() before re-raising.

    Attributes:
        template: Full raw template text
        branch: Offending branch segment, when one can be isolated
        locale: Locale whose catalogue holds the template
        domain: Domain of the message
        message_id: Identifier of the message
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        template: str,
        branch: str | None = None,
        locale: Locale | None = None,
        domain: str | None = None,
        message_id: str | None = None,
    ) -> None:
        if isinstance(message, str):
            message = Diagnostic(code=DiagnosticCode.GUARD_VALUE_INVALID, message=message)
        super().__init__(message)
        self.template = template
        self.branch = branch
        self.locale = locale
        self.domain = domain
        self.message_id = message_id

    def with_context(
        self, locale: Locale, domain: str, message_id: str
    ) -> TemplateError:
        """Return a copy of this error that names where the template lives."""
        assert self.diagnostic is not None  # always set by __init__
        diagnostic = Diagnostic(
            code=self.diagnostic.code,
            message=self.diagnostic.message,
            hint=self.diagnostic.hint,
            location=_entry_location(locale, domain, message_id),
        )
        return TemplateError(
            diagnostic,
            template=self.template,
            branch=self.branch,
            locale=locale,
            domain=domain,
            message_id=message_id,
        )


class MissingPluralContext(TranslationError):
    """Pluralized template resolved without a count in the context.

    Attributes:
        locale: Locale whose catalogue supplied the template
        domain: Domain of the message
        message_id: Identifier of the message
    """

    def __init__(self, locale: Locale, domain: str, message_id: str) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.PLURAL_COUNT_MISSING,
                message=(
                    f"message '{message_id}' in '{domain}' domain for '{locale}' locale "
                    "is pluralized but no count was provided"
                ),
                hint="Pass count=... or a 'count' entry in the context",
                location=_entry_location(locale, domain, message_id),
            )
        )
        self.locale = locale
        self.domain = domain
        self.message_id = message_id


class MessageNotFound(TranslationError):
    """No catalogue in the fallback chain holds the requested message.

    Attributes:
        domain: Requested domain
        message_id: Requested message identifier
        attempted_locales: Every locale consulted, in lookup order
    """

    def __init__(
        self, domain: str, message_id: str, attempted_locales: Sequence[Locale]
    ) -> None:
        attempted = tuple(attempted_locales)
        quoted = ", ".join(f"'{locale}'" for locale in attempted)
        noun = "locale" if len(attempted) == 1 else "locales"
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.MESSAGE_NOT_FOUND,
                message=(
                    f"message not found: message '{message_id}' could not be found "
                    f"in '{domain}' domain for {quoted} {noun}."
                ),
                hint="Add the message to one of the attempted catalogues",
                location=", ".join(str(locale) for locale in attempted) or None,
            )
        )
        self.domain = domain
        self.message_id = message_id
        self.attempted_locales: tuple[Locale, ...] = attempted


class CatalogueLoadError(TranslationError):
    """Catalogue source could not be discovered, read or decoded.

    Attributes:
        path: File or directory that caused the failure (None for in-memory sources)
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        code: DiagnosticCode = DiagnosticCode.FILE_PARSE_FAILED,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            Diagnostic(
                code=code,
                message=message,
                hint=hint,
                location=str(path) if path is not None else None,
            )
        )
        self.path = path


class CatalogueFrozenError(TranslationError):
    """Mutation attempted on a frozen catalogue or catalogue bag.

    Bags handed to a Translator are frozen so that a shared translator
    never observes its messages changing underneath it. Take a copy()
    to obtain a mutable duplicate.
    """

    def __init__(self, target: str) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.CATALOGUE_FROZEN,
                message=f"cannot modify frozen {target}",
                hint="Call copy() to obtain a mutable duplicate",
            )
        )
