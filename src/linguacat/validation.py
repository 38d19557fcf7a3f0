"""Eager template validation for catalogues and catalogue bags.

The Translator parses templates lazily, so a malformed plural template only
surfaces when its message is first translated. These functions parse every
template up front and report all failures at once, which suits CI checks and
application start-up.

Python 3.13+.
"""

from __future__ import annotations

import logging

from linguacat.catalogue import Catalogue, CatalogueBag
from linguacat.diagnostics import TemplateError, ValidationError, ValidationResult
from linguacat.runtime.plural import parse_template

__all__ = [
    "validate_bag",
    "validate_catalogue",
    "validate_template",
]

logger = logging.getLogger(__name__)


def validate_template(source: str) -> TemplateError | None:
    """Return the error a template would raise when parsed, or None if it is valid.

    Example:
        >>> validate_template("{0} none | {1} one | many") is None
        True
        >>> validate_template("{0} none | {one} one | many").diagnostic.code.name
        'GUARD_VALUE_INVALID'
    """
    try:
        parse_template(source)
    except TemplateError as e:
        return e
    return None


def validate_catalogue(catalogue: Catalogue) -> ValidationResult:
    """Parse every template of a catalogue, collecting one error per failure.

    Errors are ordered by domain, then message id.
    """
    errors: list[ValidationError] = []
    entries = sorted(catalogue.items(), key=lambda entry: (entry[0], entry[1]))
    for domain, message_id, template in entries:
        error = validate_template(template)
        if error is None:
            continue
        # diagnostic is always set on TemplateError
        assert error.diagnostic is not None
        errors.append(
            ValidationError(
                locale=catalogue.locale,
                domain=domain,
                message_id=message_id,
                code=error.diagnostic.code,
                message=error.diagnostic.message,
                template=template,
            )
        )
    return ValidationResult(errors=tuple(errors), checked=len(entries))


def validate_bag(bag: CatalogueBag) -> ValidationResult:
    """Validate every catalogue of a bag.

    Errors are ordered by locale tag, then domain, then message id, so two
    runs over equal bags report identically.

    Example:
        >>> result = validate_bag(bag)
        >>> if not result.is_valid:
        ...     print(result.format())
    """
    catalogues = sorted(bag, key=lambda catalogue: catalogue.locale.value)
    result = ValidationResult.merge(
        tuple(validate_catalogue(catalogue) for catalogue in catalogues)
    )
    logger.debug(
        "Validated %d template(s) in %d catalogue(s): %d error(s)",
        result.checked,
        len(catalogues),
        result.error_count,
    )
    return result
