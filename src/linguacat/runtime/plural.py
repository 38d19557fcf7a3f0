"""Plural template parsing and branch selection.

A template containing an unescaped single ``|`` is pluralized: its segments
are branches, each earlier segment opens with a guard and the final segment
is the default::

    {0} There are no apples | {1} There is one apple | {2..4} A few apples | {?} apples

Guard forms:
    {1}        exact value
    {1, 2, 3}  any of several values
    {2..4}     inclusive range
    {..5}      up to and including
    {10..}     from and including

``||`` is a literal pipe anywhere in a template. A ``|`` immediately followed
by a combining mark belongs to that grapheme cluster and does not separate
branches.

Parsing is context-free and memoized; selection is first-match-wins in
declaration order and never fails.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import math
import re
import unicodedata
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from linguacat.constants import (
    BRANCH_SEPARATOR,
    ESCAPED_BRANCH_SEPARATOR,
    GUARD_CLOSE,
    GUARD_OPEN,
    GUARD_RANGE_OPERATOR,
    GUARD_VALUE_SEPARATOR,
    MAX_TEMPLATE_CACHE_SIZE,
)
from linguacat.diagnostics import Diagnostic, DiagnosticCode, TemplateError
from linguacat.enums import TemplateKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Guards
    "ExactGuard",
    "RangeGuard",
    "PluralGuard",
    "parse_guard",
    # Templates
    "PluralBranch",
    "PluralTemplate",
    "SimpleTemplate",
    "ParsedTemplate",
    "parse_template",
    "clear_template_cache",
    # Selection
    "to_comparable_count",
    "select_branch",
]

Count: TypeAlias = int | Decimal
"""A count that guards can compare against."""

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Zero-width joiner and variation selectors extend the preceding grapheme.
_GRAPHEME_EXTENDERS: frozenset[str] = frozenset(
    {"\u200d", *(chr(cp) for cp in range(0xFE00, 0xFE10))}
)


# ============================================================================
# GUARDS
# ============================================================================


@dataclass(frozen=True, slots=True)
class ExactGuard:
    """Matches any of an explicit set of values: ``{0}``, ``{1, 2}``."""

    values: tuple[int, ...]

    def matches(self, count: Count) -> bool:
        return count in self.values

    def __str__(self) -> str:
        return GUARD_OPEN + ", ".join(str(value) for value in self.values) + GUARD_CLOSE


@dataclass(frozen=True, slots=True)
class RangeGuard:
    """Matches an inclusive range; either bound may be open.

    ``{2..4}`` has both bounds, ``{..5}`` has no start and ``{10..}`` no end.
    """

    start: int | None
    end: int | None

    def matches(self, count: Count) -> bool:
        if self.start is not None and count < self.start:
            return False
        return self.end is None or count <= self.end

    def __str__(self) -> str:
        start = "" if self.start is None else str(self.start)
        end = "" if self.end is None else str(self.end)
        return f"{GUARD_OPEN}{start}{GUARD_RANGE_OPERATOR}{end}{GUARD_CLOSE}"


PluralGuard: TypeAlias = ExactGuard | RangeGuard


_HINTS: dict[DiagnosticCode, str] = {
    DiagnosticCode.GUARD_UNOPENED: "Start every branch except the last with a guard such as {1}",
    DiagnosticCode.GUARD_UNTERMINATED: "Close the guard with '}'",
    DiagnosticCode.GUARD_VALUE_INVALID: "Guard values are base-10 integers",
    DiagnosticCode.GUARD_RANGE_INVALID: "Write ranges low to high, e.g. {2..4}",
    DiagnosticCode.DEFAULT_BRANCH_MISSING: "End the template with an unguarded default branch",
    DiagnosticCode.DEFAULT_BRANCH_GUARDED: "Move the guarded branch before the default branch",
}


def _template_error(
    code: DiagnosticCode, message: str, *, template: str, branch: str | None
) -> TemplateError:
    return TemplateError(
        Diagnostic(code=code, message=message, hint=_HINTS.get(code)),
        template=template,
        branch=branch,
    )


def _parse_bound(text: str) -> int | None:
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return None


def _parse_range(body: str, *, branch: str, template: str) -> RangeGuard:
    start_text, _, end_text = (part.strip() for part in body.partition(GUARD_RANGE_OPERATOR))
    if not start_text and not end_text:
        msg = f"failed to parse range rule for '{branch}', expected at least one bound"
        raise _template_error(
            DiagnosticCode.GUARD_VALUE_INVALID, msg, template=template, branch=branch
        )

    rule = "range-to" if not start_text else "range-from" if not end_text else "range"
    start = _parse_bound(start_text) if start_text else None
    end = _parse_bound(end_text) if end_text else None
    for label, text, value in (("from", start_text, start), ("to", end_text, end)):
        if text and value is None:
            msg = f"failed to parse '{label}' value '{text}' in {rule} rule for '{branch}'"
            raise _template_error(
                DiagnosticCode.GUARD_VALUE_INVALID, msg, template=template, branch=branch
            )

    if start is not None and end is not None and start > end:
        msg = f"range rule for '{branch}' matches nothing: {start} is greater than {end}"
        raise _template_error(
            DiagnosticCode.GUARD_RANGE_INVALID, msg, template=template, branch=branch
        )
    return RangeGuard(start=start, end=end)


def _parse_guard_body(body: str, *, branch: str, template: str) -> PluralGuard:
    """Parse the text between a guard's braces."""
    if GUARD_RANGE_OPERATOR in body:
        return _parse_range(body, branch=branch, template=template)

    values: list[int] = []
    for raw in body.split(GUARD_VALUE_SEPARATOR):
        value = _parse_bound(raw.strip())
        if value is None:
            msg = f"failed to parse value '{raw.strip()}' in match rule for '{branch}'"
            raise _template_error(
                DiagnosticCode.GUARD_VALUE_INVALID, msg, template=template, branch=branch
            )
        values.append(value)
    return ExactGuard(values=tuple(values))


def _split_guard(branch: str, *, template: str) -> tuple[PluralGuard, str]:
    """Split a guarded branch into its guard and its (stripped) text."""
    if not branch.startswith(GUARD_OPEN):
        msg = f"failed to parse rule for '{branch}', expected '{GUARD_OPEN}' at the start"
        raise _template_error(
            DiagnosticCode.GUARD_UNOPENED, msg, template=template, branch=branch
        )
    close = branch.find(GUARD_CLOSE)
    if close == -1:
        msg = f"failed to parse rule for '{branch}', expected '{GUARD_CLOSE}' but the branch ended"
        raise _template_error(
            DiagnosticCode.GUARD_UNTERMINATED, msg, template=template, branch=branch
        )
    guard = _parse_guard_body(branch[1:close], branch=branch, template=template)
    return guard, branch[close + 1 :].strip()


def parse_guard(text: str) -> PluralGuard:
    """Parse a standalone guard such as ``{1, 2}`` or ``{2..4}``.

    Inverse of str() on a guard: ``parse_guard(str(guard)) == guard``.

    Raises:
        TemplateError: Text is not exactly one well-formed guard
    """
    stripped = text.strip()
    guard, rest = _split_guard(stripped, template=text)
    if rest:
        msg = f"unexpected text '{rest}' after guard in '{stripped}'"
        raise _template_error(
            DiagnosticCode.GUARD_VALUE_INVALID, msg, template=text, branch=stripped
        )
    return guard


# ============================================================================
# TEMPLATES
# ============================================================================


@dataclass(frozen=True, slots=True)
class SimpleTemplate:
    """Template without branches; ``||`` already unescaped."""

    text: str

    @property
    def kind(self) -> TemplateKind:
        return TemplateKind.SIMPLE


@dataclass(frozen=True, slots=True)
class PluralBranch:
    """One guarded branch of a plural template."""

    guard: PluralGuard
    text: str


@dataclass(frozen=True, slots=True)
class PluralTemplate:
    """Guarded branches in declaration order plus the default branch text."""

    branches: tuple[PluralBranch, ...]
    default: str

    @property
    def kind(self) -> TemplateKind:
        return TemplateKind.PLURAL


ParsedTemplate: TypeAlias = SimpleTemplate | PluralTemplate


def _extends_grapheme(char: str) -> bool:
    """True if char attaches to the preceding character instead of starting a new one."""
    return unicodedata.category(char) in ("Mn", "Mc", "Me") or char in _GRAPHEME_EXTENDERS


def _split_segments(source: str) -> tuple[list[str], bool]:
    """Split on unescaped single pipes, unescaping ``||`` along the way.

    Returns:
        Tuple of (segments, pluralized) where pluralized is True when at
        least one separator was found.
    """
    segments: list[str] = []
    current: list[str] = []
    index = 0
    length = len(source)
    while index < length:
        if source.startswith(ESCAPED_BRANCH_SEPARATOR, index):
            current.append(BRANCH_SEPARATOR)
            index += 2
            continue
        char = source[index]
        following = source[index + 1] if index + 1 < length else ""
        if char == BRANCH_SEPARATOR and not (following and _extends_grapheme(following)):
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1
    segments.append("".join(current))
    return segments, len(segments) > 1


def _starts_with_guard(text: str, *, template: str) -> bool:
    """True if text opens with something that parses as a guard."""
    if not text.startswith(GUARD_OPEN) or GUARD_CLOSE not in text:
        return False
    try:
        _split_guard(text, template=template)
    except TemplateError:
        return False
    return True


@functools.lru_cache(maxsize=MAX_TEMPLATE_CACHE_SIZE)
def parse_template(source: str) -> ParsedTemplate:
    """Parse a raw template into a simple or plural template.

    Thread-safe via lru_cache internal locking. Failures are not cached.

    Raises:
        TemplateError: Malformed guard, inverted range, missing default
            branch or a default branch that starts with a guard
    """
    segments, pluralized = _split_segments(source)
    if not pluralized:
        return SimpleTemplate(text=segments[0])

    *guarded, default = (segment.strip() for segment in segments)
    if not default:
        msg = "failed to parse plural template, expected a default branch after the last '|'"
        raise _template_error(
            DiagnosticCode.DEFAULT_BRANCH_MISSING, msg, template=source, branch=None
        )
    if _starts_with_guard(default, template=source):
        msg = f"default branch '{default}' must not start with a guard"
        raise _template_error(
            DiagnosticCode.DEFAULT_BRANCH_GUARDED, msg, template=source, branch=default
        )

    branches = tuple(
        PluralBranch(*_split_guard(segment, template=source)) for segment in guarded
    )
    return PluralTemplate(branches=branches, default=default)


def clear_template_cache() -> None:
    """Drop every memoized parse result."""
    parse_template.cache_clear()


# ============================================================================
# SELECTION
# ============================================================================


def to_comparable_count(value: object) -> Count | None:
    """Convert a context count into something guards can compare against.

    Integers, finite floats, finite Decimals and numeric strings convert.
    Booleans, NaN, infinities and anything else yield None.

    Example:
        >>> to_comparable_count(3)
        3
        >>> to_comparable_count("2.5")
        Decimal('2.5')
        >>> to_comparable_count(True) is None
        True
    """
    match value:
        case bool():
            return None
        case int():
            return value
        case float():
            if not math.isfinite(value):
                return None
            return int(value) if value.is_integer() else Decimal(value)
        case Decimal():
            return value if value.is_finite() else None
        case str():
            text = value.strip()
            bound = _parse_bound(text)
            if bound is not None:
                return bound
            try:
                number = Decimal(text)
            except InvalidOperation:
                return None
            return number if number.is_finite() else None
        case _:
            return None


def select_branch(template: ParsedTemplate, count: object) -> str:
    """Return the text of the first branch whose guard matches count.

    Simple templates return their text. Counts that cannot be compared
    select the default branch.
    """
    if isinstance(template, SimpleTemplate):
        return template.text
    comparable = to_comparable_count(count)
    if comparable is not None:
        for branch in template.branches:
            if branch.guard.matches(comparable):
                return branch.text
    return template.default
