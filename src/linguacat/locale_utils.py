"""Locale utilities: Babel bridge, system locale and Accept-Language.

Centralizes tag normalization and the conversions between raw locale strings
coming from the outside world (HTTP headers, environment variables) and the
closed Locale enumeration used everywhere else.

Python 3.13+. Depends on Babel.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from babel.core import negotiate_locale as babel_negotiate_locale
from babel.core import parse_locale

from linguacat.constants import MAX_LOCALE_CACHE_SIZE
from linguacat.diagnostics import LocaleParseError
from linguacat.locales import Locale

if TYPE_CHECKING:
    import babel

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "negotiate_locale",
    "normalize_locale",
    "parse_accept_language",
]

logger = logging.getLogger(__name__)

# Pseudo-locales reported by POSIX systems with no language configured.
_PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX", ""})

# Every supported tag, in the form Babel's negotiation compares against.
_AVAILABLE_TAGS: tuple[str, ...] = tuple(locale.value for locale in Locale)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP 47 or POSIX locale code to canonical POSIX form.

    Hyphens become underscores and any encoding or modifier suffix is dropped.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8@euro")
        'de_DE'
    """
    code = locale_code.strip().split(".", 1)[0].split("@", 1)[0]
    return code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> babel.Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP 47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data on first Locale use
    from babel import Locale as BabelLocale  # noqa: PLC0415

    return BabelLocale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop every cached Babel Locale."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the system locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable
    3. LC_MESSAGES environment variable
    4. LANG environment variable

    The "C" and "POSIX" pseudo-locales are skipped.

    Args:
        raise_on_failure: If True, raise RuntimeError when no locale is found.
            If False (default), return "en_US".

    Returns:
        Detected locale code in POSIX form. Pass it to Locale.from_tag() to
        obtain a supported Locale.

    Raises:
        RuntimeError: If raise_on_failure is True and detection fails.
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[str | None] = []
    try:
        candidates.append(locale_module.getlocale()[0])
    except ValueError:
        logger.debug("locale.getlocale() failed; falling back to environment")
    candidates.extend(os.environ.get(var) for var in ("LC_ALL", "LC_MESSAGES", "LANG"))

    for candidate in candidates:
        if candidate and candidate not in _PSEUDO_LOCALES:
            code = normalize_locale(candidate)
            if code not in _PSEUDO_LOCALES:
                return code

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)
    return "en_US"


# ============================================================================
# ACCEPT-LANGUAGE
# ============================================================================


def _parse_quality(params: list[str]) -> float:
    """Extract the q-value from header parameters; malformed values count as 0."""
    for param in params:
        key, sep, value = param.strip().partition("=")
        if not sep or key.strip().lower() != "q":
            continue
        try:
            quality = float(value.strip())
        except ValueError:
            return 0.0
        # NaN fails both comparisons
        if not 0.0 <= quality <= 1.0:
            return 0.0
        return quality
    return 1.0


def parse_accept_language(header: str) -> tuple[str, ...]:
    """Parse an Accept-Language header into language ranges, most preferred first.

    Ranges are ordered by descending q-value; equal q-values keep header
    order. The ``*`` wildcard and ranges with ``q=0`` (including malformed
    q-values) are dropped.

    Example:
        >>> parse_accept_language("fr-CH, fr;q=0.9, en;q=0.8, *;q=0.5")
        ('fr-CH', 'fr', 'en')
    """
    ranked: list[tuple[float, str]] = []
    for item in header.split(","):
        language_range, *params = item.split(";")
        language_range = language_range.strip()
        if not language_range or language_range == "*":
            continue
        quality = _parse_quality(params)
        if quality > 0.0:
            ranked.append((quality, language_range))
    # sorted() is stable, so ties keep header order
    ranked = sorted(ranked, key=lambda entry: entry[0], reverse=True)
    return tuple(language_range for _, language_range in ranked)


def _canonical_preference(language_range: str) -> str:
    """Reduce a language range to ``lang`` or ``lang_TERRITORY``.

    Script and variant subtags are dropped so that ``zh-Hant-TW`` can match
    ``zh_TW``. Ranges Babel cannot parse are returned normalized but otherwise
    untouched and simply fail to match.
    """
    code = normalize_locale(language_range)
    try:
        parts = parse_locale(code)
    except ValueError:
        return code
    language, territory = parts[0], parts[1]
    return f"{language}_{territory}" if territory else language


def negotiate_locale(header: str | None, default: Locale) -> Locale:
    """Pick the supported Locale that best satisfies an Accept-Language header.

    Preferences are tried in q-order; a regional preference with no exact
    match falls back to its base language before the next preference is
    tried. Returns ``default`` when nothing matches or the header is empty.

    Args:
        header: Raw Accept-Language header value (None when absent)
        default: Locale returned when no preference is supported

    Example:
        >>> negotiate_locale("de-CH, fr;q=0.5", Locale.ENGLISH)
        <Locale.GERMAN_SWITZERLAND: 'de_CH'>
        >>> negotiate_locale("xx, *", Locale.ENGLISH)
        <Locale.ENGLISH: 'en'>
    """
    if not header:
        return default

    preferences = [_canonical_preference(item) for item in parse_accept_language(header)]
    # Aliases would map "pt" to "pt_PT"; supported tags are matched as given.
    match = babel_negotiate_locale(preferences, _AVAILABLE_TAGS, sep="_", aliases=None)
    if match is None:
        logger.debug("No supported locale in Accept-Language %r; using %s", header, default)
        return default

    try:
        return Locale.from_tag(match)
    except LocaleParseError:
        return default
