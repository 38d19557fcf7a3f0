"""linguacat - catalogue-based message translation.

Resolves a message for a requested locale, domain and message id, walking a
locale fallback chain, selecting a plural branch by count and filling
placeholders from a context mapping.

Public API:
    Translator - Lookup with fallback, plural selection and interpolation
    Locale - Closed enumeration of supported locales
    Catalogue - Templates of one locale, keyed by domain and message id
    CatalogueBag - At most one Catalogue per locale
    DirectoryCatalogueLoader - Builds a bag from {domain}.{locale}.{ext} files
    negotiate_locale - Picks a Locale from an Accept-Language header
    validate_bag - Reports every malformed template of a bag

Exceptions:
    TranslationError - Base exception class
    LocaleParseError - Unparseable or unsupported locale tag
    TemplateError - Malformed plural template
    MissingPluralContext - Plural template translated without a count
    MessageNotFound - Message absent from every locale in the chain
    CatalogueLoadError - Message file could not be loaded
    CatalogueFrozenError - Mutation of a frozen catalogue or bag

Submodules:
    linguacat.runtime - Template parsing, interpolation and the Translator
    linguacat.catalogue - Catalogue storage, type aliases and loaders
    linguacat.diagnostics - Error types, diagnostic codes and validation results
    linguacat.locale_utils - Babel bridge, system locale and Accept-Language
"""

# Essential Public API - Minimal exports for clean namespace
from .catalogue import Catalogue, CatalogueBag, DirectoryCatalogueLoader
from .diagnostics import (
    CatalogueFrozenError,
    CatalogueLoadError,
    LocaleParseError,
    MessageNotFound,
    MissingPluralContext,
    TemplateError,
    TranslationError,
)
from .locale_utils import negotiate_locale
from .locales import Locale
from .runtime import FallbackInfo, Translator
from .validation import validate_bag

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("linguacat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Catalogue",
    "CatalogueBag",
    "CatalogueFrozenError",
    "CatalogueLoadError",
    "DirectoryCatalogueLoader",
    "FallbackInfo",
    "Locale",
    "LocaleParseError",
    "MessageNotFound",
    "MissingPluralContext",
    "TemplateError",
    "TranslationError",
    "Translator",
    "__version__",
    "negotiate_locale",
    "validate_bag",
]
