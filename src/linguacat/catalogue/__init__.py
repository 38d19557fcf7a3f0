"""Catalogue package: message storage and loading.

Provides the per-locale Catalogue, the CatalogueBag aggregate handed to the
Translator, and loaders that build bags from message files.

Python 3.13+.
"""

from .catalogue import Catalogue, CatalogueBag
from .loading import (
    CatalogueFile,
    CatalogueLoader,
    DirectoryCatalogueLoader,
    discover_catalogue_files,
    parse_catalogue_source,
)
from .types import Context, ContextValue, Domain, MessageId, Template

__all__ = [
    "Catalogue",
    "CatalogueBag",
    "CatalogueFile",
    "CatalogueLoader",
    "Context",
    "ContextValue",
    "DirectoryCatalogueLoader",
    "Domain",
    "MessageId",
    "Template",
    "discover_catalogue_files",
    "parse_catalogue_source",
]
