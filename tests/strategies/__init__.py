"""Hypothesis strategies for linguacat property-based testing.

Usage:
    from tests.strategies import locales, catalogue_bags, plural_template_sources
"""

from .catalogue import (
    base_locales,
    branch_texts,
    catalogue_bags,
    catalogues,
    domains,
    locales,
    message_ids,
    plural_guards,
    plural_template_sources,
    templates,
    variant_locales,
)

__all__ = [
    "base_locales",
    "branch_texts",
    "catalogue_bags",
    "catalogues",
    "domains",
    "locales",
    "message_ids",
    "plural_guards",
    "plural_template_sources",
    "templates",
    "variant_locales",
]
