"""Hypothesis strategies for catalogue and template property-based testing.

Provides reusable strategies for generating translation test data:
- Locales (any member, base languages, regional variants)
- Domains, message ids and plain branch text
- Catalogues and catalogue bags with controlled locale overlap
- Plural guards and well-formed plural template sources

Event-Emitting Strategies (HypoFuzz-Optimized):
- catalogues: Emits catalogue_size=empty|small|large
- catalogue_bags: Emits bag_locale_overlap=shared|disjoint
- plural_guards: Emits guard_kind=exact|range|range_to|range_from

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from linguacat import Catalogue, CatalogueBag, Locale
from linguacat.runtime import ExactGuard, PluralGuard, RangeGuard

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

_ID_FIRST_CHARS = string.ascii_lowercase
_ID_REST_CHARS = string.ascii_lowercase + string.digits + "_-"

# Branch text: no braces or pipes, so it never parses as a guard or separator.
_TEXT_ALPHABET = st.characters(
    blacklist_categories=("Cs", "Cc"),
    blacklist_characters="{}|",
)

_ALL_LOCALES = list(Locale)
_BASE_LOCALES = [locale for locale in Locale if not locale.is_variant]
_VARIANT_LOCALES = [locale for locale in Locale if locale.is_variant]

_COUNTS = st.integers(min_value=-1000, max_value=1000)


def locales() -> SearchStrategy[Locale]:
    """Any supported locale."""
    return st.sampled_from(_ALL_LOCALES)


def base_locales() -> SearchStrategy[Locale]:
    """Base languages only."""
    return st.sampled_from(_BASE_LOCALES)


def variant_locales() -> SearchStrategy[Locale]:
    """Regional variants only."""
    return st.sampled_from(_VARIANT_LOCALES)


@st.composite
def message_ids(draw: DrawFn) -> str:
    """Identifiers such as 'greeting' or 'cart_items-2'."""
    first = draw(st.sampled_from(_ID_FIRST_CHARS))
    rest = draw(st.text(alphabet=_ID_REST_CHARS, max_size=20))
    return first + rest


def domains() -> SearchStrategy[str]:
    """A small pool of domains, so generated catalogues overlap."""
    return st.sampled_from(["messages", "errors", "validators", "admin"])


def branch_texts() -> SearchStrategy[str]:
    """Non-empty text without template syntax and without outer whitespace."""
    return (
        st.text(alphabet=_TEXT_ALPHABET, min_size=1, max_size=30)
        .map(str.strip)
        .filter(bool)
    )


def templates() -> SearchStrategy[str]:
    """Raw templates as stored in catalogues (any text, syntax included)."""
    return st.text(max_size=60)


@st.composite
def catalogues(
    draw: DrawFn,
    locale: Locale | None = None,
    max_messages: int = 8,
) -> Catalogue:
    """A Catalogue with up to max_messages templates.

    Events emitted:
    - catalogue_size=empty|small|large
    """
    chosen = locale if locale is not None else draw(locales())
    entries = draw(
        st.lists(
            st.tuples(domains(), message_ids(), templates()),
            max_size=max_messages,
        )
    )
    catalogue = Catalogue(chosen)
    for domain, message_id, template in entries:
        catalogue.insert(domain, message_id, template)
    size = len(catalogue)
    event(f"catalogue_size={'empty' if size == 0 else 'small' if size <= 3 else 'large'}")
    return catalogue


@st.composite
def catalogue_bags(draw: DrawFn, max_catalogues: int = 4) -> CatalogueBag:
    """A CatalogueBag whose catalogues draw locales from a small shared pool.

    Events emitted:
    - bag_locale_overlap=shared|disjoint
    """
    pool = [Locale.ENGLISH, Locale.ENGLISH_UNITED_STATES, Locale.FRENCH, Locale.FRENCH_CANADA]
    items = draw(
        st.lists(
            st.sampled_from(pool).flatmap(lambda loc: catalogues(locale=loc, max_messages=4)),
            max_size=max_catalogues,
        )
    )
    distinct = {catalogue.locale for catalogue in items}
    event(f"bag_locale_overlap={'shared' if len(distinct) < len(items) else 'disjoint'}")
    return CatalogueBag(items)


@st.composite
def plural_guards(draw: DrawFn) -> PluralGuard:
    """Any well-formed guard.

    Events emitted:
    - guard_kind=exact|range|range_to|range_from
    """
    kind = draw(st.sampled_from(["exact", "range", "range_to", "range_from"]))
    event(f"guard_kind={kind}")
    match kind:
        case "exact":
            values = draw(st.lists(_COUNTS, min_size=1, max_size=4))
            return ExactGuard(values=tuple(values))
        case "range":
            low = draw(_COUNTS)
            high = draw(st.integers(min_value=low, max_value=low + 100))
            return RangeGuard(start=low, end=high)
        case "range_to":
            return RangeGuard(start=None, end=draw(_COUNTS))
        case _:
            return RangeGuard(start=draw(_COUNTS), end=None)


@st.composite
def plural_template_sources(
    draw: DrawFn,
) -> tuple[str, list[tuple[PluralGuard, str]], str]:
    """A well-formed plural template plus the branches it was built from.

    Returns:
        Tuple of (source, [(guard, text), ...], default_text)
    """
    branches = draw(
        st.lists(st.tuples(plural_guards(), branch_texts()), min_size=1, max_size=5)
    )
    default = draw(branch_texts())
    parts = [f"{guard} {text}" for guard, text in branches]
    parts.append(default)
    return " | ".join(parts), branches, default
