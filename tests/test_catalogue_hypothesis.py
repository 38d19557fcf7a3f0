"""Property-based tests for Catalogue and CatalogueBag.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from linguacat import Catalogue, CatalogueBag, Locale
from tests.strategies import catalogue_bags, catalogues, domains, message_ids, templates


class TestCatalogueProperties:
    """Storage properties of Catalogue."""

    @given(
        catalogue=catalogues(),
        domain=domains(),
        message_id=message_ids(),
        template=templates(),
    )
    def test_insert_then_get(
        self, catalogue: Catalogue, domain: str, message_id: str, template: str
    ) -> None:
        """A stored template reads back unmodified."""
        previous = catalogue.get(domain, message_id)
        event(f"overwrite={previous is not None}")
        assert catalogue.insert(domain, message_id, template) == previous
        assert catalogue.get(domain, message_id) == template

    @given(catalogue=catalogues())
    def test_len_counts_items(self, catalogue: Catalogue) -> None:
        """len() equals the number of stored triples."""
        assert len(catalogue) == len(list(catalogue.items()))

    @given(catalogue=catalogues())
    def test_copy_equals_original(self, catalogue: Catalogue) -> None:
        """copy() preserves every template."""
        assert catalogue.copy() == catalogue

    @given(catalogue=catalogues())
    def test_merge_with_self_is_idempotent(self, catalogue: Catalogue) -> None:
        """Merging a catalogue into itself changes nothing."""
        before = catalogue.copy()
        catalogue.merge(catalogue.copy())
        assert catalogue == before

    @given(
        first=catalogues(locale=Locale.ENGLISH),
        second=catalogues(locale=Locale.ENGLISH),
    )
    def test_merge_last_write_wins(self, first: Catalogue, second: Catalogue) -> None:
        """After merging, every template of the merged catalogue is present."""
        merged = first.copy()
        merged.merge(second)
        for domain, message_id, template in second.items():
            assert merged.get(domain, message_id) == template
        for domain, message_id, template in first.items():
            if second.get(domain, message_id) is None:
                assert merged.get(domain, message_id) == template


class TestCatalogueBagProperties:
    """Aggregation properties of CatalogueBag."""

    @given(bag=catalogue_bags())
    def test_one_catalogue_per_locale(self, bag: CatalogueBag) -> None:
        """Locales never repeat."""
        locales = bag.locales()
        assert len(locales) == len(set(locales)) == len(bag)
        for locale in locales:
            stored = bag.get(locale)
            assert stored is not None
            assert stored.locale is locale

    @given(bag=catalogue_bags())
    def test_merge_with_self_is_idempotent(self, bag: CatalogueBag) -> None:
        """Merging a bag into a copy of itself yields an equal bag."""
        merged = bag.copy()
        merged.merge(bag)
        assert merged == bag

    @given(a=catalogue_bags(), b=catalogue_bags(), c=catalogue_bags())
    def test_merge_associative(
        self, a: CatalogueBag, b: CatalogueBag, c: CatalogueBag
    ) -> None:
        """(a + b) + c equals a + (b + c)."""
        left = a.copy()
        left.merge(b)
        left.merge(c)

        right_tail = b.copy()
        right_tail.merge(c)
        right = a.copy()
        right.merge(right_tail)

        event(f"locales={len(left)}")
        assert left == right

    @given(bag=catalogue_bags(), extra=st.sampled_from(list(Locale)))
    def test_freeze_covers_every_catalogue(self, bag: CatalogueBag, extra: Locale) -> None:
        """Freezing propagates to all catalogues; get() of an absent locale is None."""
        bag.freeze()
        assert all(catalogue.frozen for catalogue in bag)
        if extra not in bag:
            assert bag.get(extra) is None
