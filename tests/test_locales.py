"""Tests for the Locale enumeration.

Covers the fallback relationship, tag rendering, tag parsing through Babel
and CLDR display names.

Python 3.13+.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from babel.core import UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from linguacat import Locale, LocaleParseError
from linguacat.diagnostics import DiagnosticCode
from tests.strategies import base_locales, locales, variant_locales


class TestLocaleMembers:
    """The closed set of supported locales."""

    def test_member_count(self) -> None:
        """Every supported language and regional variant is a member."""
        assert len(Locale) == 244

    def test_tags_are_unique(self) -> None:
        """No two members share a tag."""
        assert len({locale.value for locale in Locale}) == len(Locale)

    def test_every_variant_base_is_a_member(self) -> None:
        """A variant's base language is always itself supported."""
        for locale in Locale:
            if locale.is_variant:
                assert Locale(locale.language) in Locale

    @pytest.mark.parametrize(
        ("locale", "tag"),
        [
            (Locale.ENGLISH, "en"),
            (Locale.ENGLISH_UNITED_STATES, "en_US"),
            (Locale.ARABIC_TUNISIA, "ar_TN"),
            (Locale.CHINESE_TAIWAN, "zh_TW"),
            (Locale.PORTUGUESE_BRAZIL, "pt_BR"),
            (Locale.SWEDISH_FINLAND, "sv_FI"),
        ],
    )
    def test_canonical_tags(self, locale: Locale, tag: str) -> None:
        """Member values are lang or lang_TERRITORY."""
        assert locale.value == tag
        assert str(locale) == tag
        assert locale.to_tag() == tag

    def test_ordering_follows_tags(self) -> None:
        """Locales order like their tag strings."""
        assert Locale.ENGLISH < Locale.ENGLISH_UNITED_STATES < Locale.FRENCH
        assert sorted([Locale.FRENCH, Locale.ARABIC, Locale.ENGLISH]) == [
            Locale.ARABIC,
            Locale.ENGLISH,
            Locale.FRENCH,
        ]

    def test_hashable(self) -> None:
        """Locales can key dictionaries."""
        table = {Locale.GERMAN: "de", Locale.GERMAN_AUSTRIA: "de_AT"}
        assert table[Locale.GERMAN_AUSTRIA] == "de_AT"


class TestLocaleStructure:
    """language, territory, is_variant and base."""

    def test_variant_parts(self) -> None:
        """A regional variant splits into language and territory."""
        locale = Locale.FRENCH_CANADA
        assert locale.language == "fr"
        assert locale.territory == "CA"
        assert locale.is_variant
        assert locale.base is Locale.FRENCH

    def test_base_language_parts(self) -> None:
        """A base language has no territory and is its own base."""
        locale = Locale.JAPANESE
        assert locale.language == "ja"
        assert locale.territory is None
        assert not locale.is_variant
        assert locale.base is Locale.JAPANESE

    def test_multi_word_names_are_not_variants(self) -> None:
        """Member names with underscores can still be base languages."""
        assert not Locale.NORWEGIAN_NYNORSK.is_variant
        assert Locale.NORWEGIAN_NYNORSK.value == "nn"


class TestFallback:
    """parent_fallback() and fallback_chain()."""

    def test_variant_falls_back_to_base(self) -> None:
        """en_US falls back to en."""
        assert Locale.ENGLISH_UNITED_STATES.parent_fallback() is Locale.ENGLISH

    def test_base_has_no_parent(self) -> None:
        """Base languages end the chain."""
        assert Locale.ENGLISH.parent_fallback() is None

    def test_chain_of_variant(self) -> None:
        """Chain lists the variant then its base."""
        assert Locale.SPANISH_MEXICO.fallback_chain() == (Locale.SPANISH_MEXICO, Locale.SPANISH)

    def test_chain_of_base(self) -> None:
        """Chain of a base language is the language alone."""
        assert Locale.CHINESE.fallback_chain() == (Locale.CHINESE,)

    @given(locale=locales())
    def test_chain_terminates_at_base_language(self, locale: Locale) -> None:
        """Every chain is finite, starts at the locale and ends at a base language."""
        chain = locale.fallback_chain()
        event(f"chain_length={len(chain)}")
        assert chain[0] is locale
        assert chain[-1].parent_fallback() is None
        assert not chain[-1].is_variant
        assert len(chain) == len(set(chain))

    @given(locale=locales())
    def test_chain_strictly_decreases_specificity(self, locale: Locale) -> None:
        """Each step drops the territory; no step repeats a locale."""
        chain = locale.fallback_chain()
        for child, parent in zip(chain, chain[1:], strict=False):
            assert child.is_variant
            assert not parent.is_variant
            assert parent.language == child.language

    @given(locale=variant_locales())
    def test_variant_parent_is_its_base(self, locale: Locale) -> None:
        """A variant's parent equals its base."""
        assert locale.parent_fallback() is locale.base

    @given(locale=base_locales())
    def test_base_language_chain_is_singleton(self, locale: Locale) -> None:
        """A base language's chain contains only itself."""
        assert locale.fallback_chain() == (locale,)


class TestTags:
    """to_bcp47() and from_tag()."""

    def test_to_bcp47(self) -> None:
        """BCP 47 uses a hyphen separator."""
        assert Locale.PORTUGUESE_BRAZIL.to_bcp47() == "pt-BR"
        assert Locale.PORTUGUESE.to_bcp47() == "pt"

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("en", Locale.ENGLISH),
            ("en_US", Locale.ENGLISH_UNITED_STATES),
            ("en-US", Locale.ENGLISH_UNITED_STATES),
            ("EN-us", Locale.ENGLISH_UNITED_STATES),
            ("en_us", Locale.ENGLISH_UNITED_STATES),
            ("  fr-CA  ", Locale.FRENCH_CANADA),
            ("de_CH.UTF-8", Locale.GERMAN_SWITZERLAND),
            ("de_AT.UTF-8", Locale.GERMAN_AUSTRIA),
            ("fr_FR@euro", Locale.FRENCH_FRANCE),
            ("zh_Hant_TW", Locale.CHINESE_TAIWAN),
            ("zh-Hans", Locale.CHINESE),
        ],
    )
    def test_from_tag_accepts_common_spellings(self, tag: str, expected: Locale) -> None:
        """Separators, case, encoding suffixes and scripts are normalized."""
        assert Locale.from_tag(tag) is expected

    @given(locale=locales())
    def test_tag_round_trip(self, locale: Locale) -> None:
        """Both tag renderings parse back to the same member."""
        assert Locale.from_tag(locale.to_tag()) is locale
        assert Locale.from_tag(locale.to_bcp47()) is locale

    @pytest.mark.parametrize("tag", ["xx", "en_XX", "de_DE", "tlh", "es_419"])
    def test_unsupported_tags(self, tag: str) -> None:
        """Well-formed but unsupported tags raise LocaleParseError."""
        with pytest.raises(LocaleParseError) as exc_info:
            Locale.from_tag(tag)
        assert exc_info.value.tag == tag
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_UNKNOWN

    @pytest.mark.parametrize("tag", ["", "  ", "1234", "en__US", "en_US_XX_YY_ZZ"])
    def test_malformed_tags(self, tag: str) -> None:
        """Tags Babel cannot parse raise LocaleParseError."""
        with pytest.raises(LocaleParseError) as exc_info:
            Locale.from_tag(tag)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_MALFORMED
        assert f"'{tag}'" in str(exc_info.value)

    @given(tag=st.text(max_size=12))
    def test_from_tag_never_raises_anything_else(self, tag: str) -> None:
        """Arbitrary input yields a Locale or LocaleParseError."""
        try:
            result = Locale.from_tag(tag)
        except LocaleParseError:
            event("outcome=rejected")
        else:
            event("outcome=parsed")
            assert isinstance(result, Locale)


class TestDisplayName:
    """display_name() through Babel."""

    def test_own_language(self) -> None:
        """Default rendering language is the locale itself."""
        assert Locale.FRENCH.display_name() == "français"

    def test_in_other_locale(self) -> None:
        """Names can be rendered in another language."""
        assert Locale.GERMAN.display_name(Locale.ENGLISH) == "German"

    def test_variant_includes_territory(self) -> None:
        """Regional variants mention their territory."""
        assert Locale.ENGLISH_UNITED_STATES.display_name() == "English (United States)"

    def test_falls_back_to_member_name(self) -> None:
        """Locales CLDR does not know render from the member name."""
        with patch(
            "linguacat.locale_utils.get_babel_locale",
            side_effect=UnknownLocaleError("bh"),
        ):
            assert Locale.BIHARI.display_name() == "Bihari"
