"""Tests for placeholder interpolation.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from linguacat.runtime import display_value, interpolate


class TestDisplayValue:
    """display_value()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            (True, "true"),
            (False, "false"),
            (3, "3"),
            (3.0, "3"),
            (-0.0, "0"),
            (2.5, "2.5"),
            (Decimal("1.50"), "1.50"),
            ("text", "text"),
        ],
    )
    def test_rendering(self, value: object, expected: str) -> None:
        assert display_value(value) == expected


class TestNamedPlaceholders:
    """{name} tokens."""

    def test_substitution(self) -> None:
        assert interpolate("Hello, {name}!", {"name": "World"}) == "Hello, World!"

    def test_repeated_name(self) -> None:
        assert interpolate("{x}{x}{x}", {"x": "ab"}) == "ababab"

    def test_whitespace_inside_braces(self) -> None:
        assert interpolate("Hi { name }", {"name": "Ana"}) == "Hi Ana"

    def test_missing_name_left_verbatim(self) -> None:
        """Unknown names stay in the output so gaps are visible."""
        assert interpolate("Hello, {name}!", {"other": 1}) == "Hello, {name}!"

    def test_no_context(self) -> None:
        assert interpolate("Hello, {name}!") == "Hello, {name}!"

    def test_value_containing_braces_not_reinterpolated(self) -> None:
        """Substituted values are emitted as is."""
        assert interpolate("{a}", {"a": "{b}", "b": "no"}) == "{b}"


class TestPositionalPlaceholders:
    """{N} and {} tokens."""

    def test_indexed(self) -> None:
        context = {"first": "a", "second": "b"}
        assert interpolate("{1}-{0}", context) == "b-a"

    def test_sequential(self) -> None:
        assert interpolate("{} and {}", {"a": 1, "b": 2}) == "1 and 2"

    def test_sequential_exhausted(self) -> None:
        assert interpolate("{} {} {}", {"a": 1}) == "1 {} {}"

    def test_index_out_of_range(self) -> None:
        assert interpolate("{5}", {"a": 1}) == "{5}"

    def test_count_excluded_from_positions(self) -> None:
        """The 'count' entry never fills a positional slot."""
        context = {"count": 3, "name": "Ana"}
        assert interpolate("{0} has {count}", context) == "Ana has 3"
        assert interpolate("{}", context) == "Ana"

    def test_indexed_does_not_advance_sequence(self) -> None:
        context = {"a": "x", "b": "y"}
        assert interpolate("{1}{}{}", context) == "yxy"


class TestCountPlaceholder:
    """{?} and {count} tokens."""

    def test_question_mark_renders_count(self) -> None:
        assert interpolate("{?} apples", count=5) == "5 apples"

    def test_question_mark_without_count(self) -> None:
        assert interpolate("{?} apples") == "{?} apples"

    def test_count_name_falls_back_to_count_argument(self) -> None:
        assert interpolate("{count} apples", {}, count=2) == "2 apples"

    def test_context_count_wins_for_name(self) -> None:
        assert interpolate("{count}", {"count": "many"}, count=2) == "many"

    def test_float_count(self) -> None:
        assert interpolate("{?}", count=2.0) == "2"
        assert interpolate("{?}", count=2.5) == "2.5"


class TestEscapes:
    """{{ and }} escapes and malformed braces."""

    def test_escaped_braces(self) -> None:
        assert interpolate("{{name}}", {"name": "x"}) == "{name}"

    def test_lone_braces_verbatim(self) -> None:
        assert interpolate("a { b } c {", {"b": 1}) == "a 1 c {"
        assert interpolate("}{", {}) == "}{"

    def test_nested_braces(self) -> None:
        assert interpolate("{{{name}}}", {"name": "x"}) == "{x}"

    @given(text=st.text(alphabet=st.characters(blacklist_characters="{}"), max_size=50))
    def test_text_without_braces_unchanged(self, text: str) -> None:
        """Plain text passes through untouched."""
        assert interpolate(text, {"a": 1}, count=3) == text
