"""Concurrent use of a shared Translator.

Python 3.13+.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from linguacat import Catalogue, CatalogueBag, Locale, MessageNotFound, Translator


def _translator() -> Translator:
    bag = CatalogueBag(
        [
            Catalogue(
                Locale.ENGLISH,
                {"messages": {"items": "{1} one item | {?} items", "hello": "Hello"}},
            ),
            Catalogue(Locale.GERMAN, {"messages": {"hello": "Hallo", "only_de": "Nur"}}),
        ]
    )
    return Translator(bag, Locale.ENGLISH)


class TestConcurrentTranslation:
    """Many threads translating through one translator."""

    def test_parallel_translate(self) -> None:
        translator = _translator()

        def work(count: int) -> str:
            return translator.translate(Locale.GERMAN_AUSTRIA, "messages", "items", count=count)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, range(200)))

        assert results[1] == "one item"
        assert results == [
            "one item" if count == 1 else f"{count} items" for count in range(200)
        ]

    def test_fallback_switch_during_translation(self) -> None:
        """Every translation sees either the old or the new fallback, never a torn state."""
        translator = _translator()

        def translate(_: int) -> str:
            try:
                return translator.translate(Locale.FRENCH, "messages", "only_de")
            except MessageNotFound:
                return "missing"

        def switch(index: int) -> None:
            translator.set_fallback_locale(Locale.GERMAN if index % 2 else Locale.ENGLISH)

        with ThreadPoolExecutor(max_workers=8) as pool:
            switches = [pool.submit(switch, index) for index in range(50)]
            outcomes = list(pool.map(translate, range(300)))
            for future in switches:
                future.result()

        assert set(outcomes) <= {"Nur", "missing"}
        assert translator.fallback_locale in (Locale.GERMAN, Locale.ENGLISH)
