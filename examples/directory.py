"""Directory Loading Example.

Loads every {domain}.{locale}.{ext} file of the translations/ directory next
to this script, validates the templates and translates a few messages.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

from linguacat import DirectoryCatalogueLoader, Locale, Translator, validate_bag

TRANSLATIONS = Path(__file__).parent / "translations"


def main() -> None:
    loader = DirectoryCatalogueLoader(TRANSLATIONS)
    bag = loader.load()
    print(f"Loaded locales: {', '.join(bag.locales())}")

    result = validate_bag(bag)
    print(result.format())

    translator = Translator(bag, Locale.ENGLISH, strict=True)

    print(translator.translate(Locale.ARABIC_TUNISIA, "messages", "greeting", {"name": "سيف"}))
    print(translator.translate(Locale.FRENCH_CANADA, "messages", "apples", count=0))
    print(translator.translate(Locale.FRENCH_CANADA, "messages", "apples", count=7))
    print(translator.translate(Locale.FRENCH, "messages", "pipes"))
    print(translator.translate(Locale.FRENCH, "errors", "not_found", {"path": "/admin"}))


if __name__ == "__main__":
    main()
