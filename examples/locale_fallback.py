"""Translator Example - Locale Fallback Chains.

Demonstrates how a Translator handles incomplete translations:

1. Regional variant falling back to its base language
2. Configured fallback locale for languages with no catalogue
3. Observing fallbacks with on_fallback
4. Changing the fallback locale at runtime
5. Negotiating the locale from an Accept-Language header

Python 3.13+.
"""

from __future__ import annotations

from linguacat import (
    Catalogue,
    CatalogueBag,
    FallbackInfo,
    Locale,
    MessageNotFound,
    Translator,
    negotiate_locale,
)


def build_bag() -> CatalogueBag:
    """French has a partial catalogue, Canadian French overrides one message."""
    return CatalogueBag(
        [
            Catalogue(
                Locale.ENGLISH,
                {
                    "shop": {
                        "welcome": "Welcome, {name}!",
                        "cart": "Cart",
                        "checkout": "Checkout",
                        "items": "{0} Your cart is empty | {1} One item | {?} items",
                    }
                },
            ),
            Catalogue(
                Locale.FRENCH,
                {"shop": {"welcome": "Bienvenue, {name} !", "cart": "Panier"}},
            ),
            Catalogue(Locale.FRENCH_CANADA, {"shop": {"cart": "Chariot"}}),
        ]
    )


def example_1_regional_fallback() -> None:
    """Example 1: fr_CA → fr."""
    print("=" * 60)
    print("Example 1: Regional Fallback (fr_CA → fr)")
    print("=" * 60)

    translator = Translator(build_bag())
    print(f"  chain: {translator.fallback_chain(Locale.FRENCH_CANADA)}")
    print(f"  cart: {translator.translate(Locale.FRENCH_CANADA, 'shop', 'cart')}")
    welcome = translator.translate(Locale.FRENCH_CANADA, "shop", "welcome", {"name": "Anne"})
    print(f"  welcome: {welcome}")

    try:
        translator.translate(Locale.FRENCH_CANADA, "shop", "checkout")
    except MessageNotFound as e:
        print(f"  checkout: {e}")


def example_2_fallback_locale() -> None:
    """Example 2: fr_CA → fr → en."""
    print("\n" + "=" * 60)
    print("Example 2: Fallback Locale (fr_CA → fr → en)")
    print("=" * 60)

    translator = Translator(build_bag(), Locale.ENGLISH)
    print(f"  chain: {translator.fallback_chain(Locale.FRENCH_CANADA)}")
    print(f"  checkout: {translator.translate(Locale.FRENCH_CANADA, 'shop', 'checkout')}")
    print(f"  items: {translator.translate(Locale.GERMAN, 'shop', 'items', count=3)}")


def example_3_observing_fallbacks() -> None:
    """Example 3: Report messages that are missing a translation."""
    print("\n" + "=" * 60)
    print("Example 3: on_fallback Callback")
    print("=" * 60)

    missing: list[FallbackInfo] = []
    translator = Translator(build_bag(), Locale.ENGLISH, on_fallback=missing.append)

    for message_id in ("welcome", "cart", "checkout"):
        translator.translate(Locale.FRENCH_CANADA, "shop", message_id, {"name": "Anne"})

    for info in missing:
        print(
            f"  {info.domain}/{info.message_id}: requested {info.requested_locale}, "
            f"resolved {info.resolved_locale}"
        )


def example_4_runtime_reconfiguration() -> None:
    """Example 4: Remove and restore the fallback locale."""
    print("\n" + "=" * 60)
    print("Example 4: set_fallback_locale")
    print("=" * 60)

    translator = Translator(build_bag(), Locale.ENGLISH)
    print(f"  has checkout (fallback en): {translator.has_message(Locale.FRENCH, 'shop', 'checkout')}")
    translator.set_fallback_locale(None)
    print(f"  has checkout (no fallback): {translator.has_message(Locale.FRENCH, 'shop', 'checkout')}")


def example_5_accept_language() -> None:
    """Example 5: Pick the request locale from an HTTP header."""
    print("\n" + "=" * 60)
    print("Example 5: Accept-Language Negotiation")
    print("=" * 60)

    translator = Translator(build_bag(), Locale.ENGLISH)
    for header in ("fr-CA,fr;q=0.9", "de-CH, fr;q=0.5", "xx, *;q=0.1", ""):
        locale = negotiate_locale(header, Locale.ENGLISH)
        cart = translator.translate(locale, "shop", "cart")
        print(f"  {header!r:<22} → {locale.to_bcp47():<6} {cart}")


# Main execution
if __name__ == "__main__":
    example_1_regional_fallback()
    example_2_fallback_locale()
    example_3_observing_fallbacks()
    example_4_runtime_reconfiguration()
    example_5_accept_language()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
