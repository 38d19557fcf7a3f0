"""Quickstart example for linguacat.

This example demonstrates basic usage of linguacat: building catalogues in
code, translating with placeholders and plural branches, and handling the
errors a lookup can raise.
"""

from linguacat import (
    Catalogue,
    CatalogueBag,
    Locale,
    MessageNotFound,
    MissingPluralContext,
    Translator,
)

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

english = Catalogue(
    Locale.ENGLISH,
    {
        "messages": {
            "hello": "Hello, World!",
            "greeting": "Hello, {name}!",
            "apples": (
                "{0} There are no apples | {1} There is one apple "
                "| {2..4} There are few apples | There are {?} apples"
            ),
            "pair": "{} and {}",
        }
    },
)
translator = Translator(CatalogueBag([english]))

print(translator.translate(Locale.ENGLISH, "messages", "hello"))
# Output: Hello, World!

# Example 2: Placeholders
print("\n" + "=" * 50)
print("Example 2: Placeholders")
print("=" * 50)

print(translator.translate(Locale.ENGLISH, "messages", "greeting", {"name": "Ada"}))
# Output: Hello, Ada!

print(translator.translate(Locale.ENGLISH, "messages", "pair", {"a": "salt", "b": "pepper"}))
# Output: salt and pepper

# Example 3: Plural branches
print("\n" + "=" * 50)
print("Example 3: Plural Branches")
print("=" * 50)

for count in (0, 1, 3, 10):
    print(f"  {count:>2}: {translator.translate(Locale.ENGLISH, 'messages', 'apples', count=count)}")
# Output:
#    0: There are no apples
#    1: There is one apple
#    3: There are few apples
#   10: There are 10 apples

# Example 4: Regional variants fall back to their base language
print("\n" + "=" * 50)
print("Example 4: Regional Fallback")
print("=" * 50)

print(translator.translate(Locale.ENGLISH_UNITED_KINGDOM, "messages", "greeting", {"name": "Tom"}))
# Output: Hello, Tom!

# Example 5: Errors
print("\n" + "=" * 50)
print("Example 5: Errors")
print("=" * 50)

try:
    translator.translate(Locale.ENGLISH, "messages", "missing")
except MessageNotFound as e:
    print(f"  {e}")

try:
    translator.translate(Locale.ENGLISH, "messages", "apples")
except MissingPluralContext as e:
    print(f"  {e}")

print("\n[SUCCESS] Quickstart complete!")
