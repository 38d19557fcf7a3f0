"""Plural Template Example.

Shows the guard forms a plural template accepts and how counts select a
branch: exact values, value sets, inclusive ranges and open ranges, with the
final unguarded segment as the default.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from linguacat.runtime import parse_template, select_branch
from linguacat.validation import validate_template

TEMPLATE = "{0} foo | {1, 2} bar | {..5} baz | {10..} qux | fizz || bizz"


def show_selection() -> None:
    parsed = parse_template(TEMPLATE)
    for branch in parsed.branches:
        print(f"  {branch.guard!s:<10} → {branch.text}")
    print(f"  {'(default)':<10} → {parsed.default}")
    print()
    for count in (0, 1, 2, 3, 5, 6, 9, 10, 100, Decimal("1.5"), "2", float("nan")):
        print(f"  count={count!r:<16} {select_branch(parsed, count)}")


def show_errors() -> None:
    for source in ("{0} foo | {one} bar | baz", "{0} foo | {5..2} bar | baz", "{0} foo | {1} bar"):
        error = validate_template(source)
        if error is not None and error.diagnostic is not None:
            print(error.diagnostic.format_error())
            print()


if __name__ == "__main__":
    print("=" * 60)
    print("Branch selection")
    print("=" * 60)
    show_selection()

    print("\n" + "=" * 60)
    print("Malformed templates")
    print("=" * 60)
    show_errors()
