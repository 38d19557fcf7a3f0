#!/usr/bin/env python3
"""Validate every message file of a catalogue directory.

Loads ``{domain}.{locale}.{ext}`` files from a directory, parses every
template and reports each malformed plural template. Intended for CI, before
translations ship.

Usage:
    python scripts/validate_catalogues.py translations/
    python scripts/validate_catalogues.py translations/ --extension toml -v

Exit Codes:
    0: All templates valid
    1: At least one template is malformed
    2: The directory or a message file could not be loaded

Python 3.13+. Depends on linguacat.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from linguacat import CatalogueLoadError, DirectoryCatalogueLoader, __version__
from linguacat.constants import DEFAULT_CATALOGUE_EXTENSIONS
from linguacat.validation import validate_bag

logger = logging.getLogger("validate_catalogues")


def parse_args(args: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Validate the message templates of a catalogue directory",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="Directory holding {domain}.{locale}.{ext} message files",
    )
    parser.add_argument(
        "-e",
        "--extension",
        action="append",
        default=None,
        help=(
            "Message file extension to load (can be repeated; "
            f"default: {', '.join(DEFAULT_CATALOGUE_EXTENSIONS)})"
        ),
    )
    parser.add_argument(
        "--sanitize",
        action="store_true",
        help="Truncate long templates in error output",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also log per-file loading details",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors",
    )
    return parser.parse_args(args)


def main(args: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments (None uses sys.argv)

    Returns:
        Exit code: 0 valid, 1 malformed templates, 2 load failure
    """
    parsed = parse_args(args)

    level = logging.DEBUG if parsed.verbose else logging.ERROR if parsed.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    extensions = tuple(parsed.extension or DEFAULT_CATALOGUE_EXTENSIONS)
    try:
        loader = DirectoryCatalogueLoader(parsed.directory, extensions)
        bag = loader.load()
    except ValueError as e:
        logger.error("%s", e)
        return 2
    except CatalogueLoadError as e:
        assert e.diagnostic is not None
        logger.error("%s", e.diagnostic.format_error())
        return 2

    result = validate_bag(bag)
    for error in result.errors:
        logger.error("%s", error.format(sanitize=parsed.sanitize))

    if not result.is_valid:
        logger.error(
            "%d of %d template(s) malformed", result.error_count, result.checked
        )
        return 1

    logger.info(
        "%d template(s) in %d locale(s) valid", result.checked, len(bag)
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
