"""Catalogue loading infrastructure.

Provides the protocol for catalogue loaders and a directory implementation
that reads one flat message file per (domain, locale) pair, named
``{domain}.{locale}.{ext}``:

    translations/
        messages.en.toml
        messages.fr_CA.toml
        errors.en.json

Each file maps message ids to raw templates. TOML files are decoded with
tomllib and JSON files with json; values must all be strings.

Components:
    CatalogueLoader - Protocol for anything that produces a CatalogueBag
    DirectoryCatalogueLoader - Fail-fast loader for a directory of message files
    CatalogueFile - Immutable description of one discovered message file

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from linguacat.catalogue.catalogue import Catalogue, CatalogueBag
from linguacat.catalogue.types import Domain, MessageId, Template
from linguacat.constants import DEFAULT_CATALOGUE_EXTENSIONS
from linguacat.diagnostics import CatalogueLoadError, DiagnosticCode, LocaleParseError
from linguacat.enums import CatalogueFormat
from linguacat.locales import Locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogueLoader",
    # Concrete loader
    "DirectoryCatalogueLoader",
    # Discovery and decoding
    "CatalogueFile",
    "discover_catalogue_files",
    "parse_catalogue_source",
]

logger = logging.getLogger(__name__)


class CatalogueLoader(Protocol):
    """Protocol for producing a CatalogueBag.

    This is a Protocol (structural typing) rather than ABC so that any object
    with a matching load() method can feed Translator.from_loader().

    Example:
        >>> class StaticLoader:
        ...     def load(self) -> CatalogueBag:
        ...         return CatalogueBag([Catalogue(Locale.ENGLISH, {"messages": {"hi": "Hi"}})])
        ...
        >>> translator = Translator.from_loader(StaticLoader())
    """

    def load(self) -> CatalogueBag:
        """Build a catalogue bag.

        Raises:
            CatalogueLoadError: If a source cannot be read or decoded
        """
        ...


@dataclass(frozen=True, slots=True)
class CatalogueFile:
    """One message file found by discover_catalogue_files().

    Attributes:
        path: Path to the file
        domain: Domain parsed from the file name
        locale: Locale parsed from the file name
        extension: Lower-case extension without the dot
    """

    path: Path
    domain: Domain
    locale: Locale
    extension: str


def _normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    return tuple(ext.lower().lstrip(".") for ext in extensions)


def _describe_file(path: Path, extension: str) -> CatalogueFile:
    """Split ``{domain}.{locale}.{ext}`` into its parts.

    Raises:
        CatalogueLoadError: Name lacks a domain or names an unsupported locale
    """
    stem = path.name[: -(len(extension) + 1)]
    domain, sep, tag = stem.rpartition(".")
    if not sep or not domain or not tag:
        msg = (
            f"invalid catalogue file name '{path.name}': "
            "expected '{domain}.{locale}.{extension}'"
        )
        raise CatalogueLoadError(
            msg,
            path=path,
            code=DiagnosticCode.FILENAME_INVALID,
            hint="Rename the file, e.g. 'messages.en.toml'",
        )
    try:
        locale = Locale.from_tag(tag)
    except LocaleParseError as e:
        msg = f"unknown locale '{tag}' in catalogue file name '{path.name}'"
        raise CatalogueLoadError(
            msg, path=path, code=DiagnosticCode.FILE_LOCALE_UNKNOWN
        ) from e
    return CatalogueFile(path=path, domain=domain, locale=locale, extension=extension)


def discover_catalogue_files(
    directory: str | Path,
    extensions: Iterable[str] = DEFAULT_CATALOGUE_EXTENSIONS,
) -> tuple[CatalogueFile, ...]:
    """List the message files of a directory, sorted by path.

    Only regular files whose extension is listed are considered; hidden
    files and subdirectories are skipped.

    Args:
        directory: Directory to scan (not recursive)
        extensions: Accepted extensions, with or without a leading dot

    Returns:
        Discovered files, sorted by path for deterministic loading

    Raises:
        CatalogueLoadError: Directory cannot be listed, or a file name is invalid
    """
    root = Path(directory)
    accepted = _normalize_extensions(extensions)
    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        msg = f"failed to read catalogue directory '{root}': {e.strerror or e}"
        raise CatalogueLoadError(
            msg, path=root, code=DiagnosticCode.DIRECTORY_UNREADABLE
        ) from e

    files: list[CatalogueFile] = []
    for entry in entries:
        if entry.name.startswith(".") or not entry.is_file():
            continue
        extension = entry.suffix[1:].lower()
        if extension not in accepted:
            continue
        files.append(_describe_file(entry, extension))
    return tuple(files)


def _decode(source: str, extension: str) -> Any:
    match CatalogueFormat(extension):
        case CatalogueFormat.TOML:
            return tomllib.loads(source)
        case CatalogueFormat.JSON:
            return json.loads(source)


def parse_catalogue_source(
    source: str,
    extension: str,
    *,
    source_path: Path | None = None,
) -> dict[MessageId, Template]:
    """Decode a flat message file into an id -> template mapping.

    Args:
        source: File contents
        extension: Format of the contents ("toml" or "json")
        source_path: File the contents came from, for error reporting

    Returns:
        Mapping of message id to raw template, in file order

    Raises:
        CatalogueLoadError: Unsupported format, undecodable contents, a
            non-table document or a non-string value
    """
    extension = extension.lower().lstrip(".")
    if extension not in CatalogueFormat:
        msg = f"unsupported catalogue format '{extension}'"
        raise CatalogueLoadError(
            msg,
            path=source_path,
            code=DiagnosticCode.FILE_PARSE_FAILED,
            hint=f"Use one of: {', '.join(CatalogueFormat)}",
        )

    try:
        document = _decode(source, extension)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        msg = f"failed to parse {extension} catalogue: {e}"
        raise CatalogueLoadError(msg, path=source_path) from e

    if not isinstance(document, dict):
        msg = f"catalogue must be a table of message ids, got {type(document).__name__}"
        raise CatalogueLoadError(msg, path=source_path, code=DiagnosticCode.FILE_VALUE_INVALID)

    messages: dict[MessageId, Template] = {}
    for message_id, template in document.items():
        if not isinstance(template, str):
            msg = (
                f"value for message '{message_id}' must be a string, "
                f"got {type(template).__name__}"
            )
            raise CatalogueLoadError(
                msg,
                path=source_path,
                code=DiagnosticCode.FILE_VALUE_INVALID,
                hint="Catalogue files are flat: quote every template as a string",
            )
        messages[message_id] = template
    return messages


@dataclass(frozen=True, slots=True)
class DirectoryCatalogueLoader:
    """Load every ``{domain}.{locale}.{ext}`` file of a directory into a bag.

    Fail-fast: the first unreadable or invalid file aborts the load with a
    CatalogueLoadError naming that file. Files are loaded in sorted path
    order, so when two files supply the same (locale, domain, id) the result
    is still deterministic.

    Example:
        >>> loader = DirectoryCatalogueLoader("translations")
        >>> bag = loader.load()
        >>> bag.locales()
        (<Locale.ENGLISH: 'en'>, <Locale.FRENCH: 'fr'>)

    Attributes:
        directory: Directory holding the message files
        extensions: Accepted file extensions
    """

    directory: str | Path
    extensions: tuple[str, ...] = DEFAULT_CATALOGUE_EXTENSIONS

    def __post_init__(self) -> None:
        unsupported = [
            ext for ext in _normalize_extensions(self.extensions) if ext not in CatalogueFormat
        ]
        if unsupported:
            msg = f"unsupported catalogue extension(s): {', '.join(unsupported)}"
            raise ValueError(msg)

    def load(self) -> CatalogueBag:
        """Read, decode and merge every message file.

        Raises:
            CatalogueLoadError: A file or the directory could not be loaded
        """
        files = discover_catalogue_files(self.directory, self.extensions)
        bag = CatalogueBag()
        for catalogue_file in files:
            try:
                source = catalogue_file.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                msg = f"failed to read catalogue file '{catalogue_file.path}': {e}"
                raise CatalogueLoadError(
                    msg, path=catalogue_file.path, code=DiagnosticCode.FILE_UNREADABLE
                ) from e

            messages = parse_catalogue_source(
                source, catalogue_file.extension, source_path=catalogue_file.path
            )
            bag.insert(Catalogue(catalogue_file.locale, {catalogue_file.domain: messages}))
            logger.debug(
                "Loaded %d message(s) for %s/%s from %s",
                len(messages),
                catalogue_file.locale,
                catalogue_file.domain,
                catalogue_file.path,
            )

        logger.info(
            "Loaded %d catalogue file(s) for %d locale(s) from %s",
            len(files),
            len(bag),
            self.directory,
        )
        return bag
