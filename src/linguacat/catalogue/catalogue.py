"""Catalogue and CatalogueBag: per-locale message storage.

A Catalogue holds the raw templates of one locale, keyed by domain and
message id. A CatalogueBag aggregates at most one Catalogue per locale and is
the only contract between loaders and the Translator.

Both structures are mutable while being assembled and can be frozen once
complete. The Translator freezes the bag it receives, after which the bag
and its catalogues may be shared freely across threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from linguacat.catalogue.types import Domain, MessageId, Template
from linguacat.diagnostics import CatalogueFrozenError
from linguacat.locales import Locale

__all__ = ["Catalogue", "CatalogueBag"]


class Catalogue:
    """Templates of a single locale, keyed by domain and message id.

    Inserting an existing (domain, id) pair overwrites the stored template.
    Lookups perform no fallback; that is the Translator's job.

    Example:
        >>> catalogue = Catalogue(Locale.ENGLISH)
        >>> catalogue.insert("messages", "greeting", "Hello, {name}!")
        >>> catalogue.get("messages", "greeting")
        'Hello, {name}!'
    """

    __slots__ = ("_frozen", "_locale", "_messages")

    def __init__(
        self,
        locale: Locale,
        messages: Mapping[Domain, Mapping[MessageId, Template]] | None = None,
    ) -> None:
        if not isinstance(locale, Locale):
            msg = f"locale must be a Locale member, got {type(locale).__name__}"
            raise TypeError(msg)
        self._locale = locale
        self._messages: dict[Domain, dict[MessageId, Template]] = {}
        self._frozen = False
        if messages is not None:
            for domain, entries in messages.items():
                for message_id, template in entries.items():
                    self.insert(domain, message_id, template)

    def __repr__(self) -> str:
        return f"Catalogue(locale={self._locale!r}, messages={len(self)})"

    def __len__(self) -> int:
        """Total number of templates across all domains."""
        return sum(len(entries) for entries in self._messages.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalogue):
            return NotImplemented
        return self._locale == other._locale and self._messages == other._messages

    __hash__ = None  # type: ignore[assignment]

    @property
    def locale(self) -> Locale:
        """Locale whose templates this catalogue holds."""
        return self._locale

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise CatalogueFrozenError(f"catalogue for '{self._locale}'")

    # ------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------

    def domains(self) -> tuple[Domain, ...]:
        """Domains with at least one template, sorted."""
        return tuple(sorted(domain for domain, entries in self._messages.items() if entries))

    def get(self, domain: Domain, message_id: MessageId) -> Template | None:
        """Return the raw template for (domain, message_id), or None."""
        entries = self._messages.get(domain)
        if entries is None:
            return None
        return entries.get(message_id)

    def get_all(self, domain: Domain) -> Mapping[MessageId, Template] | None:
        """Return a read-only view of every template in a domain, or None."""
        entries = self._messages.get(domain)
        if not entries:
            return None
        return MappingProxyType(entries)

    def items(self) -> Iterator[tuple[Domain, MessageId, Template]]:
        """Iterate (domain, message_id, template) triples in insertion order."""
        for domain, entries in self._messages.items():
            for message_id, template in entries.items():
                yield domain, message_id, template

    # ------------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------------

    def insert(
        self, domain: Domain, message_id: MessageId, template: Template
    ) -> Template | None:
        """Store a template, returning the one it replaced (if any).

        Raises:
            CatalogueFrozenError: Catalogue is frozen
            TypeError: Template is not a string
        """
        self._check_mutable()
        if not isinstance(template, str):
            msg = (
                f"template for '{domain}/{message_id}' must be str, "
                f"got {type(template).__name__}"
            )
            raise TypeError(msg)
        entries = self._messages.setdefault(domain, {})
        previous = entries.get(message_id)
        entries[message_id] = template
        return previous

    def remove(self, domain: Domain, message_id: MessageId) -> Template | None:
        """Remove one template, returning it (None if it was absent)."""
        self._check_mutable()
        entries = self._messages.get(domain)
        if entries is None:
            return None
        removed = entries.pop(message_id, None)
        if not entries:
            del self._messages[domain]
        return removed

    def remove_all(self, domain: Domain) -> int:
        """Remove every template in a domain, returning how many were removed."""
        self._check_mutable()
        entries = self._messages.pop(domain, None)
        return len(entries) if entries else 0

    def merge(self, other: Catalogue) -> None:
        """Copy every template of another catalogue of the same locale into this one.

        Templates from ``other`` overwrite templates with the same
        (domain, id).

        Raises:
            ValueError: Catalogues belong to different locales
            CatalogueFrozenError: This catalogue is frozen
        """
        self._check_mutable()
        if other.locale != self._locale:
            msg = f"cannot merge catalogue for '{other.locale}' into catalogue for '{self._locale}'"
            raise ValueError(msg)
        for domain, message_id, template in other.items():
            self._messages.setdefault(domain, {})[message_id] = template

    def copy(self) -> Catalogue:
        """Return an unfrozen deep copy."""
        duplicate = Catalogue(self._locale)
        duplicate._messages = {domain: dict(entries) for domain, entries in self._messages.items()}
        return duplicate

    def freeze(self) -> None:
        """Reject every further mutation. Idempotent."""
        self._frozen = True


class CatalogueBag:
    """At most one Catalogue per Locale.

    Inserting a catalogue for a locale already present merges its templates
    into the stored catalogue (last write wins). Catalogues are copied on
    insertion, so later changes to the caller's catalogue do not leak in.

    Example:
        >>> bag = CatalogueBag()
        >>> bag.insert(Catalogue(Locale.ENGLISH, {"messages": {"hi": "Hi"}}))
        >>> Locale.ENGLISH in bag
        True
    """

    __slots__ = ("_catalogues", "_frozen")

    def __init__(self, catalogues: Iterable[Catalogue] = ()) -> None:
        self._catalogues: dict[Locale, Catalogue] = {}
        self._frozen = False
        for catalogue in catalogues:
            self.insert(catalogue)

    def __repr__(self) -> str:
        tags = ", ".join(str(locale) for locale in self._catalogues)
        return f"CatalogueBag([{tags}])"

    def __len__(self) -> int:
        """Number of locales with a catalogue."""
        return len(self._catalogues)

    def __iter__(self) -> Iterator[Catalogue]:
        return iter(self._catalogues.values())

    def __contains__(self, locale: object) -> bool:
        return locale in self._catalogues

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogueBag):
            return NotImplemented
        return self._catalogues == other._catalogues

    __hash__ = None  # type: ignore[assignment]

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def is_empty(self) -> bool:
        """True when the bag holds no catalogue."""
        return not self._catalogues

    def locales(self) -> tuple[Locale, ...]:
        """Locales with a catalogue, in insertion order."""
        return tuple(self._catalogues)

    def get(self, locale: Locale) -> Catalogue | None:
        """Return the catalogue for exactly this locale (no fallback), or None."""
        return self._catalogues.get(locale)

    def insert(self, catalogue: Catalogue) -> None:
        """Add a copy of a catalogue, merging into any catalogue of the same locale.

        Raises:
            CatalogueFrozenError: Bag is frozen
        """
        if self._frozen:
            raise CatalogueFrozenError("catalogue bag")
        existing = self._catalogues.get(catalogue.locale)
        if existing is None:
            self._catalogues[catalogue.locale] = catalogue.copy()
        else:
            existing.merge(catalogue)

    def merge(self, other: CatalogueBag) -> None:
        """Insert every catalogue of another bag."""
        for catalogue in other:
            self.insert(catalogue)

    def copy(self) -> CatalogueBag:
        """Return an unfrozen deep copy."""
        return CatalogueBag(self._catalogues.values())

    def freeze(self) -> None:
        """Freeze the bag and every catalogue in it. Idempotent."""
        self._frozen = True
        for catalogue in self._catalogues.values():
            catalogue.freeze()
