"""Translator: lookup with locale fallback, plural selection and interpolation.

Resolution of translate(locale, domain, id, context):
1. Build the fallback chain: the locale, its base language, then the
   configured fallback locale.
2. The first catalogue in the chain holding (domain, id) supplies the raw
   template. No hit raises MessageNotFound naming every attempted locale.
3. The template is parsed (memoized). A malformed template raises
   TemplateError carrying the catalogue coordinates.
4. A pluralized template needs a count; without one MissingPluralContext is
   raised. Otherwise the first matching branch is selected.
5. Placeholders in the selected text are filled from the context.

The bag is frozen at construction, so a Translator can be shared across
threads. The fallback locale is the only runtime-mutable setting and is
guarded by a readers-writer lock.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from linguacat.catalogue import CatalogueBag, CatalogueLoader, Domain, MessageId, Template
from linguacat.catalogue.types import Context
from linguacat.constants import COUNT_KEY
from linguacat.diagnostics import MessageNotFound, MissingPluralContext, TemplateError
from linguacat.locales import Locale
from linguacat.runtime.interpolation import interpolate
from linguacat.runtime.plural import PluralTemplate, parse_template, select_branch
from linguacat.runtime.rwlock import RWLock

__all__ = ["FallbackInfo", "Translator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Passed to the on_fallback callback when a message is resolved from a
    locale other than the one requested.

    Attributes:
        requested_locale: Locale passed to translate()
        resolved_locale: Locale whose catalogue held the message
        domain: Domain of the message
        message_id: Identifier of the message

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.domain}/{info.message_id} resolved from "
        ...           f"{info.resolved_locale} (requested {info.requested_locale})")
        >>> translator = Translator(bag, Locale.ENGLISH, on_fallback=log_fallback)
    """

    requested_locale: Locale
    resolved_locale: Locale
    domain: Domain
    message_id: MessageId


class Translator:
    """Translate messages from a catalogue bag.

    Example:
        >>> bag = CatalogueBag([Catalogue(Locale.ENGLISH, {"messages": {"hi": "Hi, {name}!"}})])
        >>> translator = Translator(bag)
        >>> translator.translate(Locale.ENGLISH_UNITED_STATES, "messages", "hi", {"name": "Ada"})
        'Hi, Ada!'
    """

    __slots__ = ("_bag", "_fallback_locale", "_lock", "_on_fallback", "_strict")

    def __init__(
        self,
        bag: CatalogueBag,
        fallback_locale: Locale | None = None,
        *,
        strict: bool = False,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize a translator.

        Args:
            bag: Catalogues to translate from. Frozen by this call.
            fallback_locale: Locale consulted after the requested locale's chain
            strict: Parse every template now and raise the first TemplateError,
                instead of failing lazily on first use of a malformed template
            on_fallback: Callback invoked when a message resolves from a locale
                other than the requested one

        Raises:
            TemplateError: strict is True and a template is malformed
        """
        bag.freeze()
        self._bag = bag
        self._fallback_locale = (
            None if fallback_locale is None else self._require_locale(fallback_locale)
        )
        self._strict = strict
        self._on_fallback = on_fallback
        # Readers: translate() and fallback_chain(). Writer: set_fallback_locale().
        self._lock = RWLock()

        if strict:
            self._parse_all()

        logger.info(
            "Translator ready: %d locale(s), fallback=%s, strict=%s",
            len(bag),
            fallback_locale,
            strict,
        )

    @classmethod
    def from_loader(
        cls,
        loader: CatalogueLoader,
        fallback_locale: Locale | None = None,
        **kwargs: Any,
    ) -> Translator:
        """Build a translator from any object implementing CatalogueLoader.

        Raises:
            CatalogueLoadError: The loader failed
        """
        return cls(loader.load(), fallback_locale, **kwargs)

    def __repr__(self) -> str:
        return (
            f"Translator(locales={len(self._bag)}, "
            f"fallback_locale={self.fallback_locale!r}, strict={self._strict})"
        )

    @staticmethod
    def _require_locale(locale: object) -> Locale:
        if not isinstance(locale, Locale):
            msg = (
                f"locale must be a Locale member, got {type(locale).__name__}; "
                "use Locale.from_tag() to parse tags"
            )
            raise TypeError(msg)
        return locale

    def _parse_all(self) -> None:
        for catalogue in self._bag:
            for domain, message_id, template in catalogue.items():
                try:
                    parse_template(template)
                except TemplateError as e:
                    raise e.with_context(catalogue.locale, domain, message_id) from e

    # ------------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------------

    @property
    def bag(self) -> CatalogueBag:
        """The frozen catalogue bag."""
        return self._bag

    @property
    def strict(self) -> bool:
        """True if every template was validated at construction."""
        return self._strict

    @property
    def fallback_locale(self) -> Locale | None:
        """Locale consulted after the requested locale's own chain."""
        with self._lock.read():
            return self._fallback_locale

    def set_fallback_locale(self, fallback_locale: Locale | None) -> None:
        """Replace (or with None, remove) the fallback locale.

        Translations already in progress finish with the previous setting.
        """
        checked = None if fallback_locale is None else self._require_locale(fallback_locale)
        with self._lock.write():
            previous = self._fallback_locale
            self._fallback_locale = checked
        logger.info("Fallback locale changed from %s to %s", previous, checked)

    # ------------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------------

    def fallback_chain(self, locale: Locale) -> tuple[Locale, ...]:
        """Locales consulted for a request, in order.

        Example:
            >>> Translator(CatalogueBag(), Locale.ENGLISH).fallback_chain(Locale.FRENCH_CANADA)
            (<Locale.FRENCH_CANADA: 'fr_CA'>, <Locale.FRENCH: 'fr'>, <Locale.ENGLISH: 'en'>)
        """
        chain = self._require_locale(locale).fallback_chain()
        with self._lock.read():
            fallback = self._fallback_locale
        if fallback is not None and fallback not in chain:
            chain = (*chain, fallback)
        return chain

    def _lookup(
        self, chain: tuple[Locale, ...], domain: Domain, message_id: MessageId
    ) -> tuple[Locale, Template] | None:
        for candidate in chain:
            catalogue = self._bag.get(candidate)
            if catalogue is None:
                continue
            template = catalogue.get(domain, message_id)
            if template is not None:
                return candidate, template
        return None

    def resolve(
        self, locale: Locale, domain: Domain, message_id: MessageId
    ) -> tuple[Locale, Template]:
        """Find the raw template for a message without formatting it.

        Returns:
            Tuple of (locale whose catalogue held the message, raw template)

        Raises:
            MessageNotFound: No locale in the fallback chain has the message
        """
        chain = self.fallback_chain(locale)
        hit = self._lookup(chain, domain, message_id)
        if hit is None:
            logger.warning(
                "Message %s/%s not found for %s (tried %s)",
                domain,
                message_id,
                locale,
                ", ".join(chain),
            )
            raise MessageNotFound(domain, message_id, chain)

        resolved_locale, template = hit
        if resolved_locale != locale:
            logger.debug(
                "Resolved %s/%s from %s (requested %s)",
                domain,
                message_id,
                resolved_locale,
                locale,
            )
        return resolved_locale, template

    def has_message(self, locale: Locale, domain: Domain, message_id: MessageId) -> bool:
        """True if some locale in the fallback chain has the message."""
        return self._lookup(self.fallback_chain(locale), domain, message_id) is not None

    # ------------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------------

    def translate(
        self,
        locale: Locale,
        domain: Domain,
        message_id: MessageId,
        context: Context | None = None,
        *,
        count: object = None,
    ) -> str:
        """Translate a message into the requested locale.

        Args:
            locale: Requested locale
            domain: Message domain
            message_id: Message identifier
            context: Placeholder values; a 'count' entry selects the plural branch
            count: Plural count, taking precedence over context['count']

        Returns:
            Formatted message

        Raises:
            TypeError: locale is not a Locale, or context is not a mapping
            MessageNotFound: No locale in the fallback chain has the message
            TemplateError: The resolved template is malformed
            MissingPluralContext: The template is pluralized and no count was given

        Example:
            >>> translator.translate(Locale.ENGLISH, "messages", "apples", count=3)
            'There are few apples'
        """
        if context is not None and not isinstance(context, Mapping):
            msg = f"context must be a mapping, got {type(context).__name__}"
            raise TypeError(msg)

        resolved_locale, template = self.resolve(locale, domain, message_id)

        try:
            parsed = parse_template(template)
        except TemplateError as e:
            raise e.with_context(resolved_locale, domain, message_id) from e

        if count is None and context is not None:
            count = context.get(COUNT_KEY)
        if isinstance(parsed, PluralTemplate) and count is None:
            logger.warning(
                "Plural message %s/%s for %s translated without a count",
                domain,
                message_id,
                resolved_locale,
            )
            raise MissingPluralContext(resolved_locale, domain, message_id)

        text = select_branch(parsed, count)
        result = interpolate(text, context, count=count)

        if self._on_fallback is not None and resolved_locale != locale:
            self._on_fallback(
                FallbackInfo(
                    requested_locale=locale,
                    resolved_locale=resolved_locale,
                    domain=domain,
                    message_id=message_id,
                )
            )
        return result
