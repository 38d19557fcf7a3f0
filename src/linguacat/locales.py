"""Supported locales and their fallback relationship.

Locale is a closed enumeration: every tag the engine can resolve messages for
is a member, so an unsupported locale cannot reach a lookup. Base languages
are ISO 639-1 codes; regional variants are ``lang_TERRITORY`` and fall back to
their base language, which is always a member as well.

Tag parsing at the boundary goes through Babel's parse_locale, so the usual
POSIX and BCP 47 spellings are accepted (``en-US``, ``en_us``,
``de_DE.UTF-8``, ``zh_Hant_TW``).

Python 3.13+. Depends on Babel.
"""

from __future__ import annotations

from enum import StrEnum

from babel.core import UnknownLocaleError, parse_locale

from linguacat.diagnostics import DiagnosticCode, LocaleParseError

__all__ = ["Locale"]


class Locale(StrEnum):
    """Language, optionally qualified by a territory.

    Member values are canonical tags (``"en"``, ``"en_US"``). Members compare
    and hash like their tags and order by tag.

    Example:
        >>> Locale.ENGLISH_UNITED_STATES.parent_fallback()
        <Locale.ENGLISH: 'en'>
        >>> Locale.from_tag("pt-br")
        <Locale.PORTUGUESE_BRAZIL: 'pt_BR'>
    """

    AFAR = "aa"
    ABKHAZIAN = "ab"
    AFRIKAANS = "af"
    AKAN = "ak"
    ALBANIAN = "sq"
    AMHARIC = "am"
    ARABIC = "ar"
    ARABIC_ALGERIA = "ar_DZ"
    ARABIC_BAHRAIN = "ar_BH"
    ARABIC_EGYPT = "ar_EG"
    ARABIC_IRAQ = "ar_IQ"
    ARABIC_JORDAN = "ar_JO"
    ARABIC_KUWAIT = "ar_KW"
    ARABIC_LEBANON = "ar_LB"
    ARABIC_LIBYA = "ar_LY"
    ARABIC_MOROCCO = "ar_MA"
    ARABIC_OMAN = "ar_OM"
    ARABIC_QATAR = "ar_QA"
    ARABIC_SAUDI_ARABIA = "ar_SA"
    ARABIC_SYRIA = "ar_SY"
    ARABIC_TUNISIA = "ar_TN"
    ARABIC_UNITED_ARAB_EMIRATES = "ar_AE"
    ARABIC_YEMEN = "ar_YE"
    ARAGONESE = "an"
    ARMENIAN = "hy"
    ASSAMESE = "as"
    AVARIC = "av"
    AVESTAN = "ae"
    AYMARA = "ay"
    AZERBAIJANI = "az"
    BASHKIR = "ba"
    BAMBARA = "bm"
    BASQUE = "eu"
    BELARUSIAN = "be"
    BENGALI = "bn"
    BIHARI = "bh"
    BISLAMA = "bi"
    TIBETAN = "bo"
    BOSNIAN = "bs"
    BRETON = "br"
    BULGARIAN = "bg"
    BURMESE = "my"
    CATALAN = "ca"
    CZECH = "cs"
    CHAMORRO = "ch"
    CHECHEN = "ce"
    CHINESE = "zh"
    CHINESE_HONG_KONG = "zh_HK"
    CHINESE_CHINA = "zh_CN"
    CHINESE_SINGAPORE = "zh_SG"
    CHINESE_TAIWAN = "zh_TW"
    CHURCH_SLAVIC = "cu"
    CHUVASH = "cv"
    CORNISH = "kw"
    CORSICAN = "co"
    CREE = "cr"
    WELSH = "cy"
    DANISH = "da"
    GERMAN = "de"
    GERMAN_AUSTRIA = "de_AT"
    GERMAN_LIECHTENSTEIN = "de_LI"
    GERMAN_LUXEMBOURG = "de_LU"
    GERMAN_SWITZERLAND = "de_CH"
    DIVEHI = "dv"
    DUTCH = "nl"
    DUTCH_BELGIUM = "nl_BE"
    DZONGKHA = "dz"
    GREEK = "el"
    ENGLISH = "en"
    ENGLISH_AUSTRALIA = "en_AU"
    ENGLISH_BELIZE = "en_BZ"
    ENGLISH_CANADA = "en_CA"
    ENGLISH_IRELAND = "en_IE"
    ENGLISH_JAMAICA = "en_JM"
    ENGLISH_NEW_ZEALAND = "en_NZ"
    ENGLISH_SOUTH_AFRICA = "en_ZA"
    ENGLISH_TRINIDAD = "en_TT"
    ENGLISH_UNITED_KINGDOM = "en_GB"
    ENGLISH_UNITED_STATES = "en_US"
    ESPERANTO = "eo"
    ESTONIAN = "et"
    EWE = "ee"
    FAROESE = "fo"
    PERSIAN = "fa"
    FIJIAN = "fj"
    FINNISH = "fi"
    FRENCH = "fr"
    FRENCH_FRANCE = "fr_FR"
    FRENCH_BELGIUM = "fr_BE"
    FRENCH_CANADA = "fr_CA"
    FRENCH_LUXEMBOURG = "fr_LU"
    FRENCH_SWITZERLAND = "fr_CH"
    WESTERN_FRISIAN = "fy"
    FULAH = "ff"
    GEORGIAN = "ka"
    GAELIC = "gd"
    IRISH = "ga"
    GALICIAN = "gl"
    MANX = "gv"
    GUARANI = "gn"
    GUJARATI = "gu"
    HAITIAN = "ht"
    HAUSA = "ha"
    HEBREW = "he"
    HERERO = "hz"
    HINDI = "hi"
    HIRI_MOTU = "ho"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    IGBO = "ig"
    ICELANDIC = "is"
    IDO = "io"
    SICHUAN_YI = "ii"
    INUKTITUT = "iu"
    INTERLINGUE = "ie"
    INDONESIAN = "id"
    INUPIAQ = "ik"
    ITALIAN = "it"
    ITALIAN_SWITZERLAND = "it_CH"
    JAVANESE = "jv"
    JAPANESE = "ja"
    KALAALLISUT = "kl"
    KANNADA = "kn"
    KASHMIRI = "ks"
    KANURI = "kr"
    KAZAKH = "kk"
    CENTRAL_KHMER = "km"
    KIKUYU = "ki"
    KINYARWANDA = "rw"
    KIRGHIZ = "ky"
    KOMI = "kv"
    KONGO = "kg"
    KOREAN = "ko"
    KUANYAMA = "kj"
    KURDISH = "ku"
    LAO = "lo"
    LATIN = "la"
    LATVIAN = "lv"
    LIMBURGAN = "li"
    LINGALA = "ln"
    LITHUANIAN = "lt"
    LUXEMBOURGISH = "lb"
    LUBA_KATANGA = "lu"
    GANDA = "lg"
    MACEDONIAN = "mk"
    MARSHALLESE = "mh"
    MALAYALAM = "ml"
    MAORI = "mi"
    MARATHI = "mr"
    MALAY = "ms"
    MALAGASY = "mg"
    MALTESE = "mt"
    MONGOLIAN = "mn"
    NAURU = "na"
    NAVAJO = "nv"
    SOUTHERN_NDEBELE = "nr"
    NORTHERN_NDEBELE = "nd"
    NDONGA = "ng"
    NEPALI = "ne"
    NORWEGIAN_NYNORSK = "nn"
    NORWEGIAN = "no"
    CHICHEWA = "ny"
    OCCITAN = "oc"
    OJIBWA = "oj"
    ORIYA = "or"
    OROMO = "om"
    OSSETIAN = "os"
    PANJABI = "pa"
    PALI = "pi"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt_BR"
    PUSHTO = "ps"
    QUECHUA = "qu"
    ROMANSH = "rm"
    ROMANIAN = "ro"
    ROMANIAN_MOLDOVA = "ro_MD"
    RUNDI = "rn"
    RUSSIAN = "ru"
    RUSSIAN_MOLDOVA = "ru_MD"
    SANGO = "sg"
    SANSKRIT = "sa"
    SINHALA = "si"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    NORTHERN_SAMI = "se"
    SAMOAN = "sm"
    SHONA = "sn"
    SINDHI = "sd"
    SOMALI = "so"
    SOUTHERN_SOTHO = "st"
    SPANISH = "es"
    SPANISH_ARGENTINA = "es_AR"
    SPANISH_BOLIVIA = "es_BO"
    SPANISH_CHILE = "es_CL"
    SPANISH_COLOMBIA = "es_CO"
    SPANISH_COSTA_RICA = "es_CR"
    SPANISH_DOMINICAN_REPUBLIC = "es_DO"
    SPANISH_ECUADOR = "es_EC"
    SPANISH_EL_SALVADOR = "es_SV"
    SPANISH_GUATEMALA = "es_GT"
    SPANISH_HONDURAS = "es_HN"
    SPANISH_MEXICO = "es_MX"
    SPANISH_NICARAGUA = "es_NI"
    SPANISH_PANAMA = "es_PA"
    SPANISH_PARAGUAY = "es_PY"
    SPANISH_PERU = "es_PE"
    SPANISH_PUERTO_RICO = "es_PR"
    SPANISH_URUGUAY = "es_UY"
    SPANISH_VENEZUELA = "es_VE"
    SARDINIAN = "sc"
    SERBIAN = "sr"
    SWATI = "ss"
    SUNDANESE = "su"
    SWAHILI = "sw"
    SWEDISH = "sv"
    SWEDISH_FINLAND = "sv_FI"
    TAHITIAN = "ty"
    TAMIL = "ta"
    TATAR = "tt"
    TELUGU = "te"
    TAJIK = "tg"
    TAGALOG = "tl"
    THAI = "th"
    TIGRINYA = "ti"
    TONGA = "to"
    TSWANA = "tn"
    TSONGA = "ts"
    TURKMEN = "tk"
    TURKISH = "tr"
    TWI = "tw"
    UIGHUR = "ug"
    UKRAINIAN = "uk"
    URDU = "ur"
    UZBEK = "uz"
    VENDA = "ve"
    VIETNAMESE = "vi"
    WALLOON = "wa"
    WOLOF = "wo"
    XHOSA = "xh"
    YIDDISH = "yi"
    YORUBA = "yo"
    ZHUANG = "za"
    ZULU = "zu"

    # ------------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------------

    @property
    def language(self) -> str:
        """ISO 639-1 language code (``"en"`` for ``en_US``)."""
        return self.value.partition("_")[0]

    @property
    def territory(self) -> str | None:
        """Territory code, or None for a base language."""
        return self.value.partition("_")[2] or None

    @property
    def is_variant(self) -> bool:
        """True for regional variants such as ``en_US``."""
        return "_" in self.value

    @property
    def base(self) -> Locale:
        """Base language of this locale (itself for a base language)."""
        return Locale(self.language)

    def parent_fallback(self) -> Locale | None:
        """Return the locale consulted after this one, or None.

        A regional variant falls back to its base language. Base languages
        have no parent, so every chain ends after at most one step.
        """
        if not self.is_variant:
            return None
        return Locale(self.language)

    def fallback_chain(self) -> tuple[Locale, ...]:
        """Return this locale followed by its ancestors, most specific first."""
        chain: list[Locale] = [self]
        parent = self.parent_fallback()
        while parent is not None:
            chain.append(parent)
            parent = parent.parent_fallback()
        return tuple(chain)

    # ------------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------------

    def to_tag(self) -> str:
        """Canonical POSIX-style tag (``"en_US"``)."""
        return self.value

    def to_bcp47(self) -> str:
        """BCP 47 tag (``"en-US"``), as used in Accept-Language headers."""
        return self.value.replace("_", "-")

    @classmethod
    def from_tag(cls, tag: str) -> Locale:
        """Parse a locale tag into a supported Locale.

        Accepts ``-`` or ``_`` separators in any letter case, POSIX encoding
        and modifier suffixes, and script or variant subtags, which are
        ignored (``zh_Hant_TW`` parses as ``zh_TW``).

        Args:
            tag: Locale tag to parse

        Returns:
            Matching Locale member

        Raises:
            LocaleParseError: Tag is malformed or names no supported locale
        """
        normalized = tag.strip().replace("-", "_")
        try:
            parts = parse_locale(normalized)
        except ValueError as e:
            raise LocaleParseError(
                tag, str(e), code=DiagnosticCode.LOCALE_MALFORMED
            ) from e

        language, territory = parts[0], parts[1]
        canonical = f"{language}_{territory}" if territory else language
        try:
            return cls(canonical)
        except ValueError:
            raise LocaleParseError(tag) from None

    # ------------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------------

    def display_name(self, in_locale: Locale | None = None) -> str:
        """Human-readable name of this locale from CLDR data.

        Args:
            in_locale: Language to render the name in (defaults to self)

        Returns:
            CLDR display name, or a name derived from the member name when
            CLDR has no data for the locale
        """
        from linguacat.locale_utils import get_babel_locale  # noqa: PLC0415 - circular

        fallback = self.name.replace("_", " ").title()
        try:
            babel_locale = get_babel_locale(self.value)
            target = get_babel_locale((in_locale or self).value)
        except (UnknownLocaleError, ValueError):
            return fallback
        return babel_locale.get_display_name(target) or fallback
