"""Locale registry — the closed set of supported locales and their relationships."""

import enum


class Locale(enum.StrEnum):
    DE_CH = "de-CH"
    FR_CH = "fr-CH"
    IT_CH = "it-CH"
    EN_CH = "en-CH"
    GSW = "gsw"


DEFAULT_LOCALE = Locale.DE_CH

BASE_LOCALES = [Locale.DE_CH, Locale.FR_CH, Locale.IT_CH, Locale.EN_CH]
SUPPORTED_LOCALES = [*BASE_LOCALES, Locale.GSW]

# Schwiizerdütsch only covers short UI strings; everything else comes from German.
_DIALECT_BASE: dict[Locale, Locale] = {
    Locale.GSW: Locale.DE_CH,
}

LOCALE_NAMES: dict[Locale, str] = {
    Locale.DE_CH: "Deutsch",
    Locale.FR_CH: "Français",
    Locale.IT_CH: "Italiano",
    Locale.EN_CH: "English",
    Locale.GSW: "Schwiizerdütsch",
}

_BABEL_LOCALES: dict[Locale, str] = {
    Locale.DE_CH: "de_CH",
    Locale.FR_CH: "fr_CH",
    Locale.IT_CH: "it_CH",
    Locale.EN_CH: "en_CH",
    Locale.GSW: "gsw_CH",
}


def is_valid(candidate) -> bool:
    """True iff ``candidate`` is exactly one of the supported identifiers."""
    return isinstance(candidate, str) and candidate in _BY_VALUE


def parse_locale(candidate) -> Locale | None:
    if not is_valid(candidate):
        return None
    return _BY_VALUE[candidate]


def default_locale() -> Locale:
    return DEFAULT_LOCALE


def is_dialect(locale: Locale) -> bool:
    return locale in _DIALECT_BASE


def base_locale_of(locale: Locale) -> Locale:
    return _DIALECT_BASE.get(locale, locale)


def fallback_locale_of(locale: Locale) -> Locale | None:
    """Locale whose catalog backs up ``locale``'s catalog.

    A dialect falls back to its base language, every other locale to the
    default one. The default locale has no fallback.
    """
    if is_dialect(locale):
        return base_locale_of(locale)
    if locale == DEFAULT_LOCALE:
        return None
    return DEFAULT_LOCALE


def display_name(locale: Locale) -> str:
    return LOCALE_NAMES[locale]


def babel_locale_of(locale: Locale) -> str:
    return _BABEL_LOCALES[locale]


_BY_VALUE: dict[str, Locale] = {loc.value: loc for loc in Locale}
