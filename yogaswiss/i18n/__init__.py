"""Localization engine: locale registry, catalog cache, translator and formatters."""

from yogaswiss.i18n.cache import CatalogCache
from yogaswiss.i18n.catalog import Catalog, CatalogPair
from yogaswiss.i18n.context import ContextStatus, Localizer, ResolutionContext
from yogaswiss.i18n.formatting import Formatter
from yogaswiss.i18n.registry import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Locale,
    base_locale_of,
    default_locale,
    is_valid,
    parse_locale,
)
from yogaswiss.i18n.resolver import DocumentMeta, LocaleResolver
from yogaswiss.i18n.translator import Translator, interpolate

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "Catalog",
    "CatalogCache",
    "CatalogPair",
    "ContextStatus",
    "DocumentMeta",
    "Formatter",
    "Locale",
    "LocaleResolver",
    "Localizer",
    "ResolutionContext",
    "Translator",
    "base_locale_of",
    "default_locale",
    "interpolate",
    "is_valid",
    "parse_locale",
]
