"""Tests for the packaged locale JSON files."""

import json
import re
from pathlib import Path

import pytest

from yogaswiss.i18n.catalog import Catalog
from yogaswiss.i18n.fallbacks import embedded_catalog
from yogaswiss.i18n.registry import BASE_LOCALES, DEFAULT_LOCALE, SUPPORTED_LOCALES, Locale
from yogaswiss.services.catalog_source import LOCALES_DIR


def _load(locale: Locale) -> Catalog:
    with open(LOCALES_DIR / f"{locale}.json", encoding="utf-8") as f:
        return Catalog.from_mapping(locale, json.load(f))


class TestLocaleFiles:
    @pytest.mark.parametrize("locale", SUPPORTED_LOCALES)
    def test_file_parses(self, locale):
        """Every locale ships a valid, non-empty JSON object."""
        with open(LOCALES_DIR / f"{locale}.json", encoding="utf-8") as f:
            data = json.load(f)
        assert isinstance(data, dict)
        assert len(data) > 0

    def test_base_locales_have_same_keys(self):
        reference = set(_load(DEFAULT_LOCALE).keys())
        for locale in BASE_LOCALES:
            keys = set(_load(locale).keys())
            assert keys == reference, f"{locale} differs: {sorted(keys ^ reference)}"

    def test_dialect_only_overrides_base_keys(self):
        dialect = set(_load(Locale.GSW).keys())
        base = set(_load(Locale.DE_CH).keys())
        assert dialect
        assert dialect <= base, f"gsw-only keys: {sorted(dialect - base)}"

    @pytest.mark.parametrize("locale", SUPPORTED_LOCALES)
    def test_embedded_keys_exist_in_packaged_catalogs(self, locale):
        packaged = set(_load(locale).keys()) | set(_load(DEFAULT_LOCALE).keys())
        embedded = set(embedded_catalog(locale).keys())
        assert embedded <= packaged

    def test_translations_differ_from_german(self):
        german = _load(DEFAULT_LOCALE).flatten()
        for locale in BASE_LOCALES:
            if locale == DEFAULT_LOCALE:
                continue
            values = _load(locale).flatten()
            differences = sum(1 for k in german if values.get(k) != german[k])
            assert differences > 10, f"{locale} has only {differences} different values"

    def test_greeting_placeholder_kept_everywhere(self):
        for locale in SUPPORTED_LOCALES:
            assert "{name}" in _load(locale).lookup("greeting.hello")


# ---------------------------------------------------------------------------
# Code ↔ JSON sync: every _t["key"] in UI code must exist in every base locale.
# ---------------------------------------------------------------------------

_UI_ROOT = Path(__file__).resolve().parent.parent.parent / "yogaswiss" / "ui"
_KEY_RE = re.compile(r'_t\["([^"]+)"\]')


def _collect_keys_from_code() -> set[str]:
    keys: set[str] = set()
    for py_file in _UI_ROOT.rglob("*.py"):
        keys.update(_KEY_RE.findall(py_file.read_text(encoding="utf-8")))
    return keys


class TestCodeJsonSync:
    def test_code_references_keys(self):
        assert len(_collect_keys_from_code()) >= 10

    @pytest.mark.parametrize("locale", BASE_LOCALES)
    def test_all_code_keys_exist(self, locale):
        missing = _collect_keys_from_code() - set(_load(locale).keys())
        assert not missing, f"Keys used in code but missing from {locale}.json: {sorted(missing)}"
