"""i18n state — publishes a per-event Localizer's context into Reflex vars.

Each handler builds a :class:`Localizer` whose resolver reads and writes the
browser's LocalStorage preference and the current router path, lets it
resolve or switch the locale and load catalogs, then copies the result into
the reactive vars. ``translations`` holds a value for every known key, so
``_t["key"]`` shows the key itself when no catalog has it.
"""

import functools
import json

import reflex as rx

from yogaswiss.config import settings
from yogaswiss.i18n.catalog import Catalog
from yogaswiss.i18n.context import Localizer, ResolutionContext
from yogaswiss.i18n.fallbacks import embedded_catalog
from yogaswiss.i18n.registry import DEFAULT_LOCALE, Locale
from yogaswiss.i18n.resolver import LocaleResolver
from yogaswiss.i18n.routing import localize_path
from yogaswiss.i18n.translator import Translator
from yogaswiss.localization import catalog_cache
from yogaswiss.services.catalog_source import LOCALES_DIR


@functools.cache
def reference_keys() -> frozenset[str]:
    """Every key of the packaged default-locale catalog."""
    with open(LOCALES_DIR / f"{DEFAULT_LOCALE}.json", encoding="utf-8") as f:
        return frozenset(Catalog.from_mapping(DEFAULT_LOCALE, json.load(f)).keys())


def translations_for(translator: Translator) -> dict[str, str]:
    """Flat key → text dict covering the loaded catalogs and every reference key."""
    keys = set(translator.pair.merged()) | reference_keys()
    return {key: translator(key) for key in sorted(keys)}


def _initial_translations() -> dict[str, str]:
    return {
        **{key: key for key in reference_keys()},
        **embedded_catalog(DEFAULT_LOCALE).flatten(),
    }


def _current_path(raw_path: str) -> str:
    return (raw_path or "/").split("?", 1)[0].split("#", 1)[0] or "/"


def sync_script(locale: Locale, path: str) -> str:
    """JS that sets ``<html lang>`` and rewrites the locale prefix without navigating."""
    script = f"document.documentElement.lang = {json.dumps(locale.value)};"
    if settings.path_routing:
        target = localize_path(_current_path(path), locale)
        script += (
            f" if (window.location.pathname !== {json.dumps(target)}) {{"
            f" window.history.replaceState(window.history.state, '', "
            f"{json.dumps(target)} + window.location.search + window.location.hash); }}"
        )
    return script


class _StoredPreference:
    """PreferenceStore over the state's LocalStorage var."""

    def __init__(self, state):
        self.state = state

    def get_preference(self, name: str) -> str | None:
        return self.state.stored_locale or None

    def set_preference(self, name: str, value: str) -> None:
        self.state.stored_locale = value


class _RouterLocation:
    """Location over the current router path. The browser is updated by ``sync_script``."""

    def __init__(self, raw_path: str):
        self._path = _current_path(raw_path)

    @property
    def path(self) -> str:
        return self._path

    def replace_path(self, path: str) -> None:
        self._path = path


def _localizer_for(state) -> Localizer:
    location = _RouterLocation(state.router.page.raw_path) if settings.path_routing else None
    resolver = LocaleResolver(
        _StoredPreference(state),
        location=location,
        preference_key=settings.locale_preference_key,
    )
    return Localizer(resolver, catalog_cache)


def _begin(state, localizer: Localizer) -> int:
    state.locale = localizer.locale.value
    state.is_loading = True
    state._load_sequence += 1
    return state._load_sequence


def _publish(state, context: ResolutionContext, seq: int) -> None:
    # A newer locale request superseded this one.
    if seq != state._load_sequence:
        return
    state.translations = translations_for(context.translator)
    state.is_degraded = context.is_degraded
    state.is_loading = False


class I18nState(rx.State):
    locale: str = DEFAULT_LOCALE.value
    translations: dict[str, str] = _initial_translations()
    is_loading: bool = True
    is_degraded: bool = False
    stored_locale: str = rx.LocalStorage("", name=settings.locale_preference_key, sync=True)

    _load_sequence: int = 0

    async def initialize(self):
        """on_load: URL prefix, then stored preference, then the default locale."""
        localizer = _localizer_for(self)
        locale = localizer.resolver.resolve_initial()
        seq = _begin(self, localizer)
        yield rx.call_script(sync_script(locale, self.router.page.raw_path))
        context = await localizer.start(locale.value)
        _publish(self, context, seq)

    async def set_locale(self, locale: str):
        localizer = _localizer_for(self)
        localizer.resolver.resolve_initial(self.locale)
        if not localizer.set_locale(locale):
            await localizer.close()
            return
        seq = _begin(self, localizer)
        yield rx.call_script(sync_script(localizer.locale, self.router.page.raw_path))
        await localizer.wait_until_settled()
        _publish(self, localizer.context, seq)
