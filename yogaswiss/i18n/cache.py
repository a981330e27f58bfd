"""Catalog cache — memoized, coalesced catalog loading per locale."""

import asyncio
import logging
from collections.abc import Iterable

from yogaswiss import hooks
from yogaswiss.config import settings
from yogaswiss.i18n.catalog import Catalog, CatalogPair
from yogaswiss.i18n.fallbacks import embedded_catalog
from yogaswiss.i18n.registry import SUPPORTED_LOCALES, Locale, fallback_locale_of
from yogaswiss.services.catalog_source import CatalogSource

_log = logging.getLogger(__name__)


class CatalogCache:
    """Loads catalogs through a :class:`CatalogSource` and keeps them for the process.

    Only successful loads are stored. A failed fetch (error, bad data or
    timeout) yields the embedded minimal catalog for that call, and the next
    ``load`` tries the source again. Concurrent first loads of one locale
    share a single fetch.
    """

    def __init__(self, source: CatalogSource, timeout: float | None = None):
        self.source = source
        timeout = settings.catalog_fetch_timeout if timeout is None else timeout
        self.timeout = timeout if timeout > 0 else None
        self._catalogs: dict[Locale, Catalog] = {}
        self._inflight: dict[Locale, asyncio.Task] = {}

    def is_cached(self, locale: Locale) -> bool:
        return locale in self._catalogs

    async def load(self, locale: Locale) -> Catalog:
        cached = self._catalogs.get(locale)
        if cached is not None:
            _log.debug("Catalog cache hit for %s", locale)
            return cached

        task = self._inflight.get(locale)
        if task is None:
            task = asyncio.ensure_future(self._fetch(locale))
            self._inflight[locale] = task
            task.add_done_callback(lambda t, loc=locale: self._forget(loc, t))
        # A cancelled caller must not cancel a fetch other callers are waiting on.
        return await asyncio.shield(task)

    async def load_pair(self, locale: Locale) -> CatalogPair:
        fallback_locale = fallback_locale_of(locale)
        if fallback_locale is None:
            return CatalogPair(primary=await self.load(locale))
        primary, fallback = await asyncio.gather(self.load(locale), self.load(fallback_locale))
        return CatalogPair(primary=primary, fallback=fallback)

    async def preload(self, locales: Iterable[Locale] | None = None) -> None:
        targets = list(locales) if locales is not None else list(SUPPORTED_LOCALES)
        await asyncio.gather(*(self.load(loc) for loc in targets))
        _log.info("Preloaded catalogs: %s", ", ".join(str(loc) for loc in targets))

    def invalidate(self, locale: Locale | None = None) -> None:
        """Drop one (or every) cached catalog so the next load re-fetches."""
        if locale is None:
            self._catalogs.clear()
            self._inflight.clear()
        else:
            self._catalogs.pop(locale, None)
            self._inflight.pop(locale, None)

    async def _fetch(self, locale: Locale) -> Catalog:
        try:
            data = await asyncio.wait_for(
                self.source.fetch_catalog(locale.value), timeout=self.timeout
            )
            catalog = Catalog.from_mapping(locale, data)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            _log.warning(
                "Failed to load catalog for %s, using embedded catalog: %r", locale, exc
            )
            hooks.notify(hooks.CATALOG_FAILED, locale=locale, error=exc)
            return embedded_catalog(locale)

        # An invalidate() during the fetch detaches this task; don't store its result.
        if self._inflight.get(locale) is asyncio.current_task():
            catalog = self._catalogs.setdefault(locale, catalog)
        return catalog

    def _forget(self, locale: Locale, task: asyncio.Task) -> None:
        if self._inflight.get(locale) is task:
            del self._inflight[locale]
