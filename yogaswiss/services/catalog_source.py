"""Catalog sources — where translation trees come from.

The cache only depends on the :class:`CatalogSource` protocol, so tests and
alternative deployments can plug in any object with a ``fetch_catalog``
coroutine.
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

import httpx

from yogaswiss.config import settings
from yogaswiss.i18n.catalog import CatalogFetchError

_log = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent.parent / "i18n" / "locales"


class CatalogSource(Protocol):
    async def fetch_catalog(self, locale: str) -> Mapping: ...


class PackagedCatalogSource:
    """Reads ``<locale>.json`` files shipped inside the package."""

    def __init__(self, directory: Path | None = None):
        self.directory = Path(directory) if directory is not None else LOCALES_DIR

    async def fetch_catalog(self, locale: str) -> Mapping:
        path = self.directory / f"{locale}.json"
        return await asyncio.to_thread(self._read, path)

    @staticmethod
    def _read(path: Path) -> Mapping:
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as exc:
            raise CatalogFetchError(f"No catalog file at {path}") from exc
        except json.JSONDecodeError as exc:
            raise CatalogFetchError(f"Invalid JSON in {path}: {exc}") from exc


class HttpCatalogSource:
    """Fetches ``{base_url}/{locale}.json`` over HTTP."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = (base_url or settings.catalog_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.catalog_fetch_timeout
        self._client = client

    def url_for(self, locale: str) -> str:
        return f"{self.base_url}/{locale}.json"

    async def fetch_catalog(self, locale: str) -> Mapping:
        url = self.url_for(locale)
        try:
            if self._client is not None:
                resp = await self._client.get(url)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as exc:
            _log.warning("Catalog request failed: %s (%s)", url, exc)
            raise CatalogFetchError(f"Could not fetch {url}") from exc
        except ValueError as exc:
            raise CatalogFetchError(f"Invalid JSON from {url}") from exc


class StaticCatalogSource:
    """Serves catalogs from in-memory mappings. Unknown locales fail."""

    def __init__(self, catalogs: Mapping[str, Mapping]):
        self.catalogs = dict(catalogs)
        self.calls: list[str] = []

    async def fetch_catalog(self, locale: str) -> Mapping:
        self.calls.append(locale)
        try:
            return self.catalogs[locale]
        except KeyError:
            raise CatalogFetchError(f"No catalog for {locale}") from None


def default_source() -> CatalogSource:
    """HTTP source when ``CATALOG_BASE_URL`` is configured, packaged files otherwise."""
    if settings.catalog_base_url:
        return HttpCatalogSource(settings.catalog_base_url)
    return PackagedCatalogSource()
