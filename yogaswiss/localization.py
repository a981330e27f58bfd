"""Process-wide catalog cache and an optional singleton Localizer facade.

Components should receive a :class:`Localizer` explicitly. The facade exists
for code paths (scripts, the Reflex app module) that need one shared
instance: call :func:`init_localizer` once at startup, :func:`get_localizer`
afterwards, and :func:`shutdown_localizer` on teardown.
"""

from yogaswiss.i18n.cache import CatalogCache
from yogaswiss.i18n.context import Localizer
from yogaswiss.i18n.resolver import DocumentMeta, LocaleResolver
from yogaswiss.i18n.routing import Location
from yogaswiss.services.catalog_source import default_source
from yogaswiss.services.preference_store import InMemoryPreferenceStore, PreferenceStore

catalog_cache = CatalogCache(default_source())

_localizer: Localizer | None = None


async def init_localizer(
    preferences: PreferenceStore | None = None,
    location: Location | None = None,
    document: DocumentMeta | None = None,
    initial: str | None = None,
    cache: CatalogCache | None = None,
) -> Localizer:
    global _localizer
    if _localizer is not None:
        raise RuntimeError("Localizer already initialized; call shutdown_localizer() first")
    resolver = LocaleResolver(
        preferences if preferences is not None else InMemoryPreferenceStore(),
        location=location,
        document=document,
    )
    localizer = Localizer(resolver, cache if cache is not None else catalog_cache)
    _localizer = localizer
    await localizer.start(initial)
    return localizer


def get_localizer() -> Localizer:
    if _localizer is None:
        raise RuntimeError("Localizer not initialized; call init_localizer() first")
    return _localizer


async def shutdown_localizer() -> None:
    global _localizer
    localizer, _localizer = _localizer, None
    if localizer is not None:
        await localizer.close()
