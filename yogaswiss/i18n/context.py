"""Binding layer — one reactive localization object for the rest of the app.

:class:`Localizer` ties the resolver, the catalog cache, the translator and
the formatters together and publishes an immutable
:class:`ResolutionContext` snapshot every time something changes.

Every catalog load is tagged with a sequence number. A finished load is only
applied if no newer load was started in the meantime, so rapid locale
switches always settle on the last requested locale.
"""

import asyncio
import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from yogaswiss.i18n.cache import CatalogCache
from yogaswiss.i18n.catalog import CatalogPair
from yogaswiss.i18n.fallbacks import embedded_catalog
from yogaswiss.i18n.formatting import Formatter
from yogaswiss.i18n.registry import Locale
from yogaswiss.i18n.resolver import LocaleResolver
from yogaswiss.i18n.translator import Params, Translator

_log = logging.getLogger(__name__)


class ContextStatus(enum.StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class ResolutionContext:
    locale: Locale
    status: ContextStatus
    translator: Translator
    formatter: Formatter
    pair: CatalogPair | None = None
    sequence: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status in (ContextStatus.IDLE, ContextStatus.LOADING)

    @property
    def is_degraded(self) -> bool:
        return self.status == ContextStatus.DEGRADED

    def translate(self, key: str, params: Params | None = None) -> str:
        return self.translator(key, params)

    def format_currency(self, amount) -> str:
        return self.formatter.format_currency(amount)

    def format_datetime(self, value, options: Mapping | None = None) -> str:
        return self.formatter.format_datetime(value, options)

    def format_number(self, number) -> str:
        return self.formatter.format_number(number)


def _embedded_translator(locale: Locale) -> Translator:
    return Translator(CatalogPair(primary=embedded_catalog(locale)))


Listener = Callable[[ResolutionContext], None]


class Localizer:
    def __init__(self, resolver: LocaleResolver, cache: CatalogCache):
        self.resolver = resolver
        self.cache = cache
        locale = resolver.locale
        self._context = ResolutionContext(
            locale=locale,
            status=ContextStatus.IDLE,
            translator=_embedded_translator(locale),
            formatter=Formatter.for_locale(locale),
        )
        self._last_complete: Translator | None = None
        self._sequence = 0
        self._tasks: set[asyncio.Task] = set()
        self._listeners: list[Listener] = []
        self._closed = False

    # -- read side ---------------------------------------------------------

    @property
    def context(self) -> ResolutionContext:
        return self._context

    @property
    def locale(self) -> Locale:
        return self._context.locale

    @property
    def status(self) -> ContextStatus:
        return self._context.status

    @property
    def is_loading(self) -> bool:
        return self._context.is_loading

    @property
    def is_degraded(self) -> bool:
        return self._context.is_degraded

    def translate(self, key: str, params: Params | None = None) -> str:
        return self._context.translate(key, params)

    def format_currency(self, amount) -> str:
        return self._context.format_currency(amount)

    def format_datetime(self, value, options: Mapping | None = None) -> str:
        return self._context.format_datetime(value, options)

    def format_number(self, number) -> str:
        return self._context.format_number(number)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new context. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- write side --------------------------------------------------------

    async def start(self, initial: str | None = None) -> ResolutionContext:
        """Resolve the startup locale and wait for its catalogs."""
        locale = self.resolver.resolve_initial(initial)
        self._begin_load(locale)
        await self.wait_until_settled()
        return self._context

    def set_locale(self, candidate: str) -> bool:
        """Request a locale change. Starts the catalog load but does not wait for it.

        Must be called from inside the running event loop.
        """
        if self._closed:
            return False
        if not self.resolver.set_locale(candidate):
            return False
        self._begin_load(self.resolver.locale)
        return True

    async def wait_until_settled(self) -> None:
        """Wait until no catalog load is pending."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        """Tear down: pending loads are cancelled and their results ignored."""
        self._closed = True
        self._sequence += 1
        pending = list(self._tasks)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._listeners.clear()

    # -- internals ---------------------------------------------------------

    def _begin_load(self, locale: Locale) -> None:
        self._sequence += 1
        seq = self._sequence
        self._publish(
            ResolutionContext(
                locale=locale,
                status=ContextStatus.LOADING,
                translator=self._last_complete or _embedded_translator(locale),
                formatter=Formatter.for_locale(locale),
                sequence=seq,
            )
        )
        task = asyncio.get_running_loop().create_task(self._load(locale, seq))
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    async def _load(self, locale: Locale, seq: int) -> None:
        pair = await self.cache.load_pair(locale)
        if seq != self._sequence:
            _log.debug(
                "Discarding stale catalogs for %s (request %d, latest %d)",
                locale,
                seq,
                self._sequence,
            )
            return

        translator = Translator(pair)
        self._last_complete = translator
        self._update_document(translator)
        status = ContextStatus.DEGRADED if pair.degraded else ContextStatus.READY
        if status == ContextStatus.DEGRADED:
            _log.warning("Localization for %s is running on embedded catalogs", locale)
        self._publish(
            ResolutionContext(
                locale=locale,
                status=status,
                translator=translator,
                formatter=Formatter.for_locale(locale),
                pair=pair,
                sequence=seq,
            )
        )

    def _update_document(self, translator: Translator) -> None:
        document = self.resolver.document
        title = translator.resolve("meta.title")
        if title is not None:
            document.title = title
        description = translator.resolve("meta.description")
        if description is not None:
            document.description = description

    def _publish(self, context: ResolutionContext) -> None:
        self._context = context
        for listener in list(self._listeners):
            listener(context)

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _log.error("Catalog load task failed", exc_info=exc)
