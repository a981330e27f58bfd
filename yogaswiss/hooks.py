"""Hook / event registry for localization diagnostics.

Handlers are called synchronously with keyword arguments:

* ``CATALOG_FAILED`` — ``locale``, ``error``: a fetch failed and the embedded
  catalog was used instead.
* ``MISSING_KEY`` — ``key``, ``locale``: a key resolved to itself.
* ``LOCALE_CHANGED`` — ``locale``, ``previous``.

``emit`` lets handler errors propagate. The localization engine itself uses
``notify``, which logs them instead: a broken diagnostic handler must not
break translation or catalog loading.
"""

import logging
from collections.abc import Callable

_log = logging.getLogger(__name__)

CATALOG_FAILED = "i18n.catalog_failed"
MISSING_KEY = "i18n.missing_key"
LOCALE_CHANGED = "i18n.locale_changed"

_handlers: dict[str, list[Callable]] = {}


def on(event: str, handler: Callable) -> None:
    """Register a handler for an event."""
    _handlers.setdefault(event, []).append(handler)


def off(event: str, handler: Callable) -> None:
    """Remove a handler for an event."""
    handlers = _handlers.get(event, [])
    if handler in handlers:
        handlers.remove(handler)


def emit(event: str, **kwargs) -> None:
    """Emit an event, calling all registered handlers in registration order."""
    # Copy: a handler may unregister itself while running.
    for handler in list(_handlers.get(event, [])):
        handler(**kwargs)


def notify(event: str, **kwargs) -> None:
    """Like :func:`emit`, but a failing handler is logged and the rest still run."""
    for handler in list(_handlers.get(event, [])):
        try:
            handler(**kwargs)
        except Exception:
            _log.exception("Handler %r for %s failed", handler, event)


def clear() -> None:
    """Remove all handlers. Useful for testing."""
    _handlers.clear()
