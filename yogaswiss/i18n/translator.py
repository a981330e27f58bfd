"""Dotted-key translation against a catalog pair."""

import logging
import re
from collections.abc import Mapping

from yogaswiss import hooks
from yogaswiss.i18n.catalog import CatalogPair

_log = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")

Params = Mapping[str, str | int | float]


def interpolate(template: str, params: Params) -> str:
    """Replace every ``{name}`` whose name is in ``params``; leave the rest as is."""

    def _sub(match: re.Match) -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_sub, template)


class Translator:
    """Resolve keys against ``pair.primary``, then ``pair.fallback``, then the key itself."""

    def __init__(self, pair: CatalogPair):
        self.pair = pair

    @property
    def locale(self):
        return self.pair.locale

    def resolve(self, key: str) -> str | None:
        value = self.pair.primary.lookup(key)
        if value is None and self.pair.fallback is not None:
            value = self.pair.fallback.lookup(key)
        return value

    def has(self, key: str) -> bool:
        return self.resolve(key) is not None

    def __call__(self, key: str, params: Params | None = None) -> str:
        value = self.resolve(key)
        if value is None:
            _log.warning("Translation missing for key: %s in locale: %s", key, self.locale)
            hooks.notify(hooks.MISSING_KEY, key=key, locale=self.locale)
            value = key
        if params:
            value = interpolate(value, params)
        return value

    def plural(self, count: int, key: str, params: Params | None = None) -> str:
        """Pick ``key.zero``, ``key.one`` or ``key.other`` for ``count``."""
        if count == 0:
            form = "zero"
        elif count == 1:
            form = "one"
        else:
            form = "other"
        merged = {"count": count, **(params or {})}
        return self(f"{key}.{form}", merged)
