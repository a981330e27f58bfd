"""URL path ↔ locale mapping.

Base locales other than the default are served under a one-segment prefix
(``/fr/classes``); the default locale is un-prefixed. The dialect shares the
default's un-prefixed URLs.
"""

from typing import Protocol

from yogaswiss.i18n.registry import BASE_LOCALES, DEFAULT_LOCALE, Locale

LOCALE_PREFIXES: dict[Locale, str] = {
    Locale.FR_CH: "fr",
    Locale.IT_CH: "it",
    Locale.EN_CH: "en",
}

# Read-only aliases: recognised in incoming paths, never generated.
_PREFIX_ALIASES: dict[str, Locale] = {"de": Locale.DE_CH}

_PREFIX_TO_LOCALE: dict[str, Locale] = {
    **_PREFIX_ALIASES,
    **{prefix: loc for loc, prefix in LOCALE_PREFIXES.items()},
}


class Location(Protocol):
    """The piece of the router the resolver needs."""

    @property
    def path(self) -> str: ...

    def replace_path(self, path: str) -> None: ...


class MemoryLocation:
    """In-process location; ``history`` records every in-place replacement."""

    def __init__(self, path: str = "/"):
        self._path = path or "/"
        self.history: list[str] = []

    @property
    def path(self) -> str:
        return self._path

    def replace_path(self, path: str) -> None:
        self._path = path
        self.history.append(path)


def _split(path: str) -> tuple[str, str]:
    """Return (first segment, remainder starting with '/' or '')."""
    stripped = path.lstrip("/")
    first, sep, rest = stripped.partition("/")
    return first, (sep + rest) if sep else ""


def locale_prefix(locale: Locale) -> str:
    """``"/fr"`` style prefix, or ``""`` for un-prefixed locales."""
    prefix = LOCALE_PREFIXES.get(locale)
    return f"/{prefix}" if prefix else ""


def locale_from_path(path: str) -> Locale | None:
    if not path:
        return None
    first, _ = _split(path)
    return _PREFIX_TO_LOCALE.get(first)


def strip_locale_prefix(path: str) -> str:
    if locale_from_path(path) is None:
        return path or "/"
    _, rest = _split(path)
    return rest or "/"


def localize_path(path: str, locale: Locale) -> str:
    """Rewrite ``path`` so its prefix matches ``locale``."""
    bare = strip_locale_prefix(path)
    prefix = locale_prefix(locale)
    if not prefix:
        return bare
    return prefix if bare == "/" else f"{prefix}{bare}"


def alternate_links(path: str, origin: str) -> list[dict[str, str]]:
    """hreflang alternates for every base locale plus ``x-default``."""
    origin = origin.rstrip("/")
    links = [
        {"rel": "alternate", "hreflang": loc.value, "href": origin + localize_path(path, loc)}
        for loc in BASE_LOCALES
    ]
    links.append(
        {
            "rel": "alternate",
            "hreflang": "x-default",
            "href": origin + localize_path(path, DEFAULT_LOCALE),
        }
    )
    return links
