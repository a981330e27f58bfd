"""Catalog completeness checks — which keys a locale lacks compared to a reference."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from yogaswiss import hooks
from yogaswiss.i18n.catalog import Catalog
from yogaswiss.i18n.registry import DEFAULT_LOCALE, Locale, fallback_locale_of


@dataclass
class LocaleReport:
    locale: Locale
    total: int
    missing: list[str] = field(default_factory=list)
    extra: list[str] = field(default_factory=list)
    covered_by_fallback: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.missing


def missing_keys(reference: Catalog, other: Catalog) -> list[str]:
    """Keys present as strings in ``reference`` but not in ``other``, sorted."""
    return sorted(set(reference.keys()) - set(other.keys()))


def audit(
    catalogs: dict[Locale, Catalog], reference: Locale = DEFAULT_LOCALE
) -> dict[Locale, LocaleReport]:
    """Compare every catalog against ``reference``.

    Keys a locale lacks but its fallback catalog provides are reported in
    ``covered_by_fallback`` rather than ``missing``.
    """
    ref_keys = set(catalogs[reference].keys())
    reports: dict[Locale, LocaleReport] = {}
    for locale, catalog in catalogs.items():
        own = set(catalog.keys())
        absent = ref_keys - own
        fallback = fallback_locale_of(locale)
        fallback_keys = (
            set(catalogs[fallback].keys()) if fallback is not None and fallback in catalogs else set()
        )
        reports[locale] = LocaleReport(
            locale=locale,
            total=len(own),
            missing=sorted(absent - fallback_keys),
            extra=sorted(own - ref_keys),
            covered_by_fallback=sorted(absent & fallback_keys),
        )
    return reports


class MissingKeyRecorder:
    """Collects ``i18n.missing_key`` events while attached. Usable as a context manager."""

    def __init__(self):
        self.missing: dict[Locale, set[str]] = {}

    def _record(self, key: str, locale: Locale, **_) -> None:
        self.missing.setdefault(locale, set()).add(key)

    def attach(self) -> "MissingKeyRecorder":
        hooks.on(hooks.MISSING_KEY, self._record)
        return self

    def detach(self) -> None:
        hooks.off(hooks.MISSING_KEY, self._record)

    def keys_for(self, locale: Locale) -> list[str]:
        return sorted(self.missing.get(locale, set()))

    def all_keys(self) -> Iterable[tuple[Locale, str]]:
        for locale, keys in sorted(self.missing.items()):
            for key in sorted(keys):
                yield locale, key

    def __enter__(self) -> "MissingKeyRecorder":
        return self.attach()

    def __exit__(self, *exc) -> None:
        self.detach()
