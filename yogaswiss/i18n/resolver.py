"""Locale resolver — owns the active locale and keeps memory, storage and URL in sync."""

import logging
from dataclasses import dataclass

from yogaswiss import hooks
from yogaswiss.config import settings
from yogaswiss.i18n.registry import DEFAULT_LOCALE, Locale, parse_locale
from yogaswiss.i18n.routing import Location, locale_from_path, localize_path
from yogaswiss.services.preference_store import PreferenceStore

_log = logging.getLogger(__name__)


@dataclass
class DocumentMeta:
    """Root-document metadata other collaborators read (``<html lang>``, title, description)."""

    lang: str = ""
    title: str = ""
    description: str = ""


class LocaleResolver:
    def __init__(
        self,
        preferences: PreferenceStore,
        location: Location | None = None,
        document: DocumentMeta | None = None,
        preference_key: str = "",
    ):
        self.preferences = preferences
        self.location = location
        self.document = document if document is not None else DocumentMeta()
        self.preference_key = preference_key or settings.locale_preference_key
        self._locale = DEFAULT_LOCALE

    @property
    def locale(self) -> Locale:
        return self._locale

    def resolve_initial(self, initial: str | None = None) -> Locale:
        """Pick the startup locale: explicit > URL prefix > stored preference > default."""
        locale = (
            parse_locale(initial)
            or self._locale_from_location()
            or parse_locale(self.preferences.get_preference(self.preference_key))
            or DEFAULT_LOCALE
        )
        if initial is not None and parse_locale(initial) is None:
            _log.warning("Ignoring unsupported initial locale %r", initial)
        self._locale = locale
        self.document.lang = locale.value
        self._sync_location()
        _log.info("Resolved initial locale: %s", locale)
        return locale

    def set_locale(self, candidate: str) -> bool:
        """Switch to ``candidate``. Returns False (and changes nothing) when
        it is unsupported or already active."""
        locale = parse_locale(candidate)
        if locale is None:
            _log.debug("Rejected unsupported locale %r", candidate)
            return False
        if locale == self._locale:
            return False

        previous = self._locale
        self._locale = locale
        self.preferences.set_preference(self.preference_key, locale.value)
        self.document.lang = locale.value
        self._sync_location()
        hooks.notify(hooks.LOCALE_CHANGED, locale=locale, previous=previous)
        return True

    def _locale_from_location(self) -> Locale | None:
        if self.location is None:
            return None
        return locale_from_path(self.location.path)

    def _sync_location(self) -> None:
        if self.location is None:
            return
        current = self.location.path
        target = localize_path(current, self._locale)
        if target != current:
            self.location.replace_path(target)
