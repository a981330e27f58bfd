"""Minimal embedded catalogs used when a catalog fetch fails.

These always resolve the handful of keys the shell UI needs to render a
loading/error state, so a broken catalog source never leaves the UI blank.
"""

from yogaswiss.i18n.catalog import Catalog
from yogaswiss.i18n.registry import Locale, base_locale_of

EMBEDDED_CATALOGS: dict[Locale, dict] = {
    Locale.DE_CH: {
        "meta": {
            "title": "YogaSwiss - Schweizer Yoga Studio Management",
            "description": "Schweizer Yoga Studio Management Plattform",
        },
        "common": {
            "loading": "Lädt...",
            "error": "Fehler",
            "save": "Speichern",
            "cancel": "Abbrechen",
            "back": "Zurück",
            "next": "Weiter",
        },
    },
    Locale.FR_CH: {
        "meta": {
            "title": "YogaSwiss - Gestion de studio de yoga suisse",
            "description": "Plateforme de gestion de studio de yoga suisse",
        },
        "common": {
            "loading": "Chargement...",
            "error": "Erreur",
            "save": "Enregistrer",
            "cancel": "Annuler",
            "back": "Retour",
            "next": "Suivant",
        },
    },
    Locale.IT_CH: {
        "meta": {
            "title": "YogaSwiss - Gestione studio yoga svizzero",
            "description": "Piattaforma di gestione studio yoga svizzero",
        },
        "common": {
            "loading": "Caricamento...",
            "error": "Errore",
            "save": "Salva",
            "cancel": "Annulla",
            "back": "Indietro",
            "next": "Avanti",
        },
    },
    Locale.EN_CH: {
        "meta": {
            "title": "YogaSwiss - Swiss Yoga Studio Management",
            "description": "Swiss Yoga Studio Management Platform",
        },
        "common": {
            "loading": "Loading...",
            "error": "Error",
            "save": "Save",
            "cancel": "Cancel",
            "back": "Back",
            "next": "Next",
        },
    },
    Locale.GSW: {
        "common": {
            "loading": "Ladet...",
            "error": "Fehler",
            "save": "Speichere",
            "cancel": "Abbräche",
            "back": "Zrugg",
            "next": "Witer",
        },
    },
}


def embedded_catalog(locale: Locale) -> Catalog:
    """Return the embedded minimal catalog for ``locale``.

    Dialect entries only override what they define; the rest comes from the
    dialect's base language so every universal key resolves.
    """
    base = EMBEDDED_CATALOGS[base_locale_of(locale)]
    own = EMBEDDED_CATALOGS.get(locale, {})
    return Catalog.from_mapping(locale, _merge(base, own), embedded=True)


def _merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
