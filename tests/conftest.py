import asyncio

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from yogaswiss import hooks
from yogaswiss.i18n.catalog import CatalogFetchError
from yogaswiss.models.base import Base

SAMPLE_CATALOGS = {
    "de-CH": {
        "meta": {"title": "YogaSwiss DE", "description": "Beschreibung"},
        "common": {"error": "Fehler", "save": "Speichern", "cancel": "Abbrechen"},
        "greeting": {"hello": "Hallo {name}"},
        "nav": {"settings": "Einstellungen"},
        "only_de": {"text": "Nur auf Deutsch"},
        "booking": {
            "spots": {
                "zero": "Ausgebucht",
                "one": "Noch {count} Platz",
                "other": "Noch {count} Plätze",
            }
        },
    },
    "fr-CH": {
        "meta": {"title": "YogaSwiss FR"},
        "common": {"error": "Erreur", "save": "Enregistrer"},
        "greeting": {"hello": "Salut {name}"},
    },
    "it-CH": {
        "common": {"error": "Errore", "save": "Salva"},
        "greeting": {"hello": "Ciao {name}"},
    },
    "en-CH": {
        "meta": {"title": "YogaSwiss EN"},
        "common": {"error": "Error", "save": "Save"},
        "greeting": {"hello": "Hello {name}"},
    },
    "gsw": {
        "common": {"save": "Speichere"},
        "greeting": {"hello": "Grüezi {name}"},
    },
}


class GatedSource:
    """Catalog source whose fetches block until the locale's gate is opened."""

    def __init__(self, catalogs):
        self.catalogs = catalogs
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[str] = []

    def gate(self, locale: str) -> asyncio.Event:
        return self.gates.setdefault(locale, asyncio.Event())

    async def fetch_catalog(self, locale: str):
        self.calls.append(locale)
        gate = self.gates.get(locale)
        if gate is not None:
            await gate.wait()
        if locale not in self.catalogs:
            raise CatalogFetchError(f"No catalog for {locale}")
        return self.catalogs[locale]


@pytest.fixture(autouse=True)
def _clean_hooks():
    """Isolate each test from hook handlers registered by others."""
    hooks.clear()
    yield
    hooks.clear()


@pytest.fixture
def catalogs():
    return SAMPLE_CATALOGS


@pytest.fixture
def gated_source(catalogs):
    return GatedSource(catalogs)


@pytest.fixture(scope="session")
def engine():
    """SQLite in-memory engine for fast model tests."""
    eng = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture
def session_factory(engine):
    """Session factory; wipes preference rows after each test."""
    factory = sessionmaker(bind=engine)
    yield factory
    with factory() as session:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
