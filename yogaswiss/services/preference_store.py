"""Preference stores — persistence for small string settings such as the chosen locale."""

from collections.abc import Callable
from typing import Protocol

from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session, sessionmaker

from yogaswiss.config import settings
from yogaswiss.models.base import Base
from yogaswiss.models.preference import UserPreference


class PreferenceStore(Protocol):
    def get_preference(self, name: str) -> str | None: ...

    def set_preference(self, name: str, value: str) -> None: ...


class InMemoryPreferenceStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self.values: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []

    def get_preference(self, name: str) -> str | None:
        return self.values.get(name)

    def set_preference(self, name: str, value: str) -> None:
        self.values[name] = value
        self.writes.append((name, value))


class SqlPreferenceStore:
    """Stores preferences in ``user_preferences``, one row per (owner, name)."""

    def __init__(self, session_factory: Callable[[], Session], owner: str = "anonymous"):
        self._session_factory = session_factory
        self.owner = owner

    def get_preference(self, name: str) -> str | None:
        with self._session_factory() as session:
            pref = session.execute(self._stmt(name)).scalar_one_or_none()
            return pref.value if pref is not None else None

    def set_preference(self, name: str, value: str) -> None:
        with self._session_factory() as session:
            pref = session.execute(self._stmt(name)).scalar_one_or_none()
            if pref is None:
                session.add(UserPreference(owner=self.owner, name=name, value=value))
            else:
                pref.value = value
            session.commit()

    def _stmt(self, name: str):
        return select(UserPreference).where(
            UserPreference.owner == self.owner,
            UserPreference.name == name,
        )


def sql_preference_store(
    owner: str = "anonymous", database_url: str = ""
) -> SqlPreferenceStore:
    """SqlPreferenceStore on ``DATABASE_URL_SYNC``; creates the table if needed."""
    engine = create_engine(database_url or settings.database_url_sync)
    Base.metadata.create_all(engine, tables=[UserPreference.__table__])
    return SqlPreferenceStore(sessionmaker(bind=engine), owner=owner)
