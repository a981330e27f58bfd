"""Tests for the UserPreference table definition."""

from sqlalchemy import UniqueConstraint

from yogaswiss.models import Base, UserPreference


def _columns(table_name: str) -> dict:
    table = Base.metadata.tables[table_name]
    return {c.name: c for c in table.columns}


class TestUserPreference:
    def test_table_exists(self):
        assert "user_preferences" in Base.metadata.tables
        assert UserPreference.__tablename__ == "user_preferences"

    def test_columns(self):
        cols = _columns("user_preferences")
        for name in ("id", "owner", "name", "value", "created_at", "updated_at"):
            assert name in cols

    def test_required_columns_not_nullable(self):
        cols = _columns("user_preferences")
        assert cols["owner"].nullable is False
        assert cols["name"].nullable is False
        assert cols["value"].nullable is False

    def test_owner_indexed(self):
        assert _columns("user_preferences")["owner"].index is True

    def test_unique_owner_name(self):
        table = Base.metadata.tables["user_preferences"]
        uniques = [c for c in table.constraints if isinstance(c, UniqueConstraint)]
        assert any({col.name for col in c.columns} == {"owner", "name"} for c in uniques)

    def test_timestamps_default_on_insert(self, session_factory):
        with session_factory() as session:
            pref = UserPreference(owner="anna", name="yogaswiss-locale", value="fr-CH")
            session.add(pref)
            session.commit()
            session.refresh(pref)
            assert pref.id is not None
            assert pref.created_at is not None
