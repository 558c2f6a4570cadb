"""Unit tests for the initial schema migration, recorded without a database."""

import importlib.util
from pathlib import Path

import pytest
import sqlalchemy as sa

MIGRATION = Path(__file__).resolve().parents[2] / "alembic" / "versions" / "001_initial_schema.py"


class _RecordingOp:
    def __init__(self) -> None:
        self.tables: dict[str, tuple] = {}
        self.indexes: dict[str, tuple] = {}

    def create_table(self, name: str, *elements: object, **kwargs: object) -> None:
        self.tables[name] = elements

    def create_index(self, name: str, table: str, columns: list[str], **kwargs: object) -> None:
        self.indexes[name] = (table, columns, kwargs)


@pytest.fixture
def schema(monkeypatch: pytest.MonkeyPatch) -> _RecordingOp:
    found = importlib.util.spec_from_file_location("initial_schema", MIGRATION)
    module = importlib.util.module_from_spec(found)
    found.loader.exec_module(module)
    recorder = _RecordingOp()
    monkeypatch.setattr(module, "op", recorder)
    module.upgrade()
    return recorder


def _column(schema: _RecordingOp, table: str, name: str) -> sa.Column:
    return next(e for e in schema.tables[table] if isinstance(e, sa.Column) and e.name == name)


def test_wiki_pages_lock_columns_have_no_joint_check(schema: _RecordingOp) -> None:
    # deleting a user nulls locked_by only; the row must stay valid
    checks = [e for e in schema.tables["wiki_pages"] if isinstance(e, sa.CheckConstraint)]
    assert checks == []
    (fk,) = _column(schema, "wiki_pages", "locked_by").foreign_keys
    assert fk.ondelete == "SET NULL"
    assert _column(schema, "wiki_pages", "lock_expires_at").nullable


def test_page_overrides_unique_per_target(schema: _RecordingOp) -> None:
    table, columns, kwargs = schema.indexes["uq_page_permissions_page_perm_group"]
    assert table == "page_permissions"
    assert columns == ["page_id", "permission_id", "group_id"]
    assert kwargs["unique"] is True
    assert str(kwargs["postgresql_where"]) == "group_id IS NOT NULL"

    table, columns, kwargs = schema.indexes["uq_page_permissions_page_perm_everyone"]
    assert columns == ["page_id", "permission_id"]
    assert kwargs["unique"] is True
    assert str(kwargs["postgresql_where"]) == "group_id IS NULL"


def test_active_lock_listing_index(schema: _RecordingOp) -> None:
    table, columns, kwargs = schema.indexes["ix_wiki_pages_locked_at"]
    assert (table, columns) == ("wiki_pages", ["locked_at"])
    assert str(kwargs["postgresql_where"]) == "locked_by IS NOT NULL"
