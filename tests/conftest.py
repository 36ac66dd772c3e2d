from __future__ import annotations

from typing import Any

import pytest


class FakeTable:
    """In-memory stand-in for the Supabase table query builder."""

    def __init__(self, rows: list[dict[str, Any]]):
        self.rows = rows
        self._filters: list[tuple[str, Any]] = []
        self._action = "select"
        self._payload: Any = None

    def select(self, columns: str = "*") -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, record: dict[str, Any]) -> "FakeTable":
        self._action = "insert"
        self._payload = record
        return self

    def update(self, values: dict[str, Any]) -> "FakeTable":
        self._action = "update"
        self._payload = values
        return self

    def eq(self, column: str, value: Any) -> "FakeTable":
        self._filters.append((column, value))
        return self

    def _matches(self, row: dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self._filters)

    def execute(self):
        class Result:
            def __init__(self, data):
                self.data = data

        if self._action == "insert":
            self.rows.append(dict(self._payload))
            return Result([self._payload])
        matched = [row for row in self.rows if self._matches(row)]
        if self._action == "update":
            for row in matched:
                row.update(self._payload)
        return Result([dict(row) for row in matched])


class FakeSupabase:
    def __init__(self, rows: list[dict[str, Any]] | None = None):
        self.tables: dict[str, list[dict[str, Any]]] = {"bins": list(rows or [])}

    def table(self, name: str) -> FakeTable:
        return FakeTable(self.tables.setdefault(name, []))


@pytest.fixture
def fake_supabase(monkeypatch: pytest.MonkeyPatch) -> FakeSupabase:
    from binroute.persistence import bins as bins_persistence

    client = FakeSupabase(
        [
            {"id": "b1", "status": "FULL", "latitude": 21.55, "longitude": 39.25, "is_deleted": False},
            {"id": "b2", "status": "MID", "latitude": 21.5, "longitude": 39.2, "is_deleted": False},
            {"id": "b3", "status": "FULL", "latitude": 21.6, "longitude": 39.3, "is_deleted": True},
        ]
    )
    monkeypatch.setattr(bins_persistence, "get_supabase_client", lambda: client)
    return client
