"""Shared fixtures: a fake ``mysql.connector`` connection."""

from typing import Any

import mysql.connector
import pytest


class FakeCursor:
    def __init__(self, conn: "FakeConnection", options: dict[str, Any]) -> None:
        self._conn = conn
        self.options = options
        self.rowcount = -1
        self._rows: list[dict[str, Any]] = []
        self.closed = False

    def execute(self, sql: str, params: tuple[Any, ...] = ()) -> None:
        self._conn.executed.append((sql, params))
        if self._conn.fail_with is not None:
            raise self._conn.fail_with
        self._rows = list(self._conn.rows)
        self.rowcount = len(self._rows) or self._conn.rowcount

    def fetchall(self) -> list[dict[str, Any]]:
        rows, self._rows = self._rows, []
        return rows

    def fetchone(self) -> dict[str, Any] | None:
        return self._rows.pop(0) if self._rows else None

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs
        self.cursors: list[FakeCursor] = []
        self.executed: list[tuple[str, tuple[Any, ...]]] = []
        self.rows: list[dict[str, Any]] = []
        self.rowcount = 0
        self.fail_with: Exception | None = None
        self.commits = 0
        self.connected = True

    def cursor(self, **options: Any) -> FakeCursor:
        cursor = FakeCursor(self, options)
        self.cursors.append(cursor)
        return cursor

    def commit(self) -> None:
        self.commits += 1

    def is_connected(self) -> bool:
        return self.connected

    def close(self) -> None:
        self.connected = False


@pytest.fixture
def fake_mysql(monkeypatch: pytest.MonkeyPatch) -> list[FakeConnection]:
    """Replace ``mysql.connector.connect``; returns the connections it opened."""
    opened: list[FakeConnection] = []

    def _connect(**kwargs: Any) -> FakeConnection:
        conn = FakeConnection(**kwargs)
        opened.append(conn)
        return conn

    monkeypatch.setattr(mysql.connector, "connect", _connect)
    return opened


@pytest.fixture
def unreachable_mysql(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    """Make every connection attempt fail like an unreachable server."""
    attempts: list[dict[str, Any]] = []

    def _connect(**kwargs: Any) -> Any:
        attempts.append(kwargs)
        raise mysql.connector.errors.InterfaceError(
            msg="2003: Can't connect to MySQL server on 'mysql:3306' (111)"
        )

    monkeypatch.setattr(mysql.connector, "connect", _connect)
    return attempts
