"""Async MySQL connection using ``mysql.connector`` + anyio.

Runs every blocking driver call in a worker thread via
``anyio.to_thread``. Session options are fixed for every connection:

    - ``prepared=True``: statements are prepared on the server, never
      interpolated client-side
    - ``dictionary=True``: rows come back as ``{column: value}`` dicts
    - server errors always raise (``mysql.connector.Error`` becomes
      :class:`~arena.data.errors.QueryError`)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from anyio import to_thread

from arena.data.errors import QueryError

CURSOR_OPTIONS: dict[str, bool] = {"prepared": True, "dictionary": True}


def _run_sync(func: Callable[..., Any], *args: Any) -> Any:
    """Run blocking call in anyio worker thread."""
    return to_thread.run_sync(func, *args)


class Connection:
    """Async wrapper around a ``mysql.connector`` connection.

    Usage::

        async with await connect(config) as conn:
            users = await conn.fetch("SELECT id, name FROM users WHERE team = ?", 7)
    """

    __slots__ = ("_conn", "_errors")

    def __init__(self, conn: Any, errors: Any) -> None:
        self._conn = conn
        # Driver's exception module, kept so query errors can be translated
        self._errors = errors

    @property
    def raw(self) -> Any:
        """The underlying driver connection."""
        return self._conn

    def _run_cursor(self, sql: str, params: Sequence[Any], fetch: str) -> Any:
        cursor = self._conn.cursor(**CURSOR_OPTIONS)
        try:
            cursor.execute(sql, tuple(params))
            if fetch == "all":
                return cursor.fetchall()
            if fetch == "one":
                row = cursor.fetchone()
                # Drain so the prepared statement can be reused
                cursor.fetchall()
                return row
            self._conn.commit()
            return cursor.rowcount
        except self._errors.Error as exc:
            raise QueryError(f"{exc} [sql={sql!r}]") from exc
        finally:
            cursor.close()

    async def fetch(self, sql: str, /, *params: Any) -> list[dict[str, Any]]:
        """Execute a query and return all rows as dicts."""
        rows = await _run_sync(lambda: self._run_cursor(sql, params, "all"))
        return [dict(row) for row in rows]

    async def fetch_one(self, sql: str, /, *params: Any) -> dict[str, Any] | None:
        """Execute a query and return the first row, or ``None``."""
        row = await _run_sync(lambda: self._run_cursor(sql, params, "one"))
        return dict(row) if row is not None else None

    async def execute(self, sql: str, /, *params: Any) -> int:
        """Execute a statement and commit. Returns the affected row count."""
        return await _run_sync(lambda: self._run_cursor(sql, params, "none"))

    def is_connected(self) -> bool:
        return bool(self._conn.is_connected())

    async def close(self) -> None:
        await _run_sync(self._conn.close)

    async def __aenter__(self) -> Connection:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()
