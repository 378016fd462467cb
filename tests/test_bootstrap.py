"""Tests for arena.data.bootstrap — one-shot startup connection."""

import logging

import mysql.connector
import pytest

from arena.data import (
    GENERIC_FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    Connection,
    ConnectionConfig,
    ConnectionError,
    bootstrap,
    connect,
)
from arena.data.mysql import CURSOR_OPTIONS

CONFIG = ConnectionConfig(database="ctf", username="player", password="hunter2", host="db")


class TestConnect:
    @pytest.mark.anyio
    async def test_returns_live_connection(self, fake_mysql) -> None:
        conn = await connect(CONFIG)
        assert isinstance(conn, Connection)
        assert conn.is_connected()
        assert len(fake_mysql) == 1
        assert fake_mysql[0].kwargs == CONFIG.connect_args()

    @pytest.mark.anyio
    async def test_failure_raises_connection_error(self, unreachable_mysql) -> None:
        with pytest.raises(ConnectionError) as exc_info:
            await connect(CONFIG)
        assert "db:3306/ctf" in str(exc_info.value)
        assert "Can't connect" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, mysql.connector.Error)

    @pytest.mark.anyio
    async def test_single_attempt(self, unreachable_mysql) -> None:
        with pytest.raises(ConnectionError):
            await connect(CONFIG)
        assert len(unreachable_mysql) == 1

    @pytest.mark.anyio
    async def test_rejected_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _connect(**kwargs):
            raise mysql.connector.errors.ProgrammingError(
                msg="Access denied for user 'player'", errno=1045, sqlstate="28000"
            )

        monkeypatch.setattr(mysql.connector, "connect", _connect)
        with pytest.raises(ConnectionError, match="Access denied"):
            await connect(CONFIG)


class TestBootstrap:
    @pytest.mark.anyio
    async def test_success(self, fake_mysql, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="arena.data"):
            result = await bootstrap(CONFIG)

        assert result.ok
        assert result.connection is not None
        assert result.error is None
        assert result.message == SUCCESS_MESSAGE
        assert result.diagnostic == ""
        # The caller shows the confirmation; the log only gets a debug line
        assert SUCCESS_MESSAGE not in caplog.text
        assert "Connected to db:3306/ctf" in caplog.text
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

    @pytest.mark.anyio
    async def test_failure(self, unreachable_mysql, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="arena.data"):
            result = await bootstrap(CONFIG)

        assert not result.ok
        assert result.connection is None
        assert isinstance(result.error, ConnectionError)
        assert result.message == GENERIC_FAILURE_MESSAGE
        assert "Can't connect" in result.diagnostic

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "Can't connect" in errors[0].getMessage()
        assert errors[0].exc_info is not None
        assert SUCCESS_MESSAGE not in caplog.text

    @pytest.mark.anyio
    async def test_password_not_logged(self, fake_mysql, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="arena.data"):
            await bootstrap(CONFIG)
        assert "hunter2" not in caplog.text

    def test_generic_message_hides_infrastructure(self) -> None:
        assert "mysql" not in GENERIC_FAILURE_MESSAGE.lower()
        assert "3306" not in GENERIC_FAILURE_MESSAGE


class TestConnection:
    @pytest.mark.anyio
    async def test_fetch_uses_prepared_dict_cursor(self, fake_mysql) -> None:
        conn = await connect(CONFIG)
        raw = fake_mysql[0]
        raw.rows = [{"id": 1, "name": "alice"}, {"id": 2, "name": "bob"}]

        rows = await conn.fetch("SELECT id, name FROM users WHERE team = ?", 7)

        assert rows == [{"id": 1, "name": "alice"}, {"id": 2, "name": "bob"}]
        assert raw.cursors[0].options == CURSOR_OPTIONS == {"prepared": True, "dictionary": True}
        assert raw.executed == [("SELECT id, name FROM users WHERE team = ?", (7,))]
        assert raw.cursors[0].closed

    @pytest.mark.anyio
    async def test_fetch_one(self, fake_mysql) -> None:
        conn = await connect(CONFIG)
        fake_mysql[0].rows = [{"id": 1}, {"id": 2}]
        assert await conn.fetch_one("SELECT id FROM users") == {"id": 1}

    @pytest.mark.anyio
    async def test_fetch_one_empty(self, fake_mysql) -> None:
        conn = await connect(CONFIG)
        assert await conn.fetch_one("SELECT id FROM users WHERE id = ?", 99) is None

    @pytest.mark.anyio
    async def test_execute_commits(self, fake_mysql) -> None:
        conn = await connect(CONFIG)
        fake_mysql[0].rowcount = 3
        count = await conn.execute("UPDATE users SET score = ?", 0)
        assert count == 3
        assert fake_mysql[0].commits == 1

    @pytest.mark.anyio
    async def test_server_error_raises_query_error(self, fake_mysql) -> None:
        from arena.data import QueryError

        conn = await connect(CONFIG)
        fake_mysql[0].fail_with = mysql.connector.errors.ProgrammingError(
            msg="Table 'ctf.nope' doesn't exist", errno=1146
        )
        with pytest.raises(QueryError, match="doesn't exist"):
            await conn.fetch("SELECT * FROM nope")
        assert fake_mysql[0].cursors[0].closed

    @pytest.mark.anyio
    async def test_context_manager_closes(self, fake_mysql) -> None:
        async with await connect(CONFIG) as conn:
            assert conn.is_connected()
        assert not fake_mysql[0].connected
