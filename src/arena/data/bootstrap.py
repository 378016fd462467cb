"""Startup connectivity check.

One blocking connection attempt, no retries. :func:`connect` raises on
failure; :func:`bootstrap` wraps it into a :class:`BootstrapResult` so
the caller (usually the CLI) decides how to exit.

The full driver diagnostic goes to the ``arena.data`` logger. Users only
ever see :data:`GENERIC_FAILURE_MESSAGE`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from arena.data.config import ConnectionConfig
from arena.data.errors import ConnectionError, DriverNotInstalledError
from arena.data.mysql import Connection, _run_sync

logger = logging.getLogger("arena.data")

SUCCESS_MESSAGE = "Success: a connection to MySQL was made."
GENERIC_FAILURE_MESSAGE = "Something went wrong while starting up. Please try again later."


async def connect(config: ConnectionConfig) -> Connection:
    """Open a MySQL connection described by *config*.

    Raises ``DriverNotInstalledError`` if ``mysql-connector-python`` is
    missing and ``ConnectionError`` if the server cannot be reached or
    refuses the credentials.
    """
    try:
        import mysql.connector
    except ImportError:
        msg = (
            "arena.data requires 'mysql-connector-python'. "
            "Install it with: pip install mysql-connector-python"
        )
        raise DriverNotInstalledError(msg) from None

    args = config.connect_args()
    try:
        raw = await _run_sync(lambda: mysql.connector.connect(**args))
    except mysql.connector.Error as exc:
        msg = f"Could not connect to MySQL at {config.host}:{config.port}/{config.database}: {exc}"
        raise ConnectionError(msg) from exc

    return Connection(raw, mysql.connector)


@dataclass(frozen=True, slots=True)
class BootstrapResult:
    """Outcome of :func:`bootstrap`.

    On success ``connection`` is set and ``error`` is ``None``. On failure
    the reverse holds; ``diagnostic`` carries the raw driver message for
    operators and ``message`` the text safe to show users.
    """

    connection: Connection | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.connection is not None

    @property
    def message(self) -> str:
        return SUCCESS_MESSAGE if self.ok else GENERIC_FAILURE_MESSAGE

    @property
    def diagnostic(self) -> str:
        return str(self.error) if self.error is not None else ""


async def bootstrap(config: ConnectionConfig) -> BootstrapResult:
    """Attempt the startup connection once and report the outcome.

    The confirmation text travels on the result (``result.message``) for
    the caller to show; only a debug line is logged on success.
    """
    logger.debug("Connecting with %r", config)
    try:
        connection = await connect(config)
    except (ConnectionError, DriverNotInstalledError) as exc:
        logger.error("Database bootstrap failed: %s", exc, exc_info=exc)
        return BootstrapResult(error=exc)

    logger.debug("Connected to %s:%s/%s", config.host, config.port, config.database)
    return BootstrapResult(connection=connection)
