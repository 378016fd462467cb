"""MySQL connectivity for arena.

One connection attempt at startup: succeed and hand the connection on,
or fail with the full diagnostic logged and a generic message for users.

Basic usage::

    from arena.data import ConnectionConfig, bootstrap

    config = ConnectionConfig.from_env()
    result = await bootstrap(config)
    if not result.ok:
        raise SystemExit(1)
    rows = await result.connection.fetch("SELECT id, name FROM users")

Requires ``mysql-connector-python``.
"""

from arena.data.bootstrap import (
    GENERIC_FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    BootstrapResult,
    bootstrap,
    connect,
)
from arena.data.config import ConnectionConfig
from arena.data.errors import ConnectionError, DataError, DriverNotInstalledError, QueryError
from arena.data.mysql import Connection

__all__ = [
    "GENERIC_FAILURE_MESSAGE",
    "SUCCESS_MESSAGE",
    "BootstrapResult",
    "Connection",
    "ConnectionConfig",
    "ConnectionError",
    "DataError",
    "DriverNotInstalledError",
    "QueryError",
    "bootstrap",
    "connect",
]
