"""Data layer error hierarchy.

Driver exceptions (``mysql.connector.Error``) never leave ``arena.data``
unwrapped; they are chained as ``__cause__`` of one of these.
"""

from arena.errors import ArenaError


class DataError(ArenaError):
    """Base for all arena.data errors."""


class DriverNotInstalledError(DataError):
    """``mysql-connector-python`` is not importable."""


class ConnectionError(DataError):  # noqa: A001 — intentional shadow of builtin
    """The MySQL server was unreachable or refused the credentials.

    Raised by the single startup attempt in ``connect()``; the message
    names host, port and database but never the password.
    """


class QueryError(DataError):
    """The server rejected a prepared statement (syntax, missing table, constraint)."""
