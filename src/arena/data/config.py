"""Connection configuration.

ConnectionConfig is a frozen dataclass read from the environment exactly
once, at startup, then passed explicitly to :func:`arena.data.connect`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from arena.errors import ConfigurationError

# Environment variable names
ENV_HOST = "MYSQL_host"
ENV_PORT = "MYSQL_port"
ENV_DATABASE = "MYSQL_database"
ENV_USERNAME = "MYSQL_username"
ENV_PASSWORD = "MYSQL_password"


@dataclass(frozen=True, slots=True)
class ConnectionConfig:
    """MySQL connection settings. Immutable after creation.

    ``password`` is excluded from ``repr`` so the config can be logged.

    Build it from the environment::

        config = ConnectionConfig.from_env()

    or directly::

        config = ConnectionConfig(database="ctf", username="ctf", password="s3cr3t")
    """

    database: str
    username: str
    password: str = field(default="", repr=False)
    host: str = "mysql"
    port: int = 3306
    charset: str = "utf8mb4"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ConnectionConfig:
        """Read settings from *environ* (defaults to ``os.environ``).

        ``MYSQL_database`` and ``MYSQL_username`` are required.
        ``MYSQL_host`` and ``MYSQL_port`` fall back to ``mysql:3306``.
        """
        env = os.environ if environ is None else environ

        missing = [name for name in (ENV_DATABASE, ENV_USERNAME) if not env.get(name)]
        if missing:
            msg = f"Missing required environment variable(s): {', '.join(missing)}"
            raise ConfigurationError(msg)

        raw_port = env.get(ENV_PORT) or "3306"
        try:
            port = int(raw_port)
        except ValueError:
            msg = f"{ENV_PORT} must be an integer, got {raw_port!r}"
            raise ConfigurationError(msg) from None

        return cls(
            database=env[ENV_DATABASE],
            username=env[ENV_USERNAME],
            password=env.get(ENV_PASSWORD, ""),
            host=env.get(ENV_HOST) or "mysql",
            port=port,
        )

    def connect_args(self) -> dict[str, Any]:
        """Keyword arguments for ``mysql.connector.connect``. Contains the password."""
        return {
            "host": self.host,
            "port": self.port,
            "database": self.database,
            "user": self.username,
            "password": self.password,
            "charset": self.charset,
        }
