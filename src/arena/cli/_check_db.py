"""``arena check-db`` — fail-fast MySQL connectivity check.

Reads ``MYSQL_*`` variables once, attempts a single connection, prints
the confirmation and exits 0, or prints the diagnostic plus a generic
message and exits 1.
"""

import argparse
import logging
import sys

import anyio

from arena.data.bootstrap import GENERIC_FAILURE_MESSAGE, bootstrap
from arena.data.config import ConnectionConfig
from arena.errors import ConfigurationError

logger = logging.getLogger("arena.data")


async def _check(config: ConnectionConfig) -> int:
    result = await bootstrap(config)
    if not result.ok:
        print(result.diagnostic, file=sys.stderr)
        print(result.message, file=sys.stderr)
        return 1

    assert result.connection is not None
    await result.connection.close()
    print(result.message)
    return 0


def run_check_db(args: argparse.Namespace) -> None:
    """Run the startup connection check and exit with its status."""
    try:
        config = ConnectionConfig.from_env()
    except ConfigurationError as exc:
        logger.error("Database bootstrap failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        print(GENERIC_FAILURE_MESSAGE, file=sys.stderr)
        raise SystemExit(1) from exc

    status = anyio.run(_check, config)
    if status:
        raise SystemExit(status)
