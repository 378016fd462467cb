"""Arena CLI — route table inspection and the startup database check.

Entry point registered as ``arena`` in ``pyproject.toml``::

    [project.scripts]
    arena = "arena.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``arena`` command."""
    parser = argparse.ArgumentParser(
        prog="arena",
        description="Arena — route registry and startup checks for the challenge platform.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- arena routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List or resolve declared routes")
    routes_parser.add_argument(
        "--table",
        default=None,
        help="Import string for a RouteTable or factory (default: built-in declaration)",
    )
    group = routes_parser.add_mutually_exclusive_group()
    group.add_argument("--resolve", metavar="PATH", default=None, help="Resolve a single path")
    group.add_argument("--name", default=None, help="Resolve a route by name")

    # -- arena check-db ---------------------------------------------------
    subparsers.add_parser(
        "check-db",
        help="Connect to MySQL once using MYSQL_* environment variables",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "routes":
        from arena.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check-db":
        from arena.cli._check_db import run_check_db

        run_check_db(args)
