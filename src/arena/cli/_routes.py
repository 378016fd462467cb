"""``arena routes`` — list or resolve declared routes.

Prints the table with segment, path, name and view. With ``--resolve``
or ``--name`` prints the single matching entry, exiting 1 on a miss.
"""

import argparse
import sys

from arena.cli._resolve import resolve_table
from arena.errors import ConfigurationError, NotFound
from arena.routing.declarations import build_route_table
from arena.routing.table import RouteTable


def _load_table(import_string: str | None) -> RouteTable:
    try:
        if import_string is None:
            return build_route_table()
        return resolve_table(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table, or one resolved entry."""
    table = _load_table(args.table)

    if args.resolve is not None or args.name is not None:
        try:
            if args.resolve is not None:
                entry = table.resolve(args.resolve)
            else:
                entry = table.resolve_name(args.name)
        except NotFound as exc:
            print(f"Error: {exc.detail}", file=sys.stderr)
            raise SystemExit(1) from exc
        print(f"{entry.path}  {entry.name}  {entry.view}  ({table.classify(entry.path).value})")
        return

    if not len(table):
        print("No routes declared.")
        return

    rows = [
        (table.classify(entry.path).value, entry.path, entry.name, str(entry.view))
        for entry in table
    ]
    headers = ("SEGMENT", "PATH", "NAME", "VIEW")
    widths = [max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(3)]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format(*headers))
    print("-" * min(sum(widths) + 6 + max(len(row[3]) for row in rows), 80))
    for row in rows:
        print(fmt.format(*row))
