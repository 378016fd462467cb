"""Route table import resolution — ``"module:attribute"`` to RouteTable.

Used by ``arena routes --table`` to inspect a table declared outside
the built-in declaration.
"""

import importlib

from arena.routing.table import RouteTable


def resolve_table(import_string: str) -> RouteTable:
    """Resolve an import string to a RouteTable instance.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"routes"``.

    If the resolved object is callable and not a RouteTable, it is called
    as a factory (e.g. ``"arena.routing:build_route_table"``).

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a RouteTable or factory,
            or the factory raised.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, RouteTable):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, RouteTable):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a RouteTable"
        raise TypeError(msg)

    return obj
