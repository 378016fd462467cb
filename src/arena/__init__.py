"""Arena — navigation and startup layer for a dual-role challenge platform.

Participants and administrators share one route table: participant views
at the top level, their administrator mirrors under ``/admin``.

Basic usage::

    from arena import Navigator, build_route_table

    table = build_route_table()
    table.resolve("/leaderboard").view      # ViewRef("user.Leaderboard")
    table.url_for("admin.Leaderboard")      # "/admin/leaderboard"

    navigator = Navigator(table)
    navigator.navigate("/admin/users", user)  # entry, or redirect to /login

Startup check (``pip install arena``, needs ``mysql-connector-python``)::

    from arena.data import ConnectionConfig, bootstrap
    result = await bootstrap(ConnectionConfig.from_env())
"""

__version__ = "0.1.0"
__all__ = [
    "ArenaError",
    "ConfigurationError",
    "Forbidden",
    "HTTPError",
    "NavigationConfig",
    "Navigator",
    "NotFound",
    "RouteEntry",
    "RouteTable",
    "Segment",
    "ViewRef",
    "build_route_table",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import arena`` fast and free of the MySQL driver.
    """
    if name in ("Navigator", "NavigationConfig"):
        from arena import navigation as _nav

        return getattr(_nav, name)

    if name in ("RouteEntry", "RouteTable", "Segment", "ViewRef", "build_route_table"):
        from arena import routing as _routing

        return getattr(_routing, name)

    if name in ("ArenaError", "ConfigurationError", "Forbidden", "HTTPError", "NotFound"):
        from arena import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
