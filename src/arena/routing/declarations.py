"""The platform's route declaration.

Participant routes live at the top level; the administrator area mirrors
them under ``/admin``. Administrator names are namespaced (``admin.Users``)
so that navigating by name never has to guess which segment was meant.

The table is built by :func:`build_route_table` at application startup
and passed to whatever consumes it. Nothing here is a mutable global.
"""

from collections.abc import Iterable

from arena.errors import ConfigurationError
from arena.routing.route import RouteEntry, ViewRef
from arena.routing.table import RouteTable

PARTICIPANT_VIEWS: tuple[str, ...] = (
    "Challenges",
    "Leaderboard",
    "Users",
    "Home",
    "Logout",
    "Notifications",
    "Settings",
)

LOGIN = RouteEntry(path="/login", name="Login", view=ViewRef("Login"))


def _participant(view_name: str) -> RouteEntry:
    return RouteEntry(
        path=f"/{view_name.lower()}",
        name=view_name,
        view=ViewRef(f"user.{view_name}"),
    )


def mirror(entries: Iterable[RouteEntry], prefix: str = "/admin") -> list[RouteEntry]:
    """Derive administrator routes from participant routes.

    ``/users`` named ``Users`` becomes ``/admin/users`` named
    ``admin.Users``, rendering ``admin.Users``. Paths are always joined
    with exactly one slash.
    """
    if not prefix.startswith("/") or prefix.endswith("/"):
        msg = f"Administrator prefix must look like '/admin', got {prefix!r}"
        raise ConfigurationError(msg)

    mirrored: list[RouteEntry] = []
    for entry in entries:
        view_name = entry.view.ident.rpartition(".")[2]
        mirrored.append(
            RouteEntry(
                path=f"{prefix}{entry.path}",
                name=f"admin.{entry.name}",
                view=ViewRef(f"admin.{view_name}"),
            )
        )
    return mirrored


def build_route_table(*, admin_prefix: str = "/admin") -> RouteTable:
    """Build the platform route table.

    Order: participant routes, their administrator mirrors, then ``/login``.
    """
    participant = [_participant(name) for name in PARTICIPANT_VIEWS]
    administrator = mirror(participant, admin_prefix)
    return RouteTable(
        [*participant, *administrator, LOGIN],
        admin_prefix=f"{admin_prefix}/",
    )
