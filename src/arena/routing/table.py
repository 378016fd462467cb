"""Immutable route table with exact-match path and name lookup.

The table is built once from an ordered declaration and never changes
afterwards. Lookups are plain dict reads, so any number of navigation
requests can share one table without locking.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from arena.errors import ConfigurationError, NotFound
from arena.routing.route import ADMIN_PREFIX, RouteEntry, Segment, classify_path

logger = logging.getLogger("arena.routing")


def _validate(entries: tuple[RouteEntry, ...]) -> None:
    """Reject declarations that would make resolution order-dependent."""
    seen: set[str] = set()
    for entry in entries:
        if not entry.path.startswith("/"):
            msg = (
                f"Route path {entry.path!r} (name {entry.name!r}) must start with '/'. "
                f"Did you mean {'/' + entry.path!r}?"
            )
            raise ConfigurationError(msg)
        if not entry.name:
            msg = f"Route {entry.path!r} has an empty name."
            raise ConfigurationError(msg)
        if entry.path in seen:
            msg = f"Duplicate route path {entry.path!r}: each path may be declared once."
            raise ConfigurationError(msg)
        seen.add(entry.path)


class RouteTable:
    """Ordered, immutable sequence of :class:`RouteEntry`.

    Usage::

        table = RouteTable([
            RouteEntry("/home", "Home", ViewRef("user.Home")),
            RouteEntry("/admin/home", "admin.Home", ViewRef("admin.Home")),
        ])
        table.resolve("/home").view        # ViewRef("user.Home")
        table.url_for("admin.Home")        # "/admin/home"
        table.classify("/admin/home")      # Segment.ADMINISTRATOR

    Construction raises ``ConfigurationError`` for a path without a
    leading slash, an empty name, or a path declared twice.

    Names are expected to be unique but are not required to be. When two
    entries share a name, a warning is logged and by-name lookup returns
    the first of them in table order.
    """

    __slots__ = ("_admin_prefix", "_by_name", "_by_path", "_duplicate_names", "_entries")

    def __init__(self, entries: Iterable[RouteEntry], *, admin_prefix: str = ADMIN_PREFIX) -> None:
        frozen = tuple(entries)
        _validate(frozen)

        by_name: dict[str, RouteEntry] = {}
        for entry in frozen:
            # First declaration wins for names shared across segments
            by_name.setdefault(entry.name, entry)

        counts = Counter(entry.name for entry in frozen)
        duplicates = tuple(name for name, count in counts.items() if count > 1)
        if duplicates:
            logger.warning(
                "Route names declared more than once: %s. "
                "Lookup by name resolves to the first declaration in table order.",
                ", ".join(duplicates),
            )

        self._entries = frozen
        self._by_path = MappingProxyType({entry.path: entry for entry in frozen})
        self._by_name = MappingProxyType(by_name)
        self._duplicate_names = duplicates
        self._admin_prefix = admin_prefix

    # -- Introspection --

    @property
    def entries(self) -> tuple[RouteEntry, ...]:
        return self._entries

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(entry.path for entry in self._entries)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self._entries)

    @property
    def duplicate_names(self) -> tuple[str, ...]:
        """Names declared by more than one entry, in first-seen order."""
        return self._duplicate_names

    @property
    def admin_prefix(self) -> str:
        return self._admin_prefix

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def __repr__(self) -> str:
        return f"RouteTable({len(self._entries)} routes)"

    # -- Lookup by path --

    def lookup(self, path: str) -> RouteEntry | None:
        """Return the entry declared for *path*, or ``None``.

        Exact string comparison: no trailing-slash folding, no parameters.
        """
        return self._by_path.get(path)

    def resolve(self, path: str) -> RouteEntry:
        """Return the entry declared for *path*.

        Raises ``NotFound`` if no entry matches. Callers are expected to
        handle the miss (typically by redirecting to the login route).
        """
        entry = self._by_path.get(path)
        if entry is None:
            raise NotFound(f"No route matches {path!r}")
        return entry

    # -- Lookup by name --

    def lookup_name(self, name: str) -> RouteEntry | None:
        """Return the first entry named *name* in table order, or ``None``."""
        return self._by_name.get(name)

    def resolve_name(self, name: str) -> RouteEntry:
        """Return the first entry named *name* in table order.

        Raises ``NotFound`` if no entry carries the name.
        """
        entry = self._by_name.get(name)
        if entry is None:
            raise NotFound(f"No route named {name!r}")
        return entry

    def url_for(self, name: str) -> str:
        """Reverse lookup: the path of the route named *name*."""
        return self.resolve_name(name).path

    # -- Segments --

    def classify(self, path: str) -> Segment:
        return classify_path(path, self._admin_prefix)

    def segment(self, which: Segment) -> tuple[RouteEntry, ...]:
        """Entries belonging to one segment, in table order."""
        return tuple(entry for entry in self._entries if self.classify(entry.path) is which)
