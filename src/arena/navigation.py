"""Navigation shell — turns a requested path into a view or a redirect.

The route table only answers "what is declared at this path". The
navigator adds the two policies around it:

- a path that resolves to nothing sends the user to the fallback route;
- a route the access guard refuses sends the user to the fallback route.

Neither case is an error from the caller's point of view. ``NotFound``
and ``Forbidden`` raised inside are converted into a :class:`Navigation`
that carries the redirect target.

Usage::

    from arena.navigation import Navigator
    from arena.routing import build_route_table

    navigator = Navigator(build_route_table())
    nav = navigator.navigate("/admin/users", current_user)
    if nav.redirect_to:
        ...  # send the browser there
    else:
        render(nav.entry.view)
"""

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from arena.errors import ConfigurationError, Forbidden, HTTPError, NotFound
from arena.routing.route import RouteEntry, Segment
from arena.routing.table import RouteTable

logger = logging.getLogger("arena.navigation")

# ---------------------------------------------------------------------------
# User protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class User(Protocol):
    """Minimal user protocol.

    Any object with ``id``, ``is_authenticated`` and ``permissions``
    satisfies this. The platform brings its own user model.
    """

    @property
    def id(self) -> str: ...

    @property
    def is_authenticated(self) -> bool: ...

    @property
    def permissions(self) -> frozenset[str]: ...


@dataclass(frozen=True, slots=True)
class AnonymousUser:
    """Sentinel for visitors who have not logged in."""

    id: str = ""
    is_authenticated: bool = False
    permissions: frozenset[str] = frozenset()


ANONYMOUS = AnonymousUser()

# ---------------------------------------------------------------------------
# Access guard
# ---------------------------------------------------------------------------


@runtime_checkable
class AccessGuard(Protocol):
    """Decides whether *user* may open *entry*."""

    def allows(self, user: User, entry: RouteEntry, segment: Segment) -> bool: ...


@dataclass(frozen=True, slots=True)
class PermissionGuard:
    """Default guard.

    Public paths are open to everyone. Participant routes need an
    authenticated user. Administrator routes also need *permission*.
    """

    permission: str = "admin"
    public_paths: frozenset[str] = frozenset({"/login"})

    def allows(self, user: User, entry: RouteEntry, segment: Segment) -> bool:
        if entry.path in self.public_paths:
            return True
        if not user.is_authenticated:
            return False
        if segment is Segment.ADMINISTRATOR:
            return self.permission in user.permissions
        return True


# ---------------------------------------------------------------------------
# Navigator
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NavigationConfig:
    """Navigation policy. Immutable after creation.

    Attributes:
        fallback_path: Where misses and refusals are sent. Must be a
            declared route.
        public_paths: Paths the default guard opens to anonymous users.
    """

    fallback_path: str = "/login"
    public_paths: frozenset[str] = frozenset({"/login"})


@dataclass(frozen=True, slots=True)
class Navigation:
    """Outcome of a navigation request.

    Exactly one of ``entry`` and ``redirect_to`` is set. ``reason`` is
    ``"not_found"`` or ``"forbidden"`` for redirects, empty otherwise.
    """

    path: str
    entry: RouteEntry | None = None
    redirect_to: str | None = None
    reason: str = ""

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None


class Navigator:
    """Resolve requested paths against a route table for a given user."""

    __slots__ = ("_config", "_guard", "_table")

    def __init__(
        self,
        table: RouteTable,
        guard: AccessGuard | None = None,
        config: NavigationConfig | None = None,
    ) -> None:
        config = config or NavigationConfig()
        if config.fallback_path not in table:
            msg = (
                f"Fallback path {config.fallback_path!r} is not a declared route. "
                f"Declared: {', '.join(table.paths)}"
            )
            raise ConfigurationError(msg)
        self._table = table
        self._config = config
        self._guard = guard or PermissionGuard(public_paths=config.public_paths)

    @property
    def table(self) -> RouteTable:
        return self._table

    def open(self, path: str, user: User = ANONYMOUS) -> RouteEntry:
        """Resolve *path* and check access.

        Raises ``NotFound`` for undeclared paths and ``Forbidden`` when the
        guard refuses. Use :meth:`navigate` to get redirects instead.
        """
        entry = self._table.resolve(path)
        segment = self._table.classify(entry.path)
        if not self._guard.allows(user, entry, segment):
            raise Forbidden(f"{segment.value} route {path!r} refused for user {user.id!r}")
        return entry

    def navigate(self, path: str, user: User = ANONYMOUS) -> Navigation:
        """Resolve *path* for *user*, redirecting to the fallback on failure."""
        try:
            entry = self.open(path, user)
        except HTTPError as exc:
            reason = "not_found" if isinstance(exc, NotFound) else "forbidden"
            logger.debug("Redirecting %r to %r: %s", path, self._config.fallback_path, exc)
            return Navigation(path=path, redirect_to=self._config.fallback_path, reason=reason)
        return Navigation(path=path, entry=entry)

    def url_for(self, name: str) -> str:
        return self._table.url_for(name)
