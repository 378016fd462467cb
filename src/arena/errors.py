"""Arena exception hierarchy.

Shared across the route table, navigator, data layer, and CLI so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class ArenaError(Exception):
    """Base for all arena-specific errors."""


class ConfigurationError(ArenaError):
    """Raised when route declarations or settings are invalid.

    Surfaces at startup, before any route is served.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(ArenaError):
    """An error that maps directly to an HTTP status code.

    Raised by the route table and navigator. The navigation shell turns
    these into redirects; they are never fatal to the process.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the requested path or name."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class Forbidden(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """403 — the route exists but the current user may not open it."""

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(status=403, detail=detail)
