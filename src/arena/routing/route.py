"""RouteEntry, ViewRef and segment classification."""

from dataclasses import dataclass
from enum import Enum

ADMIN_PREFIX = "/admin/"


class Segment(Enum):
    """Logical partition of the route table, decided by path prefix."""

    PARTICIPANT = "participant"
    ADMINISTRATOR = "administrator"


@dataclass(frozen=True, slots=True)
class ViewRef:
    """Reference to an opaque renderable unit.

    ``ident`` is a dotted identifier such as ``"user.Challenges"`` or
    ``"admin.Users"``. The table holds the reference only; whatever
    renders views resolves the identifier.
    """

    ident: str

    def __str__(self) -> str:
        return self.ident


def classify_path(path: str, prefix: str = ADMIN_PREFIX) -> Segment:
    """Classify *path* as participant or administrator.

    A path is administrative iff it starts with *prefix*. This only
    classifies; enforcement belongs to the access guard.
    """
    if path.startswith(prefix):
        return Segment.ADMINISTRATOR
    return Segment.PARTICIPANT


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A frozen route declaration: path, name for reverse lookup, view.

    Entries carry no segment of their own; the owning table classifies
    them with its administrator prefix (``RouteTable.classify``).
    """

    path: str
    name: str
    view: ViewRef
