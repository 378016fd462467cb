"""Routing — immutable route table with participant and administrator segments.

Routes are declared once at startup and compiled into a read-only
lookup structure.
"""

from arena.routing.declarations import PARTICIPANT_VIEWS, build_route_table, mirror
from arena.routing.route import RouteEntry, Segment, ViewRef, classify_path
from arena.routing.table import RouteTable

__all__ = [
    "PARTICIPANT_VIEWS",
    "RouteEntry",
    "RouteTable",
    "Segment",
    "ViewRef",
    "build_route_table",
    "classify_path",
    "mirror",
]
