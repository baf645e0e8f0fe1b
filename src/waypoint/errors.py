"""Waypoint exception hierarchy.

Shared across the builder, tree wiring, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


@dataclass(frozen=True, slots=True)
class InvalidConfig(WaypointError):
    """A route config prefab failed validation.

    Raised by ``build_config()`` before anything is constructed. ``field``
    names the offending property: ``prefab``, ``path``, ``component``,
    ``meta``, ``redirect``, ``props``, or ``children``
    when a whole tree is built.
    """

    field: str
    detail: str = ""

    def __str__(self) -> str:
        message = f"invalid route config {self.field} property"
        if self.field == "prefab":
            message = "invalid route config prefab"
        if self.detail:
            return f"{message}: {self.detail}"
        return message


class RouteTreeError(WaypointError):
    """Raised when wiring two configs would break the tree shape.

    Covers cycles (a config becoming its own ancestor) and re-parenting
    a config that already has a parent.
    """
