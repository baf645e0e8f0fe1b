"""Route assembler — projects a matched record stack into a Route."""

from collections.abc import Sequence

from waypoint.routing.location import Location, full_url
from waypoint.routing.route import Record, Route


def build_route(location: Location, matched: Sequence[Record]) -> Route:
    """Create the route snapshot for *location* and its matched records.

    *matched* must be non-empty and ordered from the outermost ancestor
    to the resolved leaf. The leaf supplies ``name``, ``params``, ``meta``
    and ``redirect``; the location supplies the URL parts and action.
    """
    leaf = matched[-1]
    return Route(
        name=leaf.name,
        path=location.path,
        hash=location.hash,
        full_path=full_url(location.path, location.query, location.hash),
        query=dict(location.query),
        params=leaf.params,
        meta=leaf.meta,
        redirect=leaf.redirect,
        action=location.action,
        matched=tuple(matched),
    )
