"""Route cloner — independent deep copies of route snapshots.

Callbacks and deferred loaders cannot be deep-copied faithfully (a
pending coroutine cannot be copied at all), so every field is
classified up front: data fields go through ``copy.deepcopy``,
reference fields are re-attached by identity. The classification must
cover every field; this is checked when the module is imported.
"""

import copy
from dataclasses import fields
from typing import Any

from waypoint.routing.route import Record, Route

RECORD_DATA_FIELDS = frozenset({"id", "name", "path", "is_async", "params"})
RECORD_REFERENCE_FIELDS = frozenset({"redirect", "component", "props", "meta"})

# ``matched`` is cloned record by record
ROUTE_DATA_FIELDS = frozenset({
    "name", "path", "hash", "full_path", "query", "params", "action", "matched",
})
ROUTE_REFERENCE_FIELDS = frozenset({"redirect", "meta"})


def _check_classification(cls: type, data: frozenset[str], reference: frozenset[str]) -> None:
    names = {f.name for f in fields(cls)}
    overlap = data & reference
    if overlap:
        msg = f"{cls.__name__} fields classified twice: {sorted(overlap)}"
        raise TypeError(msg)
    unclassified = names - data - reference
    stale = (data | reference) - names
    if unclassified or stale:
        msg = (
            f"{cls.__name__} clone classification out of date: "
            f"unclassified={sorted(unclassified)} unknown={sorted(stale)}"
        )
        raise TypeError(msg)


_check_classification(Record, RECORD_DATA_FIELDS, RECORD_REFERENCE_FIELDS)
_check_classification(Route, ROUTE_DATA_FIELDS, ROUTE_REFERENCE_FIELDS)


def clone_record(record: Record, memo: dict[int, Any] | None = None) -> Record:
    """Deep-copy *record*, sharing its callback and descriptive fields."""
    memo = {} if memo is None else memo
    values: dict[str, Any] = {}
    for name in RECORD_DATA_FIELDS:
        values[name] = copy.deepcopy(getattr(record, name), memo)
    for name in RECORD_REFERENCE_FIELDS:
        values[name] = getattr(record, name)
    return Record(**values)


def clone_route(route: Route | None) -> Route:
    """Deep-copy *route* so the copy can be mutated independently.

    ``None`` yields an empty placeholder ``Route()``: structurally equal
    to any other placeholder but meaning "no route yet". Callbacks and
    deferred loaders keep their identity in the copy.
    """
    if route is None:
        return Route()

    # Shared memo keeps params that alias the leaf record's params aliased
    memo: dict[int, Any] = {}
    values: dict[str, Any] = {}
    for name in ROUTE_DATA_FIELDS - {"matched"}:
        values[name] = copy.deepcopy(getattr(route, name), memo)
    values["matched"] = tuple(clone_record(record, memo) for record in route.matched)
    for name in ROUTE_REFERENCE_FIELDS:
        values[name] = getattr(route, name)
    return Route(**values)
