"""Waypoint — the route-modeling core of a client-side router.

Turns declarative route configuration into normalized configs, resolves
matched parameters into records, and assembles the "current route"
snapshot handed to the UI layer.

Basic usage::

    from waypoint import Location, build_config, build_record, build_route

    config = build_config({"path": "/users/:id", "name": "user", "component": UserView})
    config.param_keys = ["id"]  # installed by the matcher

    record = build_record(config, ["/users/42", "42"])
    route = build_route(Location("/users/42"), [record])
    route.params  # {"id": 42}
"""

__version__ = "0.1.0-dev"
__all__ = [
    "CoercionPolicy",
    "CoreConfig",
    "HistoryAction",
    "InvalidConfig",
    "Location",
    "Record",
    "Route",
    "RouteConfig",
    "RouteConfigPrefab",
    "RouteId",
    "RouteTreeError",
    "WaypointError",
    "build_config",
    "build_matched",
    "build_record",
    "build_route",
    "build_tree",
    "clone_route",
    "resolve_components",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "CoercionPolicy": "waypoint.routing.params",
    "CoreConfig": "waypoint.config",
    "HistoryAction": "waypoint.routing.location",
    "InvalidConfig": "waypoint.errors",
    "Location": "waypoint.routing.location",
    "Record": "waypoint.routing.route",
    "Route": "waypoint.routing.route",
    "RouteConfig": "waypoint.routing.route",
    "RouteConfigPrefab": "waypoint.routing.route",
    "RouteId": "waypoint._internal.identity",
    "RouteTreeError": "waypoint.errors",
    "WaypointError": "waypoint.errors",
    "build_config": "waypoint.routing.builder",
    "build_matched": "waypoint.routing.record",
    "build_record": "waypoint.routing.record",
    "build_route": "waypoint.routing.assembler",
    "build_tree": "waypoint.routing.tree",
    "clone_route": "waypoint.routing.clone",
    "resolve_components": "waypoint.routing.components",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
