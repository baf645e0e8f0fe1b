"""Config builder — validates a prefab and normalizes it into a RouteConfig.

Validation happens up front; nothing is constructed unless every
property passes. The prefab itself is never modified.
"""

import logging
from collections.abc import Mapping
from typing import Any

from waypoint._internal.identity import IdentitySource
from waypoint.config import DEFAULT_CONFIG
from waypoint.errors import InvalidConfig
from waypoint.routing.route import RouteConfig
from waypoint.routing.variants import ComponentKind, component_kind, props_kind, redirect_kind

logger = logging.getLogger("waypoint.routing")


def build_config(
    prefab: Mapping[str, Any] | None,
    *,
    identity: IdentitySource | None = None,
) -> RouteConfig:
    """Create a route config from a user prefab.

    Examples::

        build_config({"path": "/"})
        build_config({"path": "/users/:id", "name": "user", "component": UserView})
        build_config({"path": "/old", "redirect": {"name": "home"}})

    Only the keys of ``RouteConfigPrefab`` are read; nested ``children``
    are left for tree assembly. Every call draws a fresh id from
    *identity* (the shared counter by default).

    Raises ``InvalidConfig`` naming the first property that fails.
    """
    if prefab is None or not isinstance(prefab, Mapping):
        raise InvalidConfig("prefab", f"expected a mapping, got {type(prefab).__name__}")

    path = prefab.get("path")
    if path is None or not isinstance(path, str):
        raise InvalidConfig("path", f"expected str, got {type(path).__name__}")

    component = prefab.get("component")
    if component is False:
        raise InvalidConfig("component", "expected callable or awaitable, got bool")
    kind = component_kind(component)

    meta = prefab.get("meta")
    if meta is not None and not isinstance(meta, Mapping):
        raise InvalidConfig("meta", f"expected a mapping, got {type(meta).__name__}")

    redirect = prefab.get("redirect")
    redirect_kind(redirect)

    props = prefab.get("props")
    props_kind(props)

    source = identity or DEFAULT_CONFIG.identity
    config = RouteConfig(
        id=source.next_id(),
        path=path,
        name=prefab.get("name"),
        redirect=redirect,
        component=component if kind is not ComponentKind.NONE else False,
        is_async=kind is ComponentKind.DEFERRED,
        meta=meta,
        props=props if props is not None else False,
    )
    logger.debug("Built route config %r (component=%s)", config, kind.value)
    return config
