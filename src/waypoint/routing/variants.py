"""Closed variants for the polymorphic route fields.

``redirect``, ``props`` and ``component`` each accept a handful of shapes.
Each field gets an enum of its shapes, one classifier (the only place
that probes types, also used for validation by the builder), and one
resolution operation.

Redirect::

    None                  -> RedirectKind.NONE
    "/login"              -> RedirectKind.URL
    {"name": "login"}     -> RedirectKind.NAMED
    lambda to: "/login"   -> RedirectKind.CALLBACK

Props::

    False                 -> PropsKind.NONE      (do not resolve props)
    True                  -> PropsKind.AUTO      (props are the route params)
    {"title": "Home"}     -> PropsKind.STATIC
    lambda route: {...}   -> PropsKind.CALLBACK

Component::

    False                 -> ComponentKind.NONE  (config-only route)
    HomeView              -> ComponentKind.FACTORY
    load_view()           -> ComponentKind.DEFERRED (awaitable)
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from waypoint.errors import InvalidConfig

if TYPE_CHECKING:
    from waypoint.routing.route import Route


class RedirectKind(Enum):
    NONE = "none"
    URL = "url"
    NAMED = "named"
    CALLBACK = "callback"


class PropsKind(Enum):
    NONE = "none"
    AUTO = "auto"
    STATIC = "static"
    CALLBACK = "callback"


class ComponentKind(Enum):
    NONE = "none"
    FACTORY = "factory"
    DEFERRED = "deferred"


def redirect_kind(value: Any) -> RedirectKind:
    """Classify a redirect value. Raises ``InvalidConfig`` for other shapes."""
    if value is None:
        return RedirectKind.NONE
    if isinstance(value, str):
        return RedirectKind.URL
    if isinstance(value, Mapping):
        return RedirectKind.NAMED
    if callable(value):
        return RedirectKind.CALLBACK
    raise InvalidConfig("redirect", f"expected str, mapping or callable, got {type(value).__name__}")


def props_kind(value: Any) -> PropsKind:
    """Classify a props value. Raises ``InvalidConfig`` for other shapes."""
    if value is None or value is False:
        return PropsKind.NONE
    if value is True:
        return PropsKind.AUTO
    if isinstance(value, Mapping):
        return PropsKind.STATIC
    if callable(value):
        return PropsKind.CALLBACK
    raise InvalidConfig("props", f"expected True, mapping or callable, got {type(value).__name__}")


def component_kind(value: Any) -> ComponentKind:
    """Classify a component value. Raises ``InvalidConfig`` for other shapes.

    Awaitables are checked before callables so an awaitable object that
    also defines ``__call__`` still counts as deferred.
    """
    if value is None or value is False:
        return ComponentKind.NONE
    if inspect.isawaitable(value):
        return ComponentKind.DEFERRED
    if callable(value) and not isinstance(value, bool):
        return ComponentKind.FACTORY
    raise InvalidConfig(
        "component", f"expected callable or awaitable, got {type(value).__name__}"
    )


def resolve_redirect(value: Any, to: Route) -> str | Mapping[str, Any] | None:
    """Resolve a redirect against the route being navigated *to*.

    URLs and named-route references are returned as declared; callbacks
    are called with *to* and their result is returned.
    """
    kind = redirect_kind(value)
    if kind is RedirectKind.CALLBACK:
        return value(to)
    return value


def resolve_props(value: Any, route: Route) -> dict[str, Any]:
    """Resolve the props handed to a route's component."""
    kind = props_kind(value)
    if kind is PropsKind.NONE:
        return {}
    if kind is PropsKind.AUTO:
        return dict(route.params)
    if kind is PropsKind.STATIC:
        return dict(value)
    return dict(value(route))


def _default_export(module: Any) -> Any:
    if isinstance(module, Mapping) and "default" in module:
        return module["default"]
    return getattr(module, "default", module)


async def load_component(value: Any) -> Any:
    """Return the component behind *value*.

    Factories are returned as-is. Deferred loaders are awaited and their
    ``default`` export (attribute or key) is returned, falling back to the
    awaited value itself. A config-only route yields ``None``.

    A bare coroutine can only be awaited once; loaders that are resolved
    on every navigation should be tasks or futures.
    """
    kind = component_kind(value)
    if kind is ComponentKind.NONE:
        return None
    if kind is ComponentKind.FACTORY:
        return value
    return _default_export(await value)
