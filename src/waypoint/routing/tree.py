"""Route tree assembly.

Builds nested prefabs into a wired ``RouteConfig`` tree. The matcher
normally does this while compiling patterns; these helpers do the
wiring alone, for startup validation and tooling.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from waypoint._internal.identity import IdentitySource
from waypoint.errors import InvalidConfig, RouteTreeError
from waypoint.routing.builder import build_config
from waypoint.routing.route import RouteConfig


def attach_child(parent: RouteConfig, child: RouteConfig) -> None:
    """Wire *child* under *parent*.

    Raises ``RouteTreeError`` if *child* already has a parent or if the
    edge would make a config its own ancestor.
    """
    if child.parent is not None:
        msg = f"{child!r} already has parent {child.parent!r}"
        raise RouteTreeError(msg)
    if child is parent or child.is_ancestor_of(parent):
        msg = f"attaching {child!r} under {parent!r} would create a cycle"
        raise RouteTreeError(msg)
    child.parent = parent
    parent.children.append(child)


def build_tree(
    prefabs: Sequence[Mapping[str, Any]],
    *,
    identity: IdentitySource | None = None,
) -> list[RouteConfig]:
    """Build every prefab (recursively through ``children``) and wire the tree.

    Returns the root configs in declaration order. Raises ``InvalidConfig``
    from the first prefab that fails; nothing is returned in that case.
    """
    roots: list[RouteConfig] = []
    for prefab in prefabs:
        roots.append(_build_node(prefab, identity))
    return roots


def _build_node(prefab: Mapping[str, Any], identity: IdentitySource | None) -> RouteConfig:
    config = build_config(prefab, identity=identity)
    children = prefab.get("children") or ()
    if not isinstance(children, Sequence) or isinstance(children, str):
        raise InvalidConfig("children", f"expected a sequence, got {type(children).__name__}")
    for child_prefab in children:
        attach_child(config, _build_node(child_prefab, identity))
    return config


def walk(configs: Iterable[RouteConfig]) -> Iterator[RouteConfig]:
    """Yield configs depth-first, parents before their children."""
    for config in configs:
        yield config
        yield from walk(config.children)
