"""RouteConfig, Record and Route dataclasses.

``RouteConfig`` is the canonical, long-lived node of the route tree.
``Record`` and ``Route`` are frozen per-navigation snapshots.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, NotRequired, TypedDict

from waypoint._internal.identity import RouteId
from waypoint._internal.types import ComponentValue, Meta, Params, PropsValue, RedirectValue
from waypoint.routing.location import HistoryAction

# Never matches anything, not even the empty string
NEVER_MATCHES = re.compile(r"(?!)")


def empty_generator(params: Mapping[str, Any]) -> str:
    """Placeholder URL generator until the matcher installs a real one."""
    return ""


class RouteConfigPrefab(TypedDict):
    """User-authored route declaration.

    Only ``path`` is required. Any mapping with these keys is accepted
    by ``build_config()``.
    """

    path: str
    name: NotRequired[str | None]
    redirect: NotRequired[RedirectValue]
    component: NotRequired[ComponentValue | None]
    meta: NotRequired[Meta | None]
    props: NotRequired[PropsValue | None]
    children: NotRequired[Sequence[RouteConfigPrefab]]


@dataclass(slots=True, eq=False)
class RouteConfig:
    """A normalized route declaration. One per declared route.

    Built by ``build_config()``. The external matcher owns ``param_keys``,
    ``matcher`` and ``generator`` and fills them in after construction;
    tree assembly owns ``parent`` and ``children``. ``id`` is fixed once
    set. Equality is identity.
    """

    id: RouteId
    path: str
    name: str | None = None
    redirect: RedirectValue = None
    component: ComponentValue = False
    is_async: bool = False
    meta: Meta | None = None
    props: PropsValue = False
    children: list[RouteConfig] = field(default_factory=list)
    parent: RouteConfig | None = None
    param_keys: list[str] = field(default_factory=list)
    matcher: re.Pattern[str] = NEVER_MATCHES
    generator: Callable[[Mapping[str, Any]], str] = empty_generator

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and hasattr(self, "id"):
            msg = "RouteConfig.id cannot be reassigned"
            raise AttributeError(msg)
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"RouteConfig(id={self.id!r}, path={self.path!r}, name={self.name!r})"

    def ancestors(self) -> Iterator[RouteConfig]:
        """Yield parents from the closest up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def lineage(self) -> list[RouteConfig]:
        """Return the configs from the root down to (and including) this one."""
        chain = [self, *self.ancestors()]
        chain.reverse()
        return chain

    def is_ancestor_of(self, other: RouteConfig) -> bool:
        return any(node is self for node in other.ancestors())


@dataclass(frozen=True, slots=True)
class Record:
    """A matched config with its parameters resolved for one navigation."""

    id: RouteId
    path: str
    name: str | None = None
    redirect: RedirectValue = None
    component: ComponentValue = False
    is_async: bool = False
    meta: Meta | None = None
    props: PropsValue = False
    params: Params = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Route:
    """The public "current route" snapshot of one navigation.

    ``matched`` runs from the outermost ancestor to the resolved leaf;
    the leaf supplies ``name``, ``params``, ``meta`` and ``redirect``.
    A ``Route()`` with nothing matched is the "no route yet" placeholder.
    """

    name: str | None = None
    path: str = ""
    hash: str = ""
    full_path: str = ""
    query: dict[str, Any] = field(default_factory=dict)
    params: Params = field(default_factory=dict)
    meta: Meta | None = None
    redirect: RedirectValue = None
    action: HistoryAction | None = None
    matched: tuple[Record, ...] = ()

    @property
    def is_placeholder(self) -> bool:
        return not self.matched

    @property
    def leaf(self) -> Record | None:
        """The resolved (deepest) record, or None for a placeholder."""
        if not self.matched:
            return None
        return self.matched[-1]
