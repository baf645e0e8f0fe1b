"""Route identity sources.

Every ``RouteConfig`` receives an identity when it is built. Identity is
per construction, never per value: two identical prefabs built twice get
two different ids. Sources are injectable so tests can pin ids.
"""

import itertools
import threading
import uuid
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class RouteId:
    """Opaque route identity. Compare with ``==``; never parse ``value``."""

    value: int | str

    def __repr__(self) -> str:
        return f"RouteId({self.value!r})"

    def __deepcopy__(self, memo: dict[int, Any]) -> "RouteId":
        return self


@runtime_checkable
class IdentitySource(Protocol):
    """Produces a distinct ``RouteId`` on every call. Must be thread-safe."""

    def next_id(self) -> RouteId: ...


class CounterIdentity:
    """Monotonic integer ids guarded by a lock.

    The lock keeps ``next()`` on the shared counter atomic on
    free-threaded interpreters too.
    """

    __slots__ = ("_counter", "_lock")

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> RouteId:
        with self._lock:
            return RouteId(next(self._counter))


class UUIDIdentity:
    """Random UUID4 ids. Unique across processes, not ordered."""

    __slots__ = ()

    def next_id(self) -> RouteId:
        return RouteId(uuid.uuid4().hex)


# Process-wide default source
_default_identity = CounterIdentity()


def default_identity() -> IdentitySource:
    """Return the shared process-wide identity source."""
    return _default_identity
