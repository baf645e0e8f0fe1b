"""Shared type aliases used across waypoint modules."""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeAlias

# Coerced path parameter value
ParamValue: TypeAlias = str | int | float

# Resolved parameters of a single record
Params: TypeAlias = dict[str, ParamValue]

# Opaque descriptive data attached to a route
Meta: TypeAlias = Mapping[str, Any]

# User callback — redirect resolver, props resolver, component factory
Callback: TypeAlias = Callable[..., Any]

# Deferred component loader (coroutine, task, future)
Deferred: TypeAlias = Awaitable[Any]

# Normalized field values as stored on configs and records
RedirectValue: TypeAlias = str | Mapping[str, Any] | Callback | None
PropsValue: TypeAlias = bool | Mapping[str, Any] | Callback
ComponentValue: TypeAlias = Callback | Deferred | bool
