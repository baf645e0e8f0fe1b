"""Route table import resolution — resolves ``"module:attribute"`` strings.

Used by ``waypoint check`` to locate the prefab list of an application.
"""

import importlib
from collections.abc import Mapping, Sequence
from typing import Any


def resolve_routes(import_string: str) -> Sequence[Mapping[str, Any]]:
    """Resolve an import string to a sequence of route prefabs.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"routes"`` (e.g. ``"myapp"`` resolves to
    ``myapp.routes``).

    Supports factory functions: if the resolved object is callable, it
    is called with no arguments and its result is used.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a sequence.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Sequence) or isinstance(obj, str):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a sequence of route prefabs"
        raise TypeError(msg)

    return obj
