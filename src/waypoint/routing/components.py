"""Component resolution for a matched route.

Deferred loaders of every matched record are awaited concurrently
(anyio task group); factories are handed back untouched. Results keep
the order of ``route.matched``::

    components = await resolve_components(route)
    # [LayoutView, UserView]
"""

import logging
from typing import Any

import anyio

from waypoint.routing.route import Route
from waypoint.routing.variants import load_component

logger = logging.getLogger("waypoint.routing")


async def resolve_components(route: Route) -> list[Any]:
    """Load the component of every record in ``route.matched``.

    Config-only records yield ``None``. If a deferred loader fails, the
    error is logged and re-raised (wrapped in an exception group by anyio).
    """
    results: list[Any] = [None] * len(route.matched)

    async def _resolve(index: int) -> None:
        record = route.matched[index]
        try:
            results[index] = await load_component(record.component)
        except Exception:
            logger.exception("Failed to load component for route %r", record.path)
            raise

    async with anyio.create_task_group() as tg:
        for index, record in enumerate(route.matched):
            if record.is_async:
                tg.start_soon(_resolve, index)
            else:
                results[index] = await load_component(record.component)

    return results
