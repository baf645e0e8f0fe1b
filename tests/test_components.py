"""Tests for waypoint.routing.components — concurrent component loading."""

import logging
from typing import Any

import anyio
import pytest

from waypoint.routing.assembler import build_route
from waypoint.routing.builder import build_config
from waypoint.routing.components import resolve_components
from waypoint.routing.location import Location
from waypoint.routing.record import build_matched
from waypoint.routing.route import Route


class Layout:
    pass


class Page:
    pass


def _route(*prefabs: dict[str, Any]) -> Route:
    configs = [build_config(p) for p in prefabs]
    return build_route(Location("/"), build_matched(configs, {}))


async def _module(view: type, delay: float = 0) -> dict[str, Any]:
    await anyio.sleep(delay)
    return {"default": view}


class TestResolveComponents:
    @pytest.mark.anyio
    async def test_factories_and_none(self) -> None:
        route = _route({"path": "/"}, {"path": "/page", "component": Page})
        assert await resolve_components(route) == [None, Page]

    @pytest.mark.anyio
    async def test_deferred_keep_matched_order(self) -> None:
        route = _route(
            {"path": "/", "component": _module(Layout, delay=0.02)},
            {"path": "/page", "component": _module(Page)},
        )
        assert await resolve_components(route) == [Layout, Page]

    @pytest.mark.anyio
    async def test_placeholder(self) -> None:
        assert await resolve_components(Route()) == []

    @pytest.mark.anyio
    async def test_failure_logged_and_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        async def broken() -> None:
            raise ImportError("no such view")

        route = _route({"path": "/broken", "component": broken()})
        with caplog.at_level(logging.ERROR, logger="waypoint.routing"):
            with pytest.raises(ExceptionGroup) as exc_info:
                await resolve_components(route)

        assert exc_info.group_contains(ImportError, match="no such view")
        assert "/broken" in caplog.text
