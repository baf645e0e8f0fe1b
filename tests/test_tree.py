"""Tests for waypoint.routing.tree — tree assembly from nested prefabs."""

import pytest

from waypoint._internal.identity import CounterIdentity, RouteId
from waypoint.errors import InvalidConfig, RouteTreeError
from waypoint.routing.builder import build_config
from waypoint.routing.tree import attach_child, build_tree, walk

ROUTES = [
    {"path": "/", "name": "home"},
    {
        "path": "/teams",
        "name": "teams",
        "children": [
            {"path": ":team", "name": "team"},
            {"path": ":team/settings", "name": "settings", "children": [
                {"path": "billing", "name": "billing"},
            ]},
        ],
    },
]


class TestBuildTree:
    def test_roots_in_order(self) -> None:
        roots = build_tree(ROUTES)
        assert [r.name for r in roots] == ["home", "teams"]
        assert all(r.parent is None for r in roots)

    def test_children_wired(self) -> None:
        teams = build_tree(ROUTES)[1]
        team, settings = teams.children
        assert team.parent is teams
        assert settings.parent is teams
        assert settings.children[0].name == "billing"
        assert settings.children[0].lineage() == [teams, settings, settings.children[0]]

    def test_walk_depth_first(self) -> None:
        names = [c.name for c in walk(build_tree(ROUTES))]
        assert names == ["home", "teams", "team", "settings", "billing"]

    def test_injected_identity(self) -> None:
        roots = build_tree([{"path": "/", "children": [{"path": "a"}]}], identity=CounterIdentity(1))
        assert roots[0].id == RouteId(1)
        assert roots[0].children[0].id == RouteId(2)

    def test_invalid_child_raises(self) -> None:
        with pytest.raises(InvalidConfig) as exc_info:
            build_tree([{"path": "/", "children": [{"path": "ok"}, {"path": 3}]}])
        assert exc_info.value.field == "path"

    def test_invalid_children_shape(self) -> None:
        with pytest.raises(InvalidConfig) as exc_info:
            build_tree([{"path": "/", "children": "nope"}])
        assert exc_info.value.field == "children"

    def test_prefabs_untouched(self) -> None:
        build_tree(ROUTES)
        assert ROUTES[1]["children"][0] == {"path": ":team", "name": "team"}


class TestAttachChild:
    def test_attach(self) -> None:
        parent, child = build_config({"path": "/"}), build_config({"path": "a"})
        attach_child(parent, child)
        assert child.parent is parent
        assert parent.children == [child]

    def test_self_cycle(self) -> None:
        config = build_config({"path": "/"})
        with pytest.raises(RouteTreeError, match="cycle"):
            attach_child(config, config)

    def test_ancestor_cycle(self) -> None:
        root, child = build_config({"path": "/"}), build_config({"path": "a"})
        attach_child(root, child)
        with pytest.raises(RouteTreeError, match="cycle"):
            attach_child(child, root)

    def test_reparent_rejected(self) -> None:
        first, second, child = (build_config({"path": p}) for p in ("/a", "/b", "c"))
        attach_child(first, child)
        with pytest.raises(RouteTreeError, match="already has parent"):
            attach_child(second, child)
        assert second.children == []
