"""Tests for waypoint.routing.record — the record factory."""

import re

from waypoint.routing.builder import build_config
from waypoint.routing.params import CoercionPolicy
from waypoint.routing.record import build_matched, build_record
from waypoint.routing.route import RouteConfig


def _redirect(to: object) -> str:
    return "/elsewhere"


def _props(route: object) -> dict[str, str]:
    return {}


def _config(path: str = "/u/:id/:slug", keys: tuple[str, ...] = ("id", "slug")) -> RouteConfig:
    config = build_config({
        "path": path,
        "name": "user",
        "meta": {"auth": True},
        "redirect": _redirect,
        "props": _props,
    })
    config.param_keys = list(keys)
    return config


class TestSnapshot:
    def test_copies_descriptive_fields(self) -> None:
        config = _config()
        record = build_record(config, [])

        assert record.id == config.id
        assert record.name == "user"
        assert record.path == "/u/:id/:slug"
        assert record.redirect is _redirect
        assert record.props is _props
        assert record.meta is config.meta
        assert record.component is False
        assert record.is_async is False

    def test_config_not_mutated(self) -> None:
        config = _config()
        build_record(config, {"id": "1", "slug": "x"})
        assert config.param_keys == ["id", "slug"]
        assert config.children == []


class TestPositional:
    def test_captures_in_key_order(self) -> None:
        record = build_record(_config(), ["/u/42/abc", "42", "abc"])
        assert record.params == {"id": 42, "slug": "abc"}

    def test_short_capture_list_omits(self) -> None:
        record = build_record(_config(), ["/u/42", "42"])
        assert record.params == {"id": 42}

    def test_regex_match(self) -> None:
        match = re.fullmatch(r"/u/([^/]+)/([^/]+)", "/u/3.5/007")
        record = build_record(_config(), match)
        assert record.params == {"id": 3.5, "slug": "007"}


class TestNamed:
    def test_missing_key_omitted_and_extra_ignored(self) -> None:
        record = build_record(_config(), {"id": "42", "other": "x"})
        assert record.params == {"id": 42}

    def test_none_omitted(self) -> None:
        record = build_record(_config(), {"id": None, "slug": "abc"})
        assert record.params == {"slug": "abc"}


class TestOversizedCapture:
    def test_long_digit_segment_stays_string(self) -> None:
        digits = "1" * 5000
        config = _config("/n/:id", ("id",))
        record = build_record(config, ["/n/" + digits, digits])
        assert record.params == {"id": digits}


class TestCoercionPolicy:
    def test_disabled(self) -> None:
        record = build_record(_config(), ["/u/42/abc", "42", "abc"], coercion=CoercionPolicy(enabled=False))
        assert record.params == {"id": "42", "slug": "abc"}

    def test_leading_zeros(self) -> None:
        record = build_record(
            _config(), {"id": "007"}, coercion=CoercionPolicy(allow_leading_zeros=True)
        )
        assert record.params == {"id": 7}


class TestFreshParams:
    def test_each_record_owns_params(self) -> None:
        config = _config()
        first = build_record(config, {"id": "1"})
        second = build_record(config, {"id": "1"})
        assert first.params == second.params
        assert first.params is not second.params


class TestBuildMatched:
    def test_one_record_per_level(self) -> None:
        parent = _config("/teams/:team", ("team",))
        child = _config("/teams/:team/members/:id", ("team", "id"))

        records = build_matched([parent, child], {"team": "core", "id": "9"})

        assert [r.id for r in records] == [parent.id, child.id]
        assert records[0].params == {"team": "core"}
        assert records[1].params == {"team": "core", "id": 9}

    def test_empty_stack(self) -> None:
        assert build_matched([], {}) == []
