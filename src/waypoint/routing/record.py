"""Record factory — resolves a matched config's parameters.

Raw parameters come from the matcher either as positional captures
(``re.Match`` or a sequence whose item 0 is the whole match) or as a
named mapping. The shape is inspected once per record.
"""

from collections.abc import Sequence
from typing import Any

from waypoint.config import DEFAULT_CONFIG
from waypoint.routing.params import CoercionPolicy, extract_params
from waypoint.routing.route import Record, RouteConfig


def build_record(
    config: RouteConfig,
    raw_params: Any,
    *,
    coercion: CoercionPolicy | None = None,
) -> Record:
    """Create the record for *config* matched with *raw_params*.

    Examples::

        # config.param_keys == ["id", "slug"]
        build_record(config, ["/u/42/abc", "42", "abc"]).params
        -> {"id": 42, "slug": "abc"}
        build_record(config, {"id": "42", "other": "x"}).params
        -> {"id": 42}

    Missing values are left out of ``params``; keys that are not declared
    in ``param_keys`` are ignored.
    """
    policy = coercion or DEFAULT_CONFIG.coercion
    return Record(
        id=config.id,
        path=config.path,
        name=config.name,
        redirect=config.redirect,
        component=config.component or False,
        is_async=config.is_async,
        meta=config.meta,
        props=config.props,
        params=extract_params(config.param_keys, raw_params, policy),
    )


def build_matched(
    configs: Sequence[RouteConfig],
    raw_params: Any,
    *,
    coercion: CoercionPolicy | None = None,
) -> list[Record]:
    """Build one record per config of a matched stack, root to leaf.

    Every level reads from the same *raw_params*; each keeps only the
    keys its own config declares.
    """
    return [build_record(config, raw_params, coercion=coercion) for config in configs]
