"""Path parameter extraction and numeric coercion.

Captured path segments arrive as strings. Values that look like whole
or floating numbers become ``int`` / ``float``; everything else passes
through untouched. Coercion is syntactic and never raises.
"""

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from waypoint._internal.types import ParamValue

# Digits are spelled [0-9]: ``\d`` also matches non-ASCII digits.
WHOLE_NUMBER = re.compile(r"[+-]?(?:0|[1-9][0-9]*)")
FLOAT_NUMBER = re.compile(r"[+-]?(?:0|[1-9][0-9]*)\.[0-9]+")

# Relaxed grammars that accept leading zeros ("007", "00.5")
WHOLE_NUMBER_ZEROS = re.compile(r"[+-]?[0-9]+")
FLOAT_NUMBER_ZEROS = re.compile(r"[+-]?[0-9]+\.[0-9]+")

# Sentinel for "no value at this position/key"
MISSING: Any = object()

# Looks up the raw value for (param index, param name)
ParamGetter = Callable[[int, str], Any]


@dataclass(frozen=True, slots=True)
class CoercionPolicy:
    """How captured strings turn into numbers.

    ``enabled=False`` keeps every captured value as a string.
    ``allow_leading_zeros=True`` treats ``"007"`` as ``7``.
    """

    enabled: bool = True
    allow_leading_zeros: bool = False


DEFAULT_POLICY = CoercionPolicy()


def is_whole_number(value: str, *, allow_leading_zeros: bool = False) -> bool:
    """Return True if *value* is an optionally signed integer literal."""
    pattern = WHOLE_NUMBER_ZEROS if allow_leading_zeros else WHOLE_NUMBER
    return pattern.fullmatch(value) is not None


def is_float_number(value: str, *, allow_leading_zeros: bool = False) -> bool:
    """Return True if *value* is an optionally signed ``digits.digits`` literal.

    Exponents (``1e5``), bare fractions (``.5``) and trailing dots (``5.``)
    do not qualify.
    """
    pattern = FLOAT_NUMBER_ZEROS if allow_leading_zeros else FLOAT_NUMBER
    return pattern.fullmatch(value) is not None


def coerce_value(value: Any, policy: CoercionPolicy = DEFAULT_POLICY) -> Any:
    """Convert a captured value to a number when it reads as one.

    Examples::

        coerce_value("42")      -> 42
        coerce_value("-0.5")    -> -0.5
        coerce_value("007")     -> "007"
        coerce_value("3.14.15") -> "3.14.15"
        coerce_value(7)         -> 7
    """
    if isinstance(value, (int, float)) or not isinstance(value, str):
        return value
    if not policy.enabled:
        return value
    zeros = policy.allow_leading_zeros
    # int() refuses digit strings past sys.get_int_max_str_digits()
    try:
        if is_whole_number(value, allow_leading_zeros=zeros):
            return int(value)
        if is_float_number(value, allow_leading_zeros=zeros):
            return float(value)
    except ValueError:
        return value
    return value


def _positional_getter(captures: Sequence[Any]) -> ParamGetter:
    """Capture 0 is the whole match; param *i* reads capture *i + 1*."""

    def get(index: int, key: str) -> Any:
        position = index + 1
        if position < len(captures):
            return captures[position]
        return MISSING

    return get


def _named_getter(values: Mapping[str, Any]) -> ParamGetter:
    def get(index: int, key: str) -> Any:
        return values.get(key, MISSING)

    return get


def select_getter(raw_params: Any) -> ParamGetter:
    """Pick the extraction strategy for *raw_params* once per record.

    ``re.Match`` and non-string sequences are positional captures,
    mappings are named values. Anything else extracts nothing.
    """
    if isinstance(raw_params, re.Match):
        return _positional_getter([raw_params.group(0), *raw_params.groups()])
    if isinstance(raw_params, Mapping):
        return _named_getter(raw_params)
    if isinstance(raw_params, Sequence) and not isinstance(raw_params, (str, bytes)):
        return _positional_getter(raw_params)
    return _named_getter({})


def extract_params(
    param_keys: Sequence[str],
    raw_params: Any,
    policy: CoercionPolicy = DEFAULT_POLICY,
) -> dict[str, ParamValue]:
    """Resolve *param_keys* against *raw_params* in declaration order.

    Missing and ``None`` values are omitted from the result.
    """
    get = select_getter(raw_params)
    params: dict[str, ParamValue] = {}
    for index, key in enumerate(param_keys):
        raw = get(index, key)
        if raw is MISSING or raw is None:
            continue
        params[key] = coerce_value(raw, policy)
    return params
