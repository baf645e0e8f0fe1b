"""Navigation location and URL composition.

``Location`` is produced by the history collaborator; the core only
reads it. ``full_url`` rebuilds the absolute URL of a route snapshot.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote


class HistoryAction(Enum):
    """How a navigation was triggered."""

    PUSH = "push"
    REPLACE = "replace"
    POP = "pop"


@dataclass(frozen=True, slots=True)
class Location:
    """A navigation target: path without query or hash, plus its parts.

    ``query`` keeps insertion order. A value may be a sequence of strings
    for repeated keys.
    """

    path: str
    hash: str = ""
    query: Mapping[str, Any] = field(default_factory=dict)
    action: HistoryAction = HistoryAction.PUSH


def _query_pairs(query: Mapping[str, Any]) -> list[str]:
    pairs: list[str] = []
    for key, value in query.items():
        values = value if isinstance(value, Sequence) and not isinstance(value, str) else (value,)
        for item in values:
            pairs.append(f"{quote(str(key), safe='')}={quote(str(item), safe='')}")
    return pairs


def full_url(path: str, query: Mapping[str, Any], hash: str = "") -> str:
    """Compose *path*, *query* and *hash* into one URL.

    Examples::

        full_url("/users", {}, "")                      -> "/users"
        full_url("/users", {"page": "2", "q": "a b"}, "") -> "/users?page=2&q=a%20b"
        full_url("/docs", {"tag": ["x", "y"]}, "intro")  -> "/docs?tag=x&tag=y#intro"
    """
    url = path
    pairs = _query_pairs(query)
    if pairs:
        url += "?" + "&".join(pairs)
    fragment = hash.removeprefix("#")
    if fragment:
        url += "#" + fragment
    return url
