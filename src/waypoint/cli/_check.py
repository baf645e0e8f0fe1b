"""``waypoint check`` — route table validation command.

Resolves an import string to a list of route prefabs, builds the config
tree, and prints a table of the normalized routes. Exits with code 1 if
the table cannot be loaded or a prefab is invalid.
"""

import argparse
import logging
import sys

from waypoint.cli._resolve import resolve_routes
from waypoint.errors import WaypointError
from waypoint.routing.route import RouteConfig
from waypoint.routing.tree import build_tree, walk
from waypoint.routing.variants import component_kind, props_kind, redirect_kind

logger = logging.getLogger("waypoint.cli")


def _depth(config: RouteConfig) -> int:
    return sum(1 for _ in config.ancestors())


def _row(config: RouteConfig) -> tuple[str, str, str, str, str]:
    return (
        config.name or "-",
        "  " * _depth(config) + config.path,
        component_kind(config.component).value,
        redirect_kind(config.redirect).value,
        props_kind(config.props).value,
    )


def run_check(args: argparse.Namespace) -> None:
    """Validate the route table named by ``args.routes`` and print it."""
    try:
        prefabs = resolve_routes(args.routes)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        roots = build_tree(prefabs)
    except WaypointError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows = [_row(config) for config in walk(roots)]
    logger.debug("Built %d route configs from %s", len(rows), args.routes)
    if not rows:
        print("No routes declared.")
        return

    headers = ("NAME", "PATH", "COMPONENT", "REDIRECT", "PROPS")
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers)]
    fmt = "  ".join(f"{{:<{w}}}" for w in widths)
    print(fmt.format(*headers))
    print("-" * min(sum(widths) + 2 * (len(widths) - 1), 80))
    for row in rows:
        print(fmt.format(*row).rstrip())
