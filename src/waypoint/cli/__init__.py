"""Waypoint CLI — route table validation.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import logging
import sys

from waypoint.config import DEFAULT_CONFIG


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — the route-modeling core of a client-side router.",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_CONFIG.log_level,
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a route table")
    check_parser.add_argument(
        "routes",
        help="Import string (e.g. myapp.routes:ROUTES)",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from waypoint.cli._check import run_check

        run_check(args)
