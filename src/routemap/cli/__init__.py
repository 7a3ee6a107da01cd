"""routemap CLI — inspect route maps and preview resource routes.

Entry point registered as ``routemap`` in ``pyproject.toml``::

    [project.scripts]
    routemap = "routemap.cli:main"
"""

import argparse
import sys

from routemap.generators import RESOURCES_ACTIONS


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routemap`` command."""
    parser = argparse.ArgumentParser(
        prog="routemap",
        description="routemap — declarative route maps for web applications.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routemap routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes of a route map")
    routes_parser.add_argument(
        "target",
        help="Import string (e.g. myapp.urls:routes)",
    )

    # -- routemap resource ------------------------------------------------
    resource_parser = subparsers.add_parser(
        "resource", help="Preview the routes generated for a resource"
    )
    resource_parser.add_argument("base", help="Base path (e.g. books or brands/:brandId/products)")
    resource_parser.add_argument(
        "--collection",
        action="store_true",
        help="Generate collection routes (index + member actions)",
    )
    resource_parser.add_argument(
        "--only",
        nargs="+",
        choices=RESOURCES_ACTIONS,
        default=None,
        metavar="ACTION",
        help="Only generate these actions",
    )
    resource_parser.add_argument(
        "--param",
        default="id",
        help="Member identifier placeholder (collection only, default: id)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from routemap.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resource":
        from routemap.cli._routes import run_resource

        run_resource(args)
