"""``routemap routes`` and ``routemap resource`` — print route tables."""

import argparse
import sys

from routemap.cli._resolve import resolve_routes
from routemap.errors import RouteMapError
from routemap.generators import resource, resources
from routemap.route_map import RouteMap, iter_routes


def print_table(route_map: RouteMap) -> None:
    """Print a NAME / METHOD / PATTERN table in route map order."""
    rows = [(name, route.method, route.pattern) for name, route in iter_routes(route_map)]
    if not rows:
        print("No routes defined.")
        return

    # Column widths
    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_method = max(max(len(r[1]) for r in rows), 6)  # "METHOD" header

    fmt = f"{{:<{max_name}}}  {{:<{max_method}}}  {{}}"
    print(fmt.format("NAME", "METHOD", "PATTERN"))
    sep_len = max_name + max_method + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for name, method, pattern in rows:
        print(fmt.format(name, method, pattern))


def run_routes(args: argparse.Namespace) -> None:
    """List the routes of an application's route map.

    Resolves ``args.target`` to a RouteMap and prints every route with
    its dotted name, method, and pattern.
    """
    try:
        route_map = resolve_routes(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError, RouteMapError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print_table(route_map)


def run_resource(args: argparse.Namespace) -> None:
    """Preview the routes a resource generator produces for ``args.base``."""
    if args.collection:
        route_map = resources(args.base, only=args.only, param=args.param)
    else:
        route_map = resource(args.base, only=args.only)
    print_table(route_map)
