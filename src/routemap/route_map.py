"""RouteMap and the route-map composer.

A route map is an ordered, immutable tree of named routes::

    routes = create_routes({
        "home": "/",
        "login": {"method": "POST", "pattern": "/login"},
        "brands": {
            **resources("brands"),
            "products": resources("brands/:brandId/products"),
        },
    })

    routes.brands.products.show  # Route("GET", "/brands/:brandId/products/:id")

Every generator call is given its full base path. The composer never
copies a parent's path onto nested entries; the only prefixing it does
is the explicit ``base`` argument of :func:`create_routes`.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from routemap.errors import InvalidRouteDescriptor
from routemap.pattern import join_patterns
from routemap.route import ANY, Route

logger = logging.getLogger("routemap.route_map")

type RouteDefinition = str | Route | Mapping[str, Any]

_DESCRIPTOR_KEYS = frozenset({"method", "pattern"})


class RouteMap(Mapping[str, "Route | RouteMap"]):
    """An ordered, read-only mapping of names to routes or nested maps.

    Iteration follows insertion order. Entries are reachable both as
    items and as attributes (``routes["books"]["show"]`` or
    ``routes.books.show``). Names that collide with mapping methods
    (``items``, ``keys``, ``values``, ``get``) resolve to the method as
    attributes; reach those routes by item, ``routes["items"]``.

    Use ``|`` or ``{**a, **b}`` to combine maps; neither mutates its
    operands.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, "Route | RouteMap"] | None = None) -> None:
        checked: dict[str, Route | RouteMap] = {}
        for key, value in (entries or {}).items():
            if not isinstance(key, str):
                msg = f"Route map keys must be strings, got {key!r}"
                raise InvalidRouteDescriptor(msg, value=key)
            if not isinstance(value, (Route, RouteMap)):
                msg = f"Expected a Route or RouteMap, got {type(value).__name__}"
                raise InvalidRouteDescriptor(msg, path=key, value=value)
            checked[key] = value
        self._entries = checked

    def __getitem__(self, key: str) -> "Route | RouteMap":
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getattr__(self, name: str) -> "Route | RouteMap":
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._entries[name]
        except KeyError:
            msg = f"{type(self).__name__!r} object has no route named {name!r}"
            raise AttributeError(msg) from None

    def __or__(self, other: object) -> "RouteMap":
        if not isinstance(other, Mapping):
            return NotImplemented
        return RouteMap({**self._entries, **other})

    def __repr__(self) -> str:
        return f"RouteMap({self._entries!r})"


def _build(definition: object, path: str, base: str | None) -> Route | RouteMap:
    if isinstance(definition, Route):
        if base is None:
            return definition
        return Route(definition.method, join_patterns(base, definition.pattern))

    if isinstance(definition, str):
        pattern = definition if base is None else join_patterns(base, definition)
        return _route(ANY, pattern, path)

    if isinstance(definition, Mapping):
        if not isinstance(definition, RouteMap) and _is_descriptor(definition):
            pattern = _descriptor_pattern(definition, path)
            if base is not None:
                pattern = join_patterns(base, pattern)
            return _route(definition.get("method", ANY), pattern, path)
        return RouteMap(_build_entries(definition, path, base))

    msg = (
        "Expected a pattern string, a {'method', 'pattern'} descriptor, "
        f"a Route, or a nested mapping, got {type(definition).__name__}"
    )
    raise InvalidRouteDescriptor(msg, path=path, value=definition)


def _is_descriptor(definition: Mapping[str, Any]) -> bool:
    """A mapping with a string ``method`` or a string ``pattern`` describes one route."""
    return isinstance(definition.get("method"), str) or isinstance(definition.get("pattern"), str)


def _descriptor_pattern(definition: Mapping[str, Any], path: str) -> str:
    extra = set(definition) - _DESCRIPTOR_KEYS
    if extra:
        msg = f"Unexpected keys in route descriptor: {', '.join(sorted(map(str, extra)))}"
        raise InvalidRouteDescriptor(msg, path=path, value=definition)
    pattern = definition.get("pattern")
    if not isinstance(pattern, str):
        msg = f"Route descriptor needs a string pattern, got {pattern!r}"
        raise InvalidRouteDescriptor(msg, path=path, value=definition)
    return pattern


def _route(method: object, pattern: str, path: str) -> Route:
    try:
        return Route(method, pattern)  # type: ignore[arg-type]
    except InvalidRouteDescriptor as exc:
        raise InvalidRouteDescriptor(exc.detail, path=path, value=exc.value) from None


def _build_entries(
    tree: Mapping[Any, Any],
    prefix: str,
    base: str | None,
) -> dict[str, Route | RouteMap]:
    entries: dict[str, Route | RouteMap] = {}
    for key, definition in tree.items():
        if not isinstance(key, str):
            msg = f"Route names must be strings, got {key!r}"
            raise InvalidRouteDescriptor(msg, path=prefix or None, value=key)
        path = f"{prefix}.{key}" if prefix else key
        entries[key] = _build(definition, path, base)
    return entries


def create_routes(tree: Mapping[str, RouteDefinition], base: str | None = None) -> RouteMap:
    """Normalize a nested route definition into a :class:`RouteMap`.

    Leaves may be:

    - a pattern string (method ``ANY``)
    - a ``{"method": ..., "pattern": ...}`` descriptor (method defaults to ``ANY``)
    - a :class:`Route`, or a :class:`RouteMap` such as the output of
      ``resources()``

    A mapping with a string ``method`` or ``pattern`` is a descriptor and
    must have a string ``pattern`` and no other keys. Any other mapping
    is treated as a nested branch. Key order is kept.
    When *base* is given, every leaf pattern is joined onto it; otherwise
    patterns are stored verbatim, so running the composer on its own
    output returns an equal tree.

    Raises ``InvalidRouteDescriptor`` naming the dotted key path of the
    first leaf it cannot interpret. Nothing is returned on failure.
    """
    if not isinstance(tree, Mapping):
        msg = f"Expected a mapping of route definitions, got {type(tree).__name__}"
        raise InvalidRouteDescriptor(msg, value=tree)

    route_map = RouteMap(_build_entries(tree, "", base))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Composed route map with %d routes", sum(1 for _ in iter_routes(route_map)))
    return route_map


def iter_routes(route_map: Mapping[str, Any], prefix: str = "") -> Iterator[tuple[str, Route]]:
    """Yield ``(dotted_name, route)`` pairs depth-first in key order.

    Example::

        >>> list(iter_routes(create_routes({"api": {"ping": "/ping"}})))
        [('api.ping', Route(method='ANY', pattern='/ping'))]
    """
    for key, value in route_map.items():
        name = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Route):
            yield name, value
        else:
            yield from iter_routes(value, name)
