"""RESTful route generators for singleton and collection resources.

``resource("profile")`` describes one addressable thing, while
``resources("books")`` describes a collection of them::

    books = resources("books", only=["index", "show"], param="slug")
    books["index"]  # Route("GET", "/books")
    books["show"]   # Route("GET", "/books/:slug")

Key order is observable: actions are always emitted in canonical order
(``new`` before ``show``), filtered by ``only`` and relabeled by ``names``.
"""

import logging
from collections.abc import Mapping
from typing import Any, Literal

from routemap.config import ResourceOptions
from routemap.errors import ConfigurationError
from routemap.pattern import join_patterns
from routemap.route import Route
from routemap.route_map import RouteMap

logger = logging.getLogger("routemap.generators")

type ActionName = Literal["index", "new", "show", "create", "edit", "update", "destroy"]

# Canonical emission order
RESOURCE_ACTIONS: tuple[ActionName, ...] = ("new", "show", "create", "edit", "update", "destroy")
RESOURCES_ACTIONS: tuple[ActionName, ...] = ("index", *RESOURCE_ACTIONS)

# action -> (method, pattern relative to the base path)
_SINGLETON_ROUTES: dict[str, tuple[str, str]] = {
    "new": ("GET", "new"),
    "show": ("GET", ""),
    "create": ("POST", ""),
    "edit": ("GET", "edit"),
    "update": ("PUT", ""),
    "destroy": ("DELETE", ""),
}


def _collection_routes(param: str) -> dict[str, tuple[str, str]]:
    member = f":{param}"
    return {
        "index": ("GET", ""),
        "new": ("GET", "new"),
        "show": ("GET", member),
        "create": ("POST", ""),
        "edit": ("GET", f"{member}/edit"),
        "update": ("PUT", member),
        "destroy": ("DELETE", member),
    }


def _warn_unknown(base: str, options: ResourceOptions, actions: tuple[str, ...]) -> None:
    """Log action names in ``only``/``names`` that the generator does not know."""
    known = set(actions)
    for option, names in (("only", options.only or ()), ("names", options.names)):
        for name in names:
            if name not in known:
                logger.warning("Ignoring unknown action %r in %s for resource %r", name, option, base)


def _build(
    base: str,
    options: ResourceOptions,
    actions: tuple[str, ...],
    table: dict[str, tuple[str, str]],
) -> RouteMap:
    _warn_unknown(base, options, actions)

    entries: dict[str, Route] = {}
    for action in options.selects(actions):
        key = options.names.get(action, action)
        if key in entries:
            msg = f"Resource {base!r}: action {action!r} renamed to {key!r}, which is already taken"
            raise ConfigurationError(msg)
        method, suffix = table[action]
        entries[key] = Route(method, join_patterns(base, suffix))
    return RouteMap(entries)


def resource(
    base: str,
    options: ResourceOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> RouteMap:
    """Generate the routes of a singleton resource.

    ========  ======  ==============
    action    method  pattern
    ========  ======  ==============
    new       GET     ``/base/new``
    show      GET     ``/base``
    create    POST    ``/base``
    edit      GET     ``/base/edit``
    update    PUT     ``/base``
    destroy   DELETE  ``/base``
    ========  ======  ==============

    Accepts ``only`` and ``names`` either as a :class:`ResourceOptions`,
    a plain mapping, or keyword arguments. ``param`` is accepted and
    ignored: a singleton has no member identifier. There is never an
    ``index`` action.
    """
    opts = ResourceOptions.coerce(options, kwargs)
    return _build(base, opts, RESOURCE_ACTIONS, _SINGLETON_ROUTES)


def resources(
    base: str,
    options: ResourceOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> RouteMap:
    """Generate the routes of a collection resource.

    =======  ======  =======================
    action   method  pattern
    =======  ======  =======================
    index    GET     ``/base``
    new      GET     ``/base/new``
    show     GET     ``/base/:param``
    create   POST    ``/base``
    edit     GET     ``/base/:param/edit``
    update   PUT     ``/base/:param``
    destroy  DELETE  ``/base/:param``
    =======  ======  =======================

    ``param`` defaults to ``"id"``. Nested collections take their full
    base path from the caller, e.g. ``resources("brands/:brandId/products")``.
    """
    opts = ResourceOptions.coerce(options, kwargs)
    return _build(base, opts, RESOURCES_ACTIONS, _collection_routes(opts.param))
