"""routemap — declarative route maps for web applications.

Describe routes once as a nested, typed tree; hand the leaves to a
router for matching and use them everywhere else to build links.

Basic usage::

    from routemap import create_routes, resources

    routes = create_routes({
        "home": "/",
        "books": resources("books"),
    })

    routes.books.show            # Route(method='GET', pattern='/books/:id')
    routes.books.show.href({"id": 42})   # '/books/42'

Template helpers (``pip install routemap[templates]``)::

    from routemap.templating import register_routes
    register_routes(env, routes)
    # {{ routes.books.show | href(id=book.id) }}
"""

__version__ = "0.1.0"
__all__ = [
    "ANY",
    "ConfigurationError",
    "InvalidParams",
    "InvalidPattern",
    "InvalidRouteDescriptor",
    "RESOURCES_ACTIONS",
    "RESOURCE_ACTIONS",
    "ResourceOptions",
    "Route",
    "RouteMap",
    "RouteMapError",
    "create_routes",
    "iter_routes",
    "resource",
    "resources",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ANY": "routemap.route",
    "Route": "routemap.route",
    "RouteMap": "routemap.route_map",
    "create_routes": "routemap.route_map",
    "iter_routes": "routemap.route_map",
    "RESOURCE_ACTIONS": "routemap.generators",
    "RESOURCES_ACTIONS": "routemap.generators",
    "resource": "routemap.generators",
    "resources": "routemap.generators",
    "ResourceOptions": "routemap.config",
    "ConfigurationError": "routemap.errors",
    "InvalidParams": "routemap.errors",
    "InvalidPattern": "routemap.errors",
    "InvalidRouteDescriptor": "routemap.errors",
    "RouteMapError": "routemap.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routemap`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
