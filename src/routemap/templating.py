"""Kida template helpers for link generation.

Exposes a route map to templates as a global and registers filters that
turn routes into links and form attributes::

    from kida import Environment
    from routemap.templating import register_routes

    env = Environment()
    register_routes(env, routes)

    <a href="{{ routes.books.show | href(id=book.id) }}">{{ book.title }}</a>
    <form method="{{ routes.books.create | form_method }}"
          action="{{ routes.books.create | href }}">

Requires ``pip install routemap[templates]``.
"""

from typing import Any

from kida import Environment

from routemap.route import Route
from routemap.route_map import RouteMap


def href(route: Route, **params: Any) -> str:
    """Build a link from a route and keyword params.

    A ``search`` keyword, when given, is appended as the query string.

    Example:
        {{ routes.books.index | href(search={"page": 2}) }}
        → "/books?page=2"
    """
    search = params.pop("search", None)
    return route.href(params, search=search)


def form_method(route: Route) -> str:
    """Return the HTML form method for a route.

    HTML forms only submit GET and POST; every other method is sent as
    POST and left to a method-override layer on the server.

    Example:
        <form method="{{ routes.books.update | form_method }}">
        → <form method="post">
    """
    return "get" if route.method == "GET" else "post"


# All routemap filters, registered by register_routes().
ROUTE_FILTERS: dict[str, Any] = {
    "form_method": form_method,
    "href": href,
}


def register_routes(env: Environment, routes: RouteMap, *, name: str = "routes") -> Environment:
    """Expose *routes* as the template global *name* and install the route filters.

    Returns *env* so calls can be chained during setup.
    """
    env.update_filters(ROUTE_FILTERS)
    env.add_global(name, routes)
    return env
