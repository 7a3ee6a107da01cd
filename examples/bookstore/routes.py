"""Bookstore — nested collections, singleton resources, and plain routes.

List the routes with::

    PYTHONPATH=examples/bookstore routemap routes routes
"""

from routemap import create_routes, resource, resources

routes = create_routes(
    {
        "home": {"method": "GET", "pattern": "/"},
        "search": {"method": "GET", "pattern": "/search"},
        "assets": "/assets/*path",
        "books": resources("books", param="slug"),
        "brands": {
            **resources("brands", only=["index", "show"]),
            "products": resources("brands/:brandId/products", names={"index": "list"}),
        },
        "account": {
            **resource("account", only=["show", "edit", "update"]),
            "session": resource("account/session", only=["new", "create", "destroy"], names={"new": "login"}),
        },
    }
)
