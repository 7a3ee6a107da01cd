"""Blog — a route map mounted under a base path.

Every leaf is joined onto ``/blog``, including generated resources.
"""

from routemap import create_routes, resources

routes = create_routes(
    {
        "index": "/",
        "feed": {"method": "GET", "pattern": "/feed(.:format)"},
        "posts": resources("posts", param="slug"),
        "comments": resources("posts/:slug/comments", only=["create", "destroy"]),
    },
    base="blog",
)
