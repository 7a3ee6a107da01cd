"""Route — an immutable (method, pattern) pair."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import urlencode

from routemap.errors import InvalidRouteDescriptor
from routemap.pattern import format_pattern

type RequestMethod = Literal[
    "GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "CONNECT", "TRACE", "ANY"
]

# Wildcard method: the route matches a request with any method
ANY = "ANY"

METHODS: frozenset[str] = frozenset(
    {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "CONNECT", "TRACE", ANY}
)


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Two routes are equal when their method and pattern are equal::

        Route("GET", "/books/:id") == Route("get", "/books/:id")  # True

    The method is upper-cased on construction. Routes are built by the
    resource generators and the composer, and consumed by a router and by
    link-generation call sites through :meth:`href`.
    """

    method: RequestMethod
    pattern: str

    def __post_init__(self) -> None:
        if not isinstance(self.method, str) or self.method.upper() not in METHODS:
            msg = f"Unknown request method {self.method!r}"
            raise InvalidRouteDescriptor(msg, value=self.method)
        if not isinstance(self.pattern, str) or not self.pattern:
            msg = f"Route pattern must be a non-empty string, got {self.pattern!r}"
            raise InvalidRouteDescriptor(msg, value=self.pattern)
        object.__setattr__(self, "method", self.method.upper())

    def href(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        search: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        base: str | None = None,
    ) -> str:
        """Build a link to this route.

        Examples::

            >>> Route("GET", "/books/:id").href({"id": 42})
            '/books/42'
            >>> Route("GET", "/books").href(search={"page": 2})
            '/books?page=2'
            >>> Route("GET", "/books/:id").href({"id": 1}, base="https://shop.example")
            'https://shop.example/books/1'

        Raises ``InvalidParams`` if a required placeholder has no value.
        """
        path = format_pattern(self.pattern, params)
        if base and "://" not in path:
            path = base.rstrip("/") + "/" + path.lstrip("/")
        if search:
            query = urlencode(search, doseq=True)
            if query:
                path = f"{path}?{query}"
        return path

    def __str__(self) -> str:
        return f"{self.method} {self.pattern}"
