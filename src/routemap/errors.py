"""routemap exception hierarchy.

Shared across Route, the resource generators, the composer, and the
pattern formatter so every module raises and catches the same types.
"""

from typing import Any


class RouteMapError(Exception):
    """Base for all routemap-specific errors."""


class ConfigurationError(RouteMapError):
    """Raised when resource options are malformed.

    A programming error: it surfaces the first time the offending
    generator call runs, before any route map is returned.
    """


class InvalidRouteDescriptor(RouteMapError):
    """A route definition is not a shape the composer understands.

    ``path`` is the dotted key path of the offending entry inside the
    route tree (``None`` when a ``Route`` is constructed directly).
    """

    def __init__(self, detail: str, *, path: str | None = None, value: Any = None) -> None:
        self.detail = detail
        self.path = path
        self.value = value
        super().__init__(f"{path}: {detail}" if path else detail)


class InvalidPattern(RouteMapError):
    """A path pattern cannot be parsed (e.g. unbalanced optional group)."""

    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid pattern {pattern!r}: {detail}")


class InvalidParams(RouteMapError):
    """``href()`` was called without a value for a required placeholder."""

    def __init__(self, pattern: str, missing: tuple[str, ...]) -> None:
        self.pattern = pattern
        self.missing = missing
        names = ", ".join(repr(name) for name in missing)
        super().__init__(f"Missing params for {pattern!r}: {names}")
