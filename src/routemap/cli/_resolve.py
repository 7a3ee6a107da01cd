"""Route map import resolution — resolves ``"module:attribute"`` strings.

Used by ``routemap routes`` to locate an application's route map from a
user-supplied import string.
"""

import importlib
from collections.abc import Mapping

from routemap.route_map import RouteMap, create_routes


def resolve_routes(import_string: str) -> RouteMap:
    """Resolve an import string to a :class:`RouteMap`.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"routes"`` (e.g. ``"myapp.urls"`` resolves
    to ``myapp.urls.routes``).

    The resolved object may be a ``RouteMap``, a plain mapping of route
    definitions (composed with ``create_routes``), or a zero-argument
    factory returning either.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a route map or mapping.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # Support factory functions - call them if they're not already a mapping
    if callable(obj) and not isinstance(obj, Mapping):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, RouteMap):
        return obj
    if isinstance(obj, Mapping):
        return create_routes(obj)

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a route map"
    raise TypeError(msg)
