"""Fixtures for the routemap example route maps.

Each example directory holds a ``routes.py`` defining a module-level
``routes`` map and a test module beside it. ``example_routes`` executes
that ``routes.py`` under a private module name so examples never share
import state, and hands the test the resulting ``RouteMap``.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_routes(request: pytest.FixtureRequest):
    """The ``routes`` map defined next to the requesting test."""
    source = Path(request.path).with_name("routes.py")
    loader_spec = importlib.util.spec_from_file_location(f"routemap_example_{source.parent.name}", source)
    assert loader_spec is not None and loader_spec.loader is not None
    namespace = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(namespace)
    return namespace.routes
