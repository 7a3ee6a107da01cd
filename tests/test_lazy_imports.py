"""Tests for routemap.__init__ — top-level names load their module on first use."""

import importlib
import os
import subprocess
import sys
from pathlib import Path

import pytest

import routemap

SRC = Path(__file__).resolve().parents[1] / "src"


class TestPublicNames:
    def test_registry_matches_all(self) -> None:
        assert sorted(routemap._LAZY_IMPORTS) == sorted(routemap.__all__)

    @pytest.mark.parametrize(("name", "module_path"), sorted(routemap._LAZY_IMPORTS.items()))
    def test_name_is_defined_by_its_module(self, name: str, module_path: str) -> None:
        module = importlib.import_module(module_path)
        assert name in vars(module)
        assert getattr(routemap, name) is vars(module)[name]

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="'routemap' has no attribute 'Router'"):
            routemap.Router  # noqa: B018


class TestImportCost:
    def test_bare_import_loads_no_submodules(self) -> None:
        """``import routemap`` stays free of kida and of the core modules."""
        script = (
            "import sys, routemap; "
            "print(sorted(m for m in sys.modules if m.startswith(('routemap.', 'kida'))))"
        )
        env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(SRC), os.environ.get("PYTHONPATH")]))}
        result = subprocess.run(
            [sys.executable, "-c", script], capture_output=True, text=True, env=env, check=True
        )
        assert result.stdout.strip() == "[]"
