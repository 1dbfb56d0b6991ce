from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def test_backend_modules_are_not_installed_top_level():
    setuptools = tomllib.loads(PYPROJECT.read_text())["tool"]["setuptools"]
    assert setuptools["packages"] == []
    assert setuptools["py-modules"] == []


def test_runtime_dependencies_are_declared():
    project = tomllib.loads(PYPROJECT.read_text())["project"]
    names = {dep.split(">")[0].split("=")[0] for dep in project["dependencies"]}
    assert {"fastapi", "uvicorn", "sqlalchemy", "pydantic"} <= names
    assert {"pytest", "httpx"} <= set(project["optional-dependencies"]["test"])
