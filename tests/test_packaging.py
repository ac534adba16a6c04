"""Packaging configuration tests."""

import tomllib
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


def test_wheel_includes_every_subpackage():
    setuptools = pytest.importorskip("setuptools")
    config = tomllib.loads((ROOT / "pyproject.toml").read_text())
    find = config["tool"]["setuptools"]["packages"]["find"]
    assert find.get("namespaces") is True

    packages = set(setuptools.find_namespace_packages(where=str(ROOT), include=find["include"]))
    expected = {
        ".".join(path.parent.relative_to(ROOT).parts)
        for path in (ROOT / "mesto").rglob("*.py")
        if "__pycache__" not in path.parts
    }
    assert expected <= packages
    assert {"mesto.api", "mesto.services"} <= packages
