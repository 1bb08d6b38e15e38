"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pathsearch

ROOT = Path(__file__).resolve().parents[1]


def _load_pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def _requirement_name(requirement: str) -> str:
    for separator in ("[", ">", "<", "=", "~", "!", ";", " "):
        requirement = requirement.split(separator, 1)[0]
    return requirement.strip().lower()


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    project = pyproject["project"]

    assert project["name"] == "pathsearch"
    assert project["version"] == pathsearch.__version__

    dependencies = {_requirement_name(item) for item in project["dependencies"]}
    for dependency in ("pydantic", "networkx", "platformdirs", "rich"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"

    test_extra = {_requirement_name(item) for item in project["optional-dependencies"]["test"]}
    assert "pytest" in test_extra


def test_public_names_are_exported() -> None:
    for name in pathsearch.__all__:
        assert hasattr(pathsearch, name), name
    assert callable(pathsearch.astar)
