"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexfield


def _load_pyproject() -> dict:
    with (Path(__file__).resolve().parents[1] / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "hexfield"
    assert poetry["version"] == hexfield.__version__
    assert poetry["scripts"]["hexfield"] == "hexfield.__main__:main"

    dependencies = poetry["dependencies"]
    for dependency in ("textual", "rich", "pydantic", "platformdirs"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"
