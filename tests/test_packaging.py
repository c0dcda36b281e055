"""Tests for the installable package metadata."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def load_project():
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]


def test_long_description_is_not_a_design_document():
    readme = load_project().get("readme")
    assert readme is None or Path(str(readme)).name not in {"SPEC_FULL.md", "DESIGN.md"}


def test_runtime_dependencies_declared():
    names = {dep.split(">")[0].split("=")[0] for dep in load_project()["dependencies"]}
    assert {"pandas", "requests", "urllib3", "python-dotenv", "streamlit", "plotly"} <= names
