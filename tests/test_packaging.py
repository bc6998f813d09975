"""Declared dependencies cover what the package imports."""

from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _declared() -> dict[str, str]:
    project = tomllib.loads(PYPROJECT.read_text())["project"]
    declared = {}
    for requirement in project["dependencies"]:
        name, _, floor = requirement.partition(">=")
        declared[name.split("[")[0].strip().lower()] = floor.strip()
    return declared


@pytest.mark.parametrize(
    "distribution, floor",
    [
        ("fastapi", None),
        ("sqlmodel", None),
        ("python-dotenv", None),
        ("uvicorn", None),
        ("psycopg2-binary", None),
        ("pydantic", "2"),
        ("sqlalchemy", "2.0"),
    ],
)
def test_runtime_dependency_is_declared(distribution: str, floor: str | None):
    declared = _declared()

    assert distribution in declared
    if floor is not None:
        assert declared[distribution] == floor
