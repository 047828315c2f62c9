"""Shared fixtures for whisker benchmarks.

Jinja2 is the reference point: the same pages are rendered by both engines
so relative numbers stay meaningful across machines.
"""

from __future__ import annotations

import json
import platform
from importlib import metadata
from pathlib import Path

import pytest
from jinja2 import Environment as Jinja2Environment

from whisker import Environment as WhiskerEnvironment

BASE_DIR = Path(__file__).resolve().parent
BENCHMARK_OUTPUT_DIR = BASE_DIR.parent / ".benchmarks"


def _version(dist: str) -> str:
    try:
        return metadata.version(dist)
    except metadata.PackageNotFoundError:
        return "unknown"


@pytest.fixture(scope="session", autouse=True)
def environment_metadata() -> dict[str, object]:
    """Write environment metadata to .benchmarks for ingestion."""
    info: dict[str, object] = {
        "python": platform.python_version(),
        "implementation": platform.python_implementation(),
        "machine": platform.machine(),
        "whisker": _version("whisker-templates"),
        "jinja2": _version("jinja2"),
    }
    BENCHMARK_OUTPUT_DIR.mkdir(exist_ok=True)
    (BENCHMARK_OUTPUT_DIR / "environment.json").write_text(json.dumps(info, indent=2))
    return info


@pytest.fixture(scope="session")
def whisker_env() -> WhiskerEnvironment:
    return WhiskerEnvironment()


@pytest.fixture(scope="session")
def jinja2_env() -> Jinja2Environment:
    return Jinja2Environment(autoescape=True)


def _items(count: int) -> list[dict[str, str]]:
    return [{"name": f"Item <{i}>", "price": f"{i * 1.5:.2f}"} for i in range(count)]


@pytest.fixture(scope="session")
def small_context() -> dict[str, object]:
    return {"title": "Catalogue & Prices", "items": _items(5)}


@pytest.fixture(scope="session")
def large_context() -> dict[str, object]:
    return {"title": "Catalogue & Prices", "items": _items(1000)}
