"""Benchmarks for HTML escaping.

Run with: pytest benchmarks/test_benchmark_escape.py --benchmark-only
"""

from __future__ import annotations

import pytest
from pytest_benchmark.fixture import BenchmarkFixture

from whisker.utils.html import html_escape


@pytest.mark.benchmark(group="escape")
def test_escape_no_special(benchmark: BenchmarkFixture) -> None:
    """Fast path: no special characters."""
    benchmark(html_escape, "Hello World no special chars here at all")


@pytest.mark.benchmark(group="escape")
def test_escape_single_char(benchmark: BenchmarkFixture) -> None:
    benchmark(html_escape, "Hello & World")


@pytest.mark.benchmark(group="escape")
def test_escape_all_chars(benchmark: BenchmarkFixture) -> None:
    benchmark(html_escape, "<script>alert('x' & \"y\")</script>" * 20)


@pytest.mark.benchmark(group="escape")
def test_escape_long_clean(benchmark: BenchmarkFixture) -> None:
    benchmark(html_escape, "plain text " * 1000)
