"""Benchmark scanner throughput.

Run with:
    pytest benchmarks/benchmark_scan.py -v --benchmark-only
"""

import pytest

from loxlex import ErrorCollector, Scanner, scan


@pytest.mark.benchmark(group="scan")
def test_benchmark_scan_large_program(benchmark, large_program):
    """Benchmark scanning a large program through the Scanner class."""

    def run():
        return Scanner(large_program, reporter=ErrorCollector()).scan_tokens()

    tokens = benchmark(run)
    assert tokens[-1].lexeme == ""


@pytest.mark.benchmark(group="scan")
def test_benchmark_scan_function(benchmark, large_program):
    """Benchmark the scan() helper (config lookup and reporter fan-out)."""
    benchmark(scan, large_program, reporter=ErrorCollector())


@pytest.mark.benchmark(group="scan-strings")
def test_benchmark_string_literals(benchmark, string_heavy_program):
    """Benchmark long multi-line string literals."""

    def run():
        return Scanner(string_heavy_program, reporter=ErrorCollector()).scan_tokens()

    benchmark(run)
