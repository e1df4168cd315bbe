"""Shared test fixtures for BasicCli."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import structlog

from basiccli.models.benchmark_result import BenchmarkResult
from basiccli.services.file_handler import FileHandler

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore default structlog configuration after each test.

    CLI commands point the log sink at the runner's stderr, which is closed
    once the invocation returns.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def handler(tmp_path: Path) -> FileHandler:
    """FileHandler resolving relative paths inside a temporary directory."""
    return FileHandler(base_dir=tmp_path)


@pytest.fixture
def sample_results() -> list[BenchmarkResult]:
    """Five fixed results with known timings, in workload order."""
    return [
        BenchmarkResult.from_timing("String Manipulation", 1000, 0.0125),
        BenchmarkResult.from_timing("Array Operations", 1000, 0.25),
        BenchmarkResult.from_timing("File I/O", 1000, 1.5),
        BenchmarkResult.from_timing("JSON Parsing", 1000, 0.0005),
        BenchmarkResult.from_timing("Hash Operations", 1000, 0.04),
    ]


@pytest.fixture
def sample_record() -> dict[str, Any]:
    """Nested JSON-compatible record."""
    return {
        "name": "Test",
        "value": 42,
        "ratio": 0.5,
        "enabled": True,
        "tags": ["cli", "benchmark"],
        "metadata": {"created_at": "2025-01-15T00:00:00Z", "owner": None},
    }
