"""Pydantic data models for BasicCli."""

from basiccli.models.benchmark_result import BenchmarkResult
from basiccli.models.config import Config
from basiccli.models.file_stats import FileStats

__all__ = [
    "BenchmarkResult",
    "Config",
    "FileStats",
]
