"""Benchmark report renderers.

All renderers are pure functions of the result list. The JSON renderer takes
its timestamp, platform and runtime as arguments so output is reproducible.
"""

from __future__ import annotations

import csv
import io
import json
import platform
import sys
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from basiccli.models.benchmark_result import BenchmarkResult

RULE_WIDTH = 60
CSV_HEADER = ("Benchmark", "Iterations", "Total Time (s)", "Avg Time (s)", "Ops/Second")


class OutputFormat(StrEnum):
    """Supported benchmark report formats."""

    CONSOLE = "console"
    JSON = "json"
    CSV = "csv"


def format_duration(seconds: float) -> str:
    """Render a duration in the largest unit it fills: s, ms or μs."""
    if seconds >= 1:
        return f"{seconds:.2f} s"
    if seconds >= 0.001:
        return f"{seconds * 1000:.2f} ms"
    return f"{seconds * 1_000_000:.2f} μs"


def render_console(results: Sequence[BenchmarkResult]) -> str:
    """Render a human-readable report with a grand total at the end."""
    rule = "=" * RULE_WIDTH
    lines = ["", rule, "BENCHMARK RESULTS".center(RULE_WIDTH), rule]

    for result in results:
        lines.extend(
            [
                "",
                f"{result.name}:",
                f"  Iterations:     {result.iterations}",
                f"  Total time:     {format_duration(result.total_time)}",
                f"  Avg time/op:    {format_duration(result.avg_time)}",
                f"  Ops/second:     {result.ops_per_sec:.2f}",
            ]
        )

    total_time = sum(result.total_time for result in results)
    lines.extend(["", rule, f"Total benchmark time: {format_duration(total_time)}", rule])
    return "\n".join(lines)


def render_json(
    results: Sequence[BenchmarkResult],
    *,
    timestamp: datetime | None = None,
    platform_name: str | None = None,
    runtime: str | None = None,
) -> str:
    """Render a pretty-printed JSON report with run metadata."""
    payload = {
        "timestamp": (timestamp or datetime.now(UTC)).isoformat(),
        "platform": platform_name if platform_name is not None else sys.platform,
        "runtime": runtime if runtime is not None else f"Python {platform.python_version()}",
        "benchmarks": [
            {
                "name": result.name,
                "iterations": result.iterations,
                "total_time_ms": result.total_time_ms,
                "avg_time_ms": result.avg_time_ms,
                "ops_per_second": result.ops_per_sec,
            }
            for result in results
        ],
    }
    return json.dumps(payload, indent=2)


def render_csv(results: Sequence[BenchmarkResult]) -> str:
    """Render a header row plus one fixed-precision row per workload."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for result in results:
        writer.writerow(
            [
                result.name,
                result.iterations,
                f"{result.total_time:.6f}",
                f"{result.avg_time:.9f}",
                f"{result.ops_per_sec:.2f}",
            ]
        )
    return buffer.getvalue().rstrip("\n")


def render_report(results: Sequence[BenchmarkResult], output_format: str) -> str:
    """Render with the named format, falling back to console for unknown names."""
    if output_format == OutputFormat.JSON:
        return render_json(results)
    if output_format == OutputFormat.CSV:
        return render_csv(results)
    return render_console(results)
