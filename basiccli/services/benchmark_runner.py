"""Benchmark runner that times each workload and renders a report."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import structlog

from basiccli.core.report_rendering import OutputFormat, render_report
from basiccli.core.workloads import WORKLOADS
from basiccli.models.benchmark_result import BenchmarkResult
from basiccli.utils.timing import log_progress

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from basiccli.core.workloads import Workload


class BenchmarkRunner:
    """Runs a fixed battery of workloads N times each."""

    def __init__(
        self,
        iterations: int,
        output_format: str = OutputFormat.CONSOLE,
        verbose: bool = False,
        workloads: Sequence[Workload] = WORKLOADS,
        logger: Any = None,
    ) -> None:
        if iterations < 0:
            msg = "iterations must be >= 0"
            raise ValueError(msg)
        self.iterations = iterations
        self.output_format = output_format
        self.verbose = verbose
        self.workloads = tuple(workloads)
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    def run(self) -> list[BenchmarkResult]:
        """Time every workload over the full iteration count, in order."""
        self._logger.info(
            "benchmark_started",
            iterations=self.iterations,
            workloads=len(self.workloads),
        )
        results: list[BenchmarkResult] = []
        for index, workload in enumerate(self.workloads, start=1):
            results.append(self._measure(workload))
            log_progress(
                self._logger, index, len(self.workloads), "benchmark_progress", level="debug"
            )
        self._logger.info(
            "benchmark_completed",
            total_time=round(sum(result.total_time for result in results), 6),
        )
        return results

    def _measure(self, workload: Workload) -> BenchmarkResult:
        start = time.perf_counter()
        workload.run(self.iterations, self._logger)
        elapsed = time.perf_counter() - start

        result = BenchmarkResult.from_timing(workload.name, self.iterations, elapsed)
        self._logger.debug(
            "workload_completed",
            workload=workload.name,
            total_time=round(result.total_time, 6),
            ops_per_sec=round(result.ops_per_sec, 2),
        )
        return result

    def render(self, results: Sequence[BenchmarkResult]) -> str:
        """Render results in the configured output format."""
        return render_report(results, self.output_format)

    def execute(self, emit: Callable[[str], None] = print) -> list[BenchmarkResult]:
        """Run all workloads and pass the rendered report to ``emit``."""
        if self.verbose:
            emit(f"Running benchmarks with {self.iterations} iterations...")
        results = self.run()
        emit(self.render(results))
        return results
