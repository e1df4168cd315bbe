"""Benchmark result model for a single timed workload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class BenchmarkResult(BaseModel):
    """Timing for one workload run N times. Times are in seconds."""

    model_config = ConfigDict(frozen=True)

    name: str
    iterations: int
    total_time: float
    avg_time: float
    ops_per_sec: float

    @field_validator("iterations")
    @classmethod
    def validate_iterations(cls, value: int) -> int:
        """Iterations must not be negative."""
        if value < 0:
            msg = "iterations must be >= 0"
            raise ValueError(msg)
        return value

    @field_validator("total_time", "avg_time")
    @classmethod
    def validate_times(cls, value: float) -> float:
        """Durations must not be negative."""
        if value < 0:
            msg = "durations must be >= 0"
            raise ValueError(msg)
        return value

    @classmethod
    def from_timing(cls, name: str, iterations: int, total_time: float) -> BenchmarkResult:
        """Derive average time and throughput from a measured total.

        A zero iteration count or a zero elapsed time yields zero average and
        zero throughput rather than a division error.
        """
        avg_time = total_time / iterations if iterations > 0 else 0.0
        ops_per_sec = iterations / total_time if iterations > 0 and total_time > 0 else 0.0
        return cls(
            name=name,
            iterations=iterations,
            total_time=total_time,
            avg_time=avg_time,
            ops_per_sec=ops_per_sec,
        )

    @property
    def total_time_ms(self) -> float:
        return self.total_time * 1000

    @property
    def avg_time_ms(self) -> float:
        return self.avg_time * 1000
