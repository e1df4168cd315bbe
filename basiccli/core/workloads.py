"""Synthetic benchmark workloads.

Each workload runs its whole loop for a given iteration count, so the caller
can time the full run with a single clock read on either side.
"""

from __future__ import annotations

import json
import re
import tempfile
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

VOWEL_PATTERN = re.compile(r"[aeiou]")
FILE_IO_PADDING = "x" * 100
HASH_FILTER_THRESHOLD = 50


@dataclass(frozen=True)
class Workload:
    """A named benchmark workload.

    ``run`` takes the iteration count and the logger failures are reported to.
    """

    name: str
    run: Callable[[int, Any], None]


def _build_sample_document() -> dict[str, Any]:
    return {
        "users": [
            {
                "id": i,
                "name": f"User {i}",
                "email": f"user{i}@example.com",
                "metadata": {
                    "created_at": "2025-01-15T00:00:00Z",
                    "tags": ["python", "basiccli", "cli", "benchmark"],
                },
            }
            for i in range(1, 11)
        ]
    }


SAMPLE_JSON = json.dumps(_build_sample_document())


def string_manipulation(iterations: int, logger: Any = None) -> None:
    """Uppercase, reverse, mask vowels and hyphen-join a short string."""
    for i in range(iterations):
        text = f"Hello World {i}"
        text = text.upper()
        text = text[::-1]
        text = VOWEL_PATTERN.sub("*", text)
        _ = "-".join(text)


def array_operations(iterations: int, logger: Any = None) -> None:
    """Map, filter, sort and sum a list of 100 integers."""
    for _ in range(iterations):
        numbers = list(range(1, 101))
        numbers = [n * 2 for n in numbers]
        numbers = [n for n in numbers if n % 3 == 0]
        numbers.sort()
        numbers.reverse()
        _ = sum(numbers)


def file_io(iterations: int, logger: Any = None) -> None:
    """Write one padded line per iteration to a single temp file, flushing each time.

    Failures are logged and end the workload early; they never propagate.
    """
    try:
        with tempfile.TemporaryFile(mode="w", encoding="utf-8") as handle:
            for i in range(iterations):
                handle.write(f"Line {i}: {FILE_IO_PADDING}\n")
                handle.flush()
    except OSError as exc:
        if logger is None:
            logger = structlog.get_logger(__name__)
        logger.warning("file_io_workload_failed", iterations=iterations, error=str(exc))


def json_parsing(iterations: int, logger: Any = None) -> None:
    """Parse and re-serialize the pre-built sample document."""
    for _ in range(iterations):
        parsed = json.loads(SAMPLE_JSON)
        _ = json.dumps(parsed)


def hash_operations(iterations: int, logger: Any = None) -> None:
    """Build, sort, sum, extend and filter a 100-entry dict."""
    for _ in range(iterations):
        mapping = {f"key_{i}": i * 2 for i in range(100)}
        _ = sorted(mapping)
        _ = sum(mapping.values())
        mapping["extra"] = 999
        _ = {key: value for key, value in mapping.items() if value > HASH_FILTER_THRESHOLD}


WORKLOADS: tuple[Workload, ...] = (
    Workload("String Manipulation", string_manipulation),
    Workload("Array Operations", array_operations),
    Workload("File I/O", file_io),
    Workload("JSON Parsing", json_parsing),
    Workload("Hash Operations", hash_operations),
)
