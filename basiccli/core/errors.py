"""File operation error taxonomy."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class FileErrorKind(StrEnum):
    """Category of a failed file operation."""

    NOT_FOUND = "not_found"
    READ_ERROR = "read_error"
    WRITE_ERROR = "write_error"
    INVALID_JSON = "invalid_json"
    INVALID_YAML = "invalid_yaml"
    INVALID_CSV = "invalid_csv"
    UNSUPPORTED_FORMAT = "unsupported_format"
    OPERATION_FAILED = "operation_failed"


_MESSAGES: dict[FileErrorKind, str] = {
    FileErrorKind.NOT_FOUND: "File not found: {path}",
    FileErrorKind.READ_ERROR: "Failed to read {path}: {reason}",
    FileErrorKind.WRITE_ERROR: "Failed to write {path}: {reason}",
    FileErrorKind.INVALID_JSON: "Invalid JSON in {path}: {reason}",
    FileErrorKind.INVALID_YAML: "Invalid YAML in {path}: {reason}",
    FileErrorKind.INVALID_CSV: "Invalid CSV in {path}: {reason}",
    FileErrorKind.UNSUPPORTED_FORMAT: "Unsupported format for {path}: {reason}",
    FileErrorKind.OPERATION_FAILED: "File operation failed on {path}: {reason}",
}


class FileError(Exception):
    """Raised by FileHandler operations.

    Every failure carries a kind, the offending path and, where one exists,
    the underlying reason.
    """

    def __init__(self, kind: FileErrorKind, path: str | Path, reason: str | None = None) -> None:
        self.kind = kind
        self.path = str(path)
        self.reason = reason
        super().__init__(_MESSAGES[kind].format(path=self.path, reason=reason or "unknown error"))
