"""Format-aware file operations: read, write, checksum, copy, move, stat."""

from __future__ import annotations

import csv
import hashlib
import io
import json
import os
import shutil
import stat
import time
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
import yaml
from pydantic import TypeAdapter, ValidationError

from basiccli.core.errors import FileError, FileErrorKind
from basiccli.models.config import SUPPORTED_CHECKSUM_ALGORITHMS
from basiccli.models.file_stats import FileStats

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

StrPath = str | os.PathLike[str]

_JSONABLE: TypeAdapter[Any] = TypeAdapter(Any)

WATCH_INTERVAL = 0.1


class FileFormat(StrEnum):
    """Content format inferred from a file extension."""

    JSON = "json"
    YAML = "yaml"
    CSV = "csv"
    TEXT = "text"


_EXTENSION_FORMATS: dict[str, FileFormat] = {
    ".json": FileFormat.JSON,
    ".yaml": FileFormat.YAML,
    ".yml": FileFormat.YAML,
    ".csv": FileFormat.CSV,
}


def detect_format(path: StrPath) -> FileFormat:
    """Infer the content format from the path's extension; unknown means text."""
    return _EXTENSION_FORMATS.get(Path(path).suffix.lower(), FileFormat.TEXT)


def _timestamp(value: float | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=UTC)


class FileHandler:
    """Stateless file utility.

    Relative paths resolve against ``base_dir`` (the current working
    directory at call time when not given). Failures raise ``FileError``.
    """

    def __init__(self, base_dir: StrPath | None = None, logger: Any = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    def _resolve(self, path: StrPath) -> Path:
        candidate = Path(os.fspath(path))
        if candidate.is_absolute():
            return candidate
        return (self.base_dir or Path.cwd()) / candidate

    def _require(self, path: StrPath) -> Path:
        resolved = self._resolve(path)
        if not resolved.exists():
            raise FileError(FileErrorKind.NOT_FOUND, resolved)
        return resolved

    # --- Raw text ---

    def read(self, path: StrPath) -> str:
        """Read the whole file as UTF-8 text."""
        resolved = self._require(path)
        try:
            with resolved.open(encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileError(FileErrorKind.READ_ERROR, resolved, str(exc)) from exc
        self._logger.debug("file_read", path=str(resolved), chars=len(content))
        return content

    def write(self, path: StrPath, content: str) -> None:
        """Write text, creating missing parent directories. Not atomic."""
        resolved = self._resolve(path)
        try:
            resolved.parent.mkdir(parents=True, exist_ok=True)
            resolved.write_text(content, encoding="utf-8", newline="")
        except OSError as exc:
            raise FileError(FileErrorKind.WRITE_ERROR, resolved, str(exc)) from exc
        self._logger.debug("file_written", path=str(resolved), chars=len(content))

    def atomic_write(self, path: StrPath, content: str) -> None:
        """Write to ``<name>.tmp.<pid>`` beside the target, then rename over it.

        Readers never observe a partially written destination. If the rename
        fails the temporary file is left in place.
        """
        resolved = self._resolve(path)
        temp_path = resolved.with_name(f"{resolved.name}.tmp.{os.getpid()}")
        self.write(temp_path, content)
        try:
            os.replace(temp_path, resolved)
        except OSError as exc:
            raise FileError(FileErrorKind.OPERATION_FAILED, resolved, str(exc)) from exc

    # --- Structured formats ---

    def _validate(self, data: Any, schema: Any, kind: FileErrorKind, path: Path) -> Any:
        if schema is None:
            return data
        try:
            return TypeAdapter(schema).validate_python(data)
        except ValidationError as exc:
            raise FileError(kind, path, str(exc)) from exc

    def _to_jsonable(self, data: Any, path: Path) -> Any:
        try:
            return _JSONABLE.dump_python(data, mode="json")
        except ValueError as exc:
            raise FileError(FileErrorKind.WRITE_ERROR, path, str(exc)) from exc

    def read_json(self, path: StrPath, schema: Any = None) -> Any:
        """Parse a JSON file, optionally validating it into ``schema``."""
        content = self.read(path)
        resolved = self._resolve(path)
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise FileError(FileErrorKind.INVALID_JSON, resolved, str(exc)) from exc
        return self._validate(data, schema, FileErrorKind.INVALID_JSON, resolved)

    def write_json(self, path: StrPath, data: Any, pretty: bool = False) -> None:
        """Serialize ``data`` as JSON: indented when pretty, compact otherwise."""
        resolved = self._resolve(path)
        self.write(resolved, dumps_json(self._to_jsonable(data, resolved), pretty=pretty))

    def read_yaml(self, path: StrPath, schema: Any = None) -> Any:
        """Parse a YAML file, optionally validating it into ``schema``."""
        content = self.read(path)
        resolved = self._resolve(path)
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise FileError(FileErrorKind.INVALID_YAML, resolved, str(exc)) from exc
        return self._validate(data, schema, FileErrorKind.INVALID_YAML, resolved)

    def write_yaml(self, path: StrPath, data: Any) -> None:
        """Serialize ``data`` as block-style YAML, preserving key order."""
        resolved = self._resolve(path)
        content = yaml.safe_dump(
            self._to_jsonable(data, resolved),
            sort_keys=False,
            allow_unicode=True,
        )
        self.write(resolved, content)

    def read_csv(self, path: StrPath) -> list[dict[str, str]]:
        """Read CSV rows as dicts keyed by the header row.

        Short rows omit the missing keys; fields beyond the header are dropped.
        """
        content = self.read(path)
        resolved = self._resolve(path)
        try:
            rows = [row for row in csv.reader(io.StringIO(content), strict=True) if row]
        except csv.Error as exc:
            raise FileError(FileErrorKind.INVALID_CSV, resolved, str(exc)) from exc

        if not rows:
            return []
        header, *body = rows
        return [dict(zip(header, row, strict=False)) for row in body]

    def write_csv(self, path: StrPath, records: Sequence[Mapping[str, Any]]) -> None:
        """Write records with a header taken from the first record's keys.

        An empty record list writes an empty file. Missing keys become "".
        """
        if not records:
            self.write(path, "")
            return

        header = list(records[0].keys())
        buffer = io.StringIO()
        writer = csv.DictWriter(
            buffer,
            fieldnames=header,
            restval="",
            extrasaction="ignore",
            lineterminator="\n",
        )
        writer.writeheader()
        writer.writerows(records)
        self.write(path, buffer.getvalue())

    # --- Format dispatch ---

    def _coerce_format(self, path: Path, file_format: str | None) -> FileFormat:
        if file_format is None:
            return detect_format(path)
        try:
            return FileFormat(file_format.lower())
        except ValueError as exc:
            raise FileError(FileErrorKind.UNSUPPORTED_FORMAT, path, file_format) from exc

    def load(self, path: StrPath, file_format: str | None = None) -> Any:
        """Read a file as JSON, YAML, CSV or text depending on its format."""
        resolved = self._resolve(path)
        fmt = self._coerce_format(resolved, file_format)
        if fmt is FileFormat.JSON:
            return self.read_json(resolved)
        if fmt is FileFormat.YAML:
            return self.read_yaml(resolved)
        if fmt is FileFormat.CSV:
            return self.read_csv(resolved)
        return self.read(resolved)

    def dump(
        self,
        path: StrPath,
        data: Any,
        file_format: str | None = None,
        pretty: bool = True,
    ) -> None:
        """Write ``data`` as JSON, YAML, CSV or text depending on the format."""
        resolved = self._resolve(path)
        fmt = self._coerce_format(resolved, file_format)
        if fmt is FileFormat.JSON:
            self.write_json(resolved, data, pretty=pretty)
        elif fmt is FileFormat.YAML:
            self.write_yaml(resolved, data)
        elif fmt is FileFormat.CSV:
            if not isinstance(data, list) or not all(isinstance(row, Mapping) for row in data):
                raise FileError(
                    FileErrorKind.UNSUPPORTED_FORMAT,
                    resolved,
                    "CSV output requires a list of mappings",
                )
            self.write_csv(resolved, data)
        else:
            self.write(resolved, str(data))

    # --- Filesystem operations ---

    def copy(self, source: StrPath, destination: StrPath) -> None:
        """Copy a file, creating the destination's parent directories."""
        src = self._require(source)
        dst = self._resolve(destination)
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
        except OSError as exc:
            raise FileError(FileErrorKind.OPERATION_FAILED, src, str(exc)) from exc
        self._logger.debug("file_copied", source=str(src), destination=str(dst))

    def move(self, source: StrPath, destination: StrPath) -> None:
        """Rename a file into place; cross-device moves fail as OPERATION_FAILED."""
        src = self._require(source)
        dst = self._resolve(destination)
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            src.replace(dst)
        except OSError as exc:
            raise FileError(FileErrorKind.OPERATION_FAILED, src, str(exc)) from exc
        self._logger.debug("file_moved", source=str(src), destination=str(dst))

    def delete(self, path: StrPath) -> bool:
        """Remove a file. Returns False when there was nothing to remove."""
        resolved = self._resolve(path)
        if not resolved.exists():
            return False
        try:
            resolved.unlink()
        except OSError as exc:
            raise FileError(FileErrorKind.OPERATION_FAILED, resolved, str(exc)) from exc
        self._logger.debug("file_deleted", path=str(resolved))
        return True

    def exists(self, path: StrPath) -> bool:
        """Whether anything exists at the path."""
        return self._resolve(path).exists()

    def size(self, path: StrPath) -> int:
        """Size in bytes."""
        return self._require(path).stat().st_size

    def checksum(self, path: StrPath, algorithm: str = "sha256") -> str:
        """Lowercase hex digest of the file, hashed in streamed chunks."""
        resolved = self._require(path)
        name = algorithm.lower()
        if name not in SUPPORTED_CHECKSUM_ALGORITHMS:
            raise FileError(
                FileErrorKind.UNSUPPORTED_FORMAT,
                resolved,
                f"unsupported checksum algorithm '{algorithm}'",
            )
        try:
            with resolved.open("rb") as handle:
                digest = hashlib.file_digest(handle, name)
        except OSError as exc:
            raise FileError(FileErrorKind.READ_ERROR, resolved, str(exc)) from exc
        return digest.hexdigest()

    def stats(self, path: StrPath) -> FileStats:
        """Snapshot size, timestamps, type and permissions for a path."""
        resolved = self._require(path)
        info = resolved.stat()
        if os.name == "nt":
            permissions = "N/A"
        else:
            permissions = f"{stat.S_IMODE(info.st_mode) & 0o777:o}"

        return FileStats(
            size=info.st_size,
            modified_at=datetime.fromtimestamp(info.st_mtime, tz=UTC),
            created_at=_timestamp(getattr(info, "st_birthtime", None)),
            accessed_at=_timestamp(info.st_atime),
            is_directory=resolved.is_dir(),
            is_file=resolved.is_file(),
            permissions=permissions,
            readable=os.access(resolved, os.R_OK),
            writable=os.access(resolved, os.W_OK),
            executable=os.access(resolved, os.X_OK),
        )

    def watch(
        self,
        path: StrPath,
        interval: float = WATCH_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Iterator[tuple[Path, datetime]]:
        """Poll a file's modification time, yielding ``(path, modified_at)`` on each change.

        The path must exist when the watch starts. The iterator runs until the
        caller stops consuming it; a file removed while being watched raises
        ``FileError(NOT_FOUND)``.
        """
        resolved = self._require(path)
        self._logger.debug("file_watch_started", path=str(resolved), interval=interval)
        return self._poll(resolved, interval, sleep)

    def _poll(
        self,
        resolved: Path,
        interval: float,
        sleep: Callable[[float], None],
    ) -> Iterator[tuple[Path, datetime]]:
        last_mtime = self._mtime(resolved)
        while True:
            sleep(interval)
            current_mtime = self._mtime(resolved)
            if current_mtime > last_mtime:
                last_mtime = current_mtime
                self._logger.debug("file_changed", path=str(resolved))
                yield resolved, datetime.fromtimestamp(current_mtime, tz=UTC)

    def _mtime(self, resolved: Path) -> float:
        try:
            return resolved.stat().st_mtime
        except FileNotFoundError as exc:
            raise FileError(FileErrorKind.NOT_FOUND, resolved) from exc
        except OSError as exc:
            raise FileError(FileErrorKind.READ_ERROR, resolved, str(exc)) from exc


def dumps_json(data: Any, pretty: bool = False) -> str:
    """Serialize JSON-compatible data, indented or with compact separators."""
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
