"""File metadata snapshot model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FileStats(BaseModel):
    """Read-only snapshot of filesystem metadata for one path.

    ``created_at`` and ``accessed_at`` are optional since not every
    platform or filesystem reports them. ``permissions`` is the octal mode
    (e.g. ``"644"``) or ``"N/A"`` where there is no Unix permission model.
    """

    model_config = ConfigDict(frozen=True)

    size: int
    modified_at: datetime
    created_at: datetime | None = None
    accessed_at: datetime | None = None
    is_directory: bool
    is_file: bool
    permissions: str
    readable: bool = False
    writable: bool = False
    executable: bool = False
