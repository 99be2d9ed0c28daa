"""Public model exports for redrive."""

from __future__ import annotations

from .blob import Blob
from .file_record import FileRecord, OwnerInfo

__all__ = [
    "Blob",
    "FileRecord",
    "OwnerInfo",
]
