"""DriveApp-style handles over Drive resources."""

from __future__ import annotations

from .file import FileHandle
from .folder import FolderHandle
from .iterators import FileIterator, FolderIterator
from .user import UserHandle

__all__ = [
    "FileHandle",
    "FolderHandle",
    "UserHandle",
    "FileIterator",
    "FolderIterator",
]
