"""FolderHandle: the DriveApp `Folder` equivalent."""

from __future__ import annotations

from typing import Optional

from redrive.sharing import Access, Permission

from .file import FileHandle


class FolderHandle:
    """Folder view delegating to the FileHandle of the same resource."""

    def __init__(self, file: FileHandle) -> None:
        self._file = file

    def as_file(self) -> FileHandle:
        return self._file

    def get_id(self) -> str:
        return self._file.get_id()

    def get_name(self) -> str:
        return self._file.get_name()

    def get_url(self) -> Optional[str]:
        return self._file.get_url()

    def get_description(self) -> Optional[str]:
        return self._file.get_description()

    def set_name(self, name: str) -> "FolderHandle":
        self._file.set_name(name)
        return self

    def set_trashed(self, trashed: bool) -> "FolderHandle":
        self._file.set_trashed(trashed)
        return self

    def set_sharing(self, access: Access, permission: Permission) -> "FolderHandle":
        self._file.set_sharing(access, permission)
        return self

    def add_viewer(self, email: str) -> "FolderHandle":
        self._file.add_viewer(email)
        return self

    def __repr__(self) -> str:
        return f"FolderHandle(id={self.get_id()!r})"
