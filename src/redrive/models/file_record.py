"""Version-neutral snapshot of a Drive file or folder."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True, frozen=True)
class OwnerInfo:
    """Owner metadata embedded in a file resource."""

    name: Optional[str]
    email: Optional[str]
    photo_url: Optional[str] = None

    @property
    def domain(self) -> Optional[str]:
        """Part of the email after '@' (not present in the Drive resource)."""
        if not self.email or "@" not in self.email:
            return None
        return self.email.split("@", 1)[1]


@dataclass(slots=True)
class FileRecord:
    """
    Represents a Drive resource as last seen by this process.

    Notes:
        - file_id is assigned by Drive and never changes.
        - Every other field may be stale until the resource is re-fetched.
    """

    file_id: str
    name: str
    mime_type: str

    description: Optional[str] = None
    size: Optional[int] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    owners: list[OwnerInfo] = field(default_factory=list)
    parents: list[str] = field(default_factory=list)
    url: Optional[str] = None
    trashed: bool = False
