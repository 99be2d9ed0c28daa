"""UserHandle: the DriveApp `User` equivalent."""

from __future__ import annotations

from typing import Optional

from redrive.models import OwnerInfo


class UserHandle:
    """Read-only view of an owner embedded in a file resource."""

    __slots__ = ("_owner",)

    def __init__(self, owner: OwnerInfo) -> None:
        self._owner = owner

    def get_name(self) -> Optional[str]:
        return self._owner.name

    def get_email(self) -> Optional[str]:
        return self._owner.email

    def get_domain(self) -> Optional[str]:
        return self._owner.domain

    def get_photo_url(self) -> Optional[str]:
        return self._owner.photo_url

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserHandle):
            return NotImplemented
        return self._owner == other._owner

    def __hash__(self) -> int:
        return hash(self._owner)

    def __repr__(self) -> str:
        return f"UserHandle(name={self._owner.name!r}, domain={self._owner.domain!r})"
