"""Shape of the remote collaborator the handles call through."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from redrive.models import Blob


@dataclass(frozen=True)
class FetchResponse:
    """Raw response of an authenticated GET."""

    status_code: int
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class RemoteResourceClient(Protocol):
    """
    Drive operations used by redrive, bound to one API version.

    Resources are returned as raw wire dicts in that version's dialect.
    """

    def get(self, file_id: str) -> dict[str, Any]: ...

    def insert(self, metadata: dict[str, Any], content: Optional[Blob] = None) -> dict[str, Any]: ...

    def update(
        self,
        fields: dict[str, Any],
        file_id: str,
        options: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]: ...

    def copy(self, metadata: dict[str, Any], file_id: str) -> dict[str, Any]: ...

    def trash(self, file_id: str, options: Optional[dict[str, Any]] = None) -> dict[str, Any]: ...

    def untrash(self, file_id: str, options: Optional[dict[str, Any]] = None) -> dict[str, Any]: ...

    def list(self, query: str, page_token: Optional[str] = None) -> dict[str, Any]: ...

    def create_permission(self, resource: dict[str, Any], file_id: str) -> dict[str, Any]: ...

    def get_user_email(self) -> Optional[str]: ...

    def fetch(self, url: str) -> FetchResponse: ...
