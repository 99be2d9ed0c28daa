"""
Lazy, restartable iteration over Drive search results.

The continuation token carries the search query, the Drive page token and
the number of items already returned from that page, so a later process
can resume exactly where this one stopped.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from collections import deque
from typing import Any, Generic, Optional, TypeVar

from redrive.context import DriveContext
from redrive.errors import InvalidArgumentError
from redrive.schema import list_items_key

from .file import FileHandle
from .folder import FolderHandle

logger = logging.getLogger(__name__)

H = TypeVar("H")


def encode_continuation_token(query: str, page_token: Optional[str], offset: int = 0) -> str:
    payload = json.dumps({"q": query, "p": page_token, "o": offset}, separators=(",", ":"))
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")


def decode_continuation_token(token: str) -> tuple[str, Optional[str], int]:
    try:
        raw = base64.urlsafe_b64decode(token.encode("ascii"))
        payload = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError, AttributeError) as exc:
        raise InvalidArgumentError("Malformed continuation token", cause=exc) from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("q"), str):
        raise InvalidArgumentError("Malformed continuation token")
    page_token = payload.get("p")
    offset = payload.get("o", 0)
    if page_token is not None and not isinstance(page_token, str):
        raise InvalidArgumentError("Malformed continuation token")
    if not isinstance(offset, int) or isinstance(offset, bool) or offset < 0:
        raise InvalidArgumentError("Malformed continuation token")
    return payload["q"], page_token, offset


class _ResultIterator(Generic[H]):
    """Pages through one query; at most one list request per next() call."""

    def __init__(
        self,
        context: DriveContext,
        query: str,
        page_token: Optional[str] = None,
        offset: int = 0,
    ) -> None:
        self._context = context
        self._query = query
        self._next_page_token = page_token
        self._page_token: Optional[str] = page_token
        self._skip = offset
        self._offset = 0
        self._buffer: deque[dict[str, Any]] = deque()
        self._exhausted = False

    @classmethod
    def from_continuation_token(cls, context: DriveContext, token: str):
        query, page_token, offset = decode_continuation_token(token)
        return cls(context, query, page_token, offset)

    def _wrap(self, resource: dict[str, Any]) -> H:
        raise NotImplementedError

    def _fill(self) -> None:
        while not self._buffer and not self._exhausted:
            self._page_token = self._next_page_token
            page = self._context.client.list(self._query, self._page_token)
            items = [i for i in page.get(list_items_key(self._context.version)) or [] if isinstance(i, dict)]

            skip, self._skip = min(self._skip, len(items)), 0
            self._buffer.extend(items[skip:])
            self._offset = skip

            self._next_page_token = page.get("nextPageToken") or None
            self._exhausted = self._next_page_token is None
            logger.debug("Listed %d items (more=%s)", len(items), not self._exhausted)

    def has_next(self) -> bool:
        self._fill()
        return bool(self._buffer)

    def next(self) -> H:
        if not self.has_next():
            raise StopIteration
        self._offset += 1
        return self._wrap(self._buffer.popleft())

    def get_continuation_token(self) -> Optional[str]:
        """Token resuming at the first item not yet returned, or None when done."""
        if self._buffer:
            return encode_continuation_token(self._query, self._page_token, self._offset)
        if self._exhausted:
            return None
        return encode_continuation_token(self._query, self._next_page_token, self._skip)

    def __iter__(self) -> "_ResultIterator[H]":
        return self

    def __next__(self) -> H:
        return self.next()


class FileIterator(_ResultIterator[FileHandle]):
    def _wrap(self, resource: dict[str, Any]) -> FileHandle:
        return FileHandle.from_resource(self._context, resource)


class FolderIterator(_ResultIterator[FolderHandle]):
    def _wrap(self, resource: dict[str, Any]) -> FolderHandle:
        return FolderHandle(FileHandle.from_resource(self._context, resource))
