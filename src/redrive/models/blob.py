"""In-memory file content, the equivalent of an Apps Script Blob."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from redrive.util.mime import DEFAULT_CONTENT_MIME


@dataclass(slots=True)
class Blob:
    data: bytes
    content_type: str = "application/octet-stream"
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray)):
            raise TypeError("Blob.data must be bytes")
        self.data = bytes(self.data)

    @classmethod
    def from_text(
        cls,
        text: str,
        content_type: str = DEFAULT_CONTENT_MIME,
        name: Optional[str] = None,
        *,
        encoding: str = "utf-8",
    ) -> "Blob":
        return cls(text.encode(encoding), content_type, name)

    def get_bytes(self) -> bytes:
        return self.data

    def get_content_type(self) -> str:
        return self.content_type

    def get_name(self) -> Optional[str]:
        return self.name

    def set_name(self, name: str) -> "Blob":
        self.name = name
        return self

    def get_data_as_string(self, encoding: str = "utf-8") -> str:
        return self.data.decode(encoding)
