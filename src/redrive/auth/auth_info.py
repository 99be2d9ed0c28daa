"""OAuth configuration for redrive."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

# drive.file only reaches files the app created or the user opened with it,
# which keeps the app out of Google's "restricted scope" review.
DRIVE_FILE_SCOPE: str = "https://www.googleapis.com/auth/drive.file"
DEFAULT_SCOPES: tuple[str, ...] = (DRIVE_FILE_SCOPE,)

RESTRICTED_SCOPES: frozenset[str] = frozenset(
    {
        "https://www.googleapis.com/auth/drive",
        "https://www.googleapis.com/auth/drive.readonly",
        "https://www.googleapis.com/auth/drive.metadata",
        "https://www.googleapis.com/auth/drive.metadata.readonly",
    }
)


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Installed-app OAuth settings.

    Attributes:
        client_secrets_file: Path to OAuth client secrets JSON.
        token_file: Path to the authorized-user token JSON (created on first
            authorization, rewritten on refresh).
        scopes: Scopes requested; drive.file unless overridden.
    """

    client_secrets_file: str
    token_file: str
    scopes: tuple[str, ...] = DEFAULT_SCOPES

    def __post_init__(self) -> None:
        for name in ("client_secrets_file", "token_file"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.{name} must be a non-empty string")

        if isinstance(self.scopes, str) or not isinstance(self.scopes, Sequence):
            raise TypeError("AuthInfo.scopes must be a sequence of strings")
        if not self.scopes or not all(isinstance(s, str) and s.strip() for s in self.scopes):
            raise ValueError("AuthInfo.scopes must contain at least one non-empty string")
        object.__setattr__(self, "scopes", tuple(self.scopes))

    @property
    def restricted_scopes(self) -> tuple[str, ...]:
        """Requested scopes that Google classifies as restricted."""
        return tuple(s for s in self.scopes if s in RESTRICTED_SCOPES)
