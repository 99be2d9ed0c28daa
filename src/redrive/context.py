"""API version selection and the per-app context handed to every handle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional

from redrive.errors import InvalidVersionError, UnsupportedVersionError

if TYPE_CHECKING:
    from redrive.client.protocol import RemoteResourceClient


class ApiVersion(IntEnum):
    """Drive REST API major version, which also selects the wire dialect."""

    V2 = 2
    V3 = 3

    @classmethod
    def _coerce(cls, value: Any) -> Optional["ApiVersion"]:
        if isinstance(value, ApiVersion):
            return value
        if isinstance(value, int) and not isinstance(value, bool) and value in (2, 3):
            return cls(value)
        return None

    @classmethod
    def parse(cls, value: Any) -> "ApiVersion":
        """Accept 2, 3 or an ApiVersion; anything else is InvalidVersionError."""
        version = cls._coerce(value)
        if version is None:
            raise InvalidVersionError(
                f"Unsupported Drive API version: {value!r}",
                details={"version": value},
            )
        return version

    @classmethod
    def require(cls, value: Any) -> "ApiVersion":
        """Same accepted values as parse(), for the wire mapping layers."""
        version = cls._coerce(value)
        if version is None:
            raise UnsupportedVersionError(
                f"Unsupported Drive API version: {value!r}",
                details={"version": value},
            )
        return version


@dataclass(frozen=True)
class DriveContext:
    """
    Configuration shared by the handles created from one ReDriveApp.

    Attributes:
        version: Wire dialect used for every request and response.
        client: Remote collaborator performing the actual API calls.
        user_email: Effective user's email, used to resolve PRIVATE and
            DOMAIN sharing. Looked up remotely when None.
    """

    version: ApiVersion
    client: "RemoteResourceClient"
    user_email: Optional[str] = None
