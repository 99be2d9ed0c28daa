"""Exception hierarchy and HTTP error mapping for redrive."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class ReDriveError(Exception):
    """
    Base exception for redrive.

    Attributes:
        details: Optional structured information (e.g., HTTP status, file id).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class VersionNotConfiguredError(ReDriveError):
    """Raised when an operation runs before set_api_version() was called."""


class InvalidVersionError(ReDriveError):
    """Raised when set_api_version() receives anything other than 2 or 3."""


class UnsupportedVersionError(InvalidVersionError):
    """Raised when a schema mapping is requested for an unknown version."""


class UnsupportedInVersionError(ReDriveError):
    """Raised when an operation is not implemented for the active API version."""


class UnsupportedConversionError(ReDriveError):
    """Raised when exporting a file whose type cannot be converted by Drive."""


class InvalidPermissionCombinationError(ReDriveError):
    """Raised when an access scope cannot be paired with a permission level."""


class UnsupportedPermissionError(ReDriveError):
    """Raised for permission levels Drive refuses to grant (ORGANIZER, ...)."""


class NoOwnerPresentError(ReDriveError):
    """Raised when owner information is requested but the resource has none."""


class InvalidStateError(ReDriveError):
    """Raised when the library is used in an invalid state."""


class InvalidArgumentError(ReDriveError):
    """Raised when call arguments are invalid."""


class NetworkError(ReDriveError):
    """Raised when network/timeout issues prevent the request."""


class RemoteApiError(ReDriveError):
    """
    Raised when the remote API answers with a non-success status.

    Attributes:
        status_code: HTTP status returned by Drive (0 if unknown).
        body: Response body text, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 0,
        body: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, details=details, cause=cause)
        self.status_code = status_code
        self.body = body


class AuthError(RemoteApiError):
    """Raised when OAuth authentication/refresh fails (or HTTP 401)."""


class AccessDeniedError(RemoteApiError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class NotFoundError(RemoteApiError):
    """Raised when a Drive resource is not found (HTTP 404)."""


class ConflictError(RemoteApiError):
    """Raised when a conflict occurs (HTTP 409/412)."""


class RateLimitError(RemoteApiError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(RemoteApiError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to redrive exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    body: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> RemoteApiError:
    """
    Map an HTTP error to a RemoteApiError (or one of its subclasses).

    Policy:
        - 401 -> AuthError
        - 403 -> AccessDeniedError, but QuotaExceededError if quota-related
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - otherwise -> RemoteApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"Drive API returned error {info.status_code}"
    kwargs: dict[str, Any] = {
        "status_code": info.status_code,
        "body": info.body,
        "details": details,
        "cause": cause,
    }

    if info.status_code == 401:
        return AuthError(message, **kwargs)
    if info.status_code == 403:
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, **kwargs)
        return AccessDeniedError(message, **kwargs)
    if info.status_code == 404:
        return NotFoundError(message, **kwargs)
    if info.status_code in (409, 412):
        return ConflictError(message, **kwargs)
    if info.status_code == 429:
        return RateLimitError(message, **kwargs)

    return RemoteApiError(message, **kwargs)
