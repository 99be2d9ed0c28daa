"""Public error exports for redrive."""

from __future__ import annotations

from .exceptions import (
    AccessDeniedError,
    AuthError,
    ConflictError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidPermissionCombinationError,
    InvalidStateError,
    InvalidVersionError,
    NetworkError,
    NoOwnerPresentError,
    NotFoundError,
    QuotaExceededError,
    RateLimitError,
    ReDriveError,
    RemoteApiError,
    UnsupportedConversionError,
    UnsupportedInVersionError,
    UnsupportedPermissionError,
    UnsupportedVersionError,
    VersionNotConfiguredError,
    map_http_error,
)

__all__ = [
    "ReDriveError",
    "VersionNotConfiguredError",
    "InvalidVersionError",
    "UnsupportedVersionError",
    "UnsupportedInVersionError",
    "UnsupportedConversionError",
    "InvalidPermissionCombinationError",
    "UnsupportedPermissionError",
    "NoOwnerPresentError",
    "InvalidStateError",
    "InvalidArgumentError",
    "NetworkError",
    "RemoteApiError",
    "AuthError",
    "AccessDeniedError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "HttpErrorInfo",
    "map_http_error",
]
