"""redrive public API."""

from __future__ import annotations

from redrive.app import ReDriveApp
from redrive.auth import DRIVE_FILE_SCOPE, AuthInfo, OAuthClient
from redrive.client import FetchResponse, GoogleDriveClient, RemoteResourceClient
from redrive.context import ApiVersion, DriveContext
from redrive.errors import (
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
from redrive.handles import FileHandle, FileIterator, FolderHandle, FolderIterator, UserHandle
from redrive.models import Blob, FileRecord, OwnerInfo
from redrive.sharing import Access, Permission, PermissionRequest

__all__ = [
    # High-level
    "ReDriveApp",
    "ApiVersion",
    "DriveContext",
    # Handles
    "FileHandle",
    "FolderHandle",
    "UserHandle",
    "FileIterator",
    "FolderIterator",
    # Sharing
    "Access",
    "Permission",
    "PermissionRequest",
    # Auth / client
    "AuthInfo",
    "OAuthClient",
    "DRIVE_FILE_SCOPE",
    "GoogleDriveClient",
    "RemoteResourceClient",
    "FetchResponse",
    # Models
    "Blob",
    "FileRecord",
    "OwnerInfo",
    # Errors
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
