"""Sharing scopes, permission levels and permission request building."""

from __future__ import annotations

from .access import Access, Permission
from .builder import (
    PermissionRequest,
    build_permission,
    validate_sharing,
    viewer_permission,
)

__all__ = [
    "Access",
    "Permission",
    "PermissionRequest",
    "build_permission",
    "validate_sharing",
    "viewer_permission",
]
