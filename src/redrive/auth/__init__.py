"""Public auth exports for redrive."""

from __future__ import annotations

from .auth_info import DEFAULT_SCOPES, DRIVE_FILE_SCOPE, RESTRICTED_SCOPES, AuthInfo
from .oauth_client import OAuthClient

__all__ = ["AuthInfo", "OAuthClient", "DEFAULT_SCOPES", "DRIVE_FILE_SCOPE", "RESTRICTED_SCOPES"]
