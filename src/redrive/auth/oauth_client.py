"""OAuth client utilities for redrive."""

from __future__ import annotations

import logging
import os

from redrive.context import ApiVersion
from redrive.errors import AuthError

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)


class OAuthClient:
    """Load, refresh and persist user credentials; build Drive access objects."""

    def __init__(self, auth_info: AuthInfo) -> None:
        self._auth_info = auth_info
        if auth_info.restricted_scopes:
            logger.warning(
                "Requesting restricted Drive scopes %s; drive.file is sufficient for redrive",
                list(auth_info.restricted_scopes),
            )

    def get_credentials(self, ensure_valid: bool = True):
        """
        Return OAuth credentials for the configured scopes.

        Args:
            ensure_valid: If True, refresh (or re-authorize) when the stored
                token is not valid.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: on load/refresh/flow failures.
        """
        from google.auth.transport.requests import Request
        from google.oauth2.credentials import Credentials

        token_file = self._auth_info.token_file
        scopes = list(self._auth_info.scopes)

        if os.path.exists(token_file):
            try:
                creds = Credentials.from_authorized_user_file(token_file, scopes=scopes)
            except Exception as exc:
                raise AuthError(
                    "Failed to load token_file",
                    details={"token_file": token_file},
                    cause=exc,
                ) from exc

            if not ensure_valid or creds.valid:
                return creds

            if creds.refresh_token:
                logger.debug("Refreshing OAuth credentials from %s", token_file)
                try:
                    creds.refresh(Request())
                except Exception as exc:
                    raise AuthError(
                        "Failed to refresh OAuth credentials",
                        details={"token_file": token_file},
                        cause=exc,
                    ) from exc
                self._save_credentials(creds)
                if creds.valid:
                    return creds

        return self._authorize(scopes)

    def build_drive_service(self, creds, version: ApiVersion):
        """
        Build the Drive discovery client for the given API version.

        Returns:
            googleapiclient.discovery.Resource
        """
        from googleapiclient.discovery import build

        try:
            return build("drive", f"v{int(version)}", credentials=creds, cache_discovery=False)
        except Exception as exc:
            raise AuthError(
                "Failed to build Drive service",
                details={"version": int(version)},
                cause=exc,
            ) from exc

    def build_session(self, creds):
        """
        Authorized HTTP session for raw endpoint fetches (export, download).

        Returns:
            google.auth.transport.requests.AuthorizedSession
        """
        from google.auth.transport.requests import AuthorizedSession

        return AuthorizedSession(creds)

    def _authorize(self, scopes: list[str]):
        from google_auth_oauthlib.flow import InstalledAppFlow

        client_secrets = self._auth_info.client_secrets_file
        logger.info("Starting OAuth authorization flow for scopes %s", scopes)
        try:
            flow = InstalledAppFlow.from_client_secrets_file(client_secrets, scopes=scopes)
            creds = flow.run_local_server(port=0)
        except Exception as exc:
            raise AuthError(
                "OAuth authorization flow failed",
                details={
                    "client_secrets_file": client_secrets,
                    "token_file": self._auth_info.token_file,
                },
                cause=exc,
            ) from exc
        self._save_credentials(creds)
        return creds

    def _save_credentials(self, creds) -> None:
        token_file = self._auth_info.token_file
        token_dir = os.path.dirname(token_file)
        try:
            if token_dir:
                os.makedirs(token_dir, exist_ok=True)
            with open(token_file, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            raise AuthError(
                "Failed to save OAuth token file",
                details={"token_file": token_file},
                cause=exc,
            ) from exc
