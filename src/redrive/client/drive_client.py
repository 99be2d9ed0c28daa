"""googleapiclient-backed RemoteResourceClient."""

from __future__ import annotations

import io
import json
import logging
from typing import Any, Callable, Optional, TypeVar

from redrive.auth import AuthInfo, OAuthClient
from redrive.context import ApiVersion
from redrive.errors import (
    AuthError,
    HttpErrorInfo,
    NetworkError,
    RemoteApiError,
    UnsupportedInVersionError,
    map_http_error,
)
from redrive.models import Blob
from redrive.schema import list_fields, resource_fields

from .protocol import FetchResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GoogleDriveClient:
    """
    Drive API client bound to one API version.

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supportsAllDrives` is applied to all requests consistently.
        - No retries: every failure is raised to the caller immediately.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        version: ApiVersion,
        *,
        page_size: int = 100,
    ) -> None:
        oauth = OAuthClient(auth_info)
        creds = oauth.get_credentials(ensure_valid=True)

        self._version = version
        self._page_size = page_size
        self._service = oauth.build_drive_service(creds, version)
        self._session = oauth.build_session(creds)

    @classmethod
    def from_service(
        cls,
        service: Any,
        version: ApiVersion,
        *,
        session: Any = None,
        page_size: int = 100,
    ) -> "GoogleDriveClient":
        """Create client from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._version = version
        obj._page_size = page_size
        obj._service = service
        obj._session = session
        return obj

    @property
    def version(self) -> ApiVersion:
        return self._version

    # ----------------------------
    # Files
    # ----------------------------
    def get(self, file_id: str) -> dict[str, Any]:
        logger.debug("Fetching file %s", file_id)
        req = self._service.files().get(
            fileId=file_id,
            fields=resource_fields(self._version),
            supportsAllDrives=True,
        )
        return self._execute(req.execute)

    def insert(self, metadata: dict[str, Any], content: Optional[Blob] = None) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "body": metadata,
            "fields": resource_fields(self._version),
            "supportsAllDrives": True,
        }
        if content is not None:
            from googleapiclient.http import MediaIoBaseUpload

            kwargs["media_body"] = MediaIoBaseUpload(
                io.BytesIO(content.get_bytes()),
                mimetype=content.get_content_type(),
                resumable=False,
            )

        files = self._service.files()
        if self._version is ApiVersion.V2:
            req = files.insert(**kwargs)
        else:
            req = files.create(**kwargs)
        return self._execute(req.execute)

    def update(
        self,
        fields: dict[str, Any],
        file_id: str,
        options: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        extra = {"supportsAllDrives": True}
        extra.update(options or {})
        req = self._service.files().update(
            fileId=file_id,
            body=fields,
            fields=resource_fields(self._version),
            **extra,
        )
        return self._execute(req.execute)

    def copy(self, metadata: dict[str, Any], file_id: str) -> dict[str, Any]:
        req = self._service.files().copy(
            fileId=file_id,
            body=metadata,
            fields=resource_fields(self._version),
            supportsAllDrives=True,
        )
        return self._execute(req.execute)

    def trash(self, file_id: str, options: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        self._require_v2("trash")
        req = self._service.files().trash(fileId=file_id, **(options or {}))
        return self._execute(req.execute)

    def untrash(self, file_id: str, options: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        self._require_v2("untrash")
        req = self._service.files().untrash(fileId=file_id, **(options or {}))
        return self._execute(req.execute)

    def list(self, query: str, page_token: Optional[str] = None) -> dict[str, Any]:
        """Return one page of results as a raw dict (items/files + nextPageToken)."""
        size_key = "maxResults" if self._version is ApiVersion.V2 else "pageSize"
        kwargs: dict[str, Any] = {
            "q": query,
            "fields": list_fields(self._version),
            "pageToken": page_token,
            "supportsAllDrives": True,
            "includeItemsFromAllDrives": True,
            size_key: self._page_size,
        }
        req = self._service.files().list(**kwargs)
        return self._execute(req.execute)

    # ----------------------------
    # Permissions / about
    # ----------------------------
    def create_permission(self, resource: dict[str, Any], file_id: str) -> dict[str, Any]:
        permissions = self._service.permissions()
        if self._version is ApiVersion.V2:
            req = permissions.insert(fileId=file_id, body=resource, supportsAllDrives=True)
        else:
            req = permissions.create(fileId=file_id, body=resource, supportsAllDrives=True)
        return self._execute(req.execute)

    def get_user_email(self) -> Optional[str]:
        req = self._service.about().get(fields="user(emailAddress)")
        data = self._execute(req.execute)
        user = data.get("user") or {}
        email = user.get("emailAddress")
        return email if isinstance(email, str) else None

    # ----------------------------
    # Raw HTTP
    # ----------------------------
    def fetch(self, url: str) -> FetchResponse:
        """Authenticated GET; non-2xx statuses are returned, not raised."""
        from google.auth.exceptions import GoogleAuthError

        if self._session is None:
            raise RemoteApiError("No authorized session available for fetch")

        logger.debug("Fetching %s", url)
        try:
            resp = self._session.get(url)
        except (OSError, TimeoutError, GoogleAuthError) as exc:
            raise self._map_exception(exc) from exc
        return FetchResponse(status_code=int(resp.status_code), content=resp.content or b"")

    # ----------------------------
    # Internals
    # ----------------------------
    def _require_v2(self, operation: str) -> None:
        if self._version is not ApiVersion.V2:
            raise UnsupportedInVersionError(
                f"files.{operation} does not exist in Drive API v{int(self._version)}",
                details={"operation": operation},
            )

    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> Exception:
        from google.auth.exceptions import GoogleAuthError, TransportError
        from googleapiclient.errors import HttpError

        if isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError, TransportError)):
            return NetworkError("Network error", cause=exc)

        # Expired or revoked tokens surface as RefreshError during the request.
        if isinstance(exc, GoogleAuthError):
            return AuthError("Drive credentials were rejected", cause=exc)

        return RemoteApiError("Drive API error", cause=exc)


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    body = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        body = content.decode("utf-8", errors="replace")
        try:
            payload = json.loads(body)
        except ValueError:
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        body=body,
        details=details or None,
    )
