"""FileHandle: the DriveApp `File` equivalent over a cached FileRecord."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Optional, Union

from redrive.context import ApiVersion, DriveContext
from redrive.errors import (
    HttpErrorInfo,
    InvalidArgumentError,
    NoOwnerPresentError,
    UnsupportedConversionError,
    map_http_error,
)
from redrive.models import Blob, FileRecord
from redrive.schema import (
    download_url,
    export_url,
    metadata,
    record_from_resource,
    trash_update,
)
from redrive.sharing import (
    Access,
    Permission,
    build_permission,
    validate_sharing,
    viewer_permission,
)
from redrive.util import is_google_app, require_convertible, sanitize_email, sanitize_name

from .user import UserHandle

if TYPE_CHECKING:
    from .folder import FolderHandle

logger = logging.getLogger(__name__)

_ALL_DRIVES = {"supportsAllDrives": True}


class FileHandle:
    """
    A Drive file as last fetched.

    Readers never go back to Drive. Mutators issue one remote call and then
    update the local snapshot; they return self so calls can be chained.
    """

    def __init__(self, context: DriveContext, record: FileRecord) -> None:
        self._context = context
        self._record = record

    @classmethod
    def from_resource(cls, context: DriveContext, resource: dict) -> "FileHandle":
        return cls(context, record_from_resource(resource, context.version))

    @property
    def record(self) -> FileRecord:
        return self._record

    @property
    def _version(self) -> ApiVersion:
        return self._context.version

    # ----------------------------
    # Readers
    # ----------------------------
    def get_id(self) -> str:
        return self._record.file_id

    def get_name(self) -> str:
        return self._record.name

    def get_description(self) -> Optional[str]:
        return self._record.description

    def get_url(self) -> Optional[str]:
        return self._record.url

    def get_content_type(self) -> str:
        return self._record.mime_type

    def get_size(self) -> Optional[int]:
        return self._record.size

    def get_date_created(self) -> Optional[datetime]:
        return self._record.created_time

    def get_last_updated(self) -> Optional[datetime]:
        return self._record.modified_time

    def is_trashed(self) -> bool:
        return self._record.trashed

    def get_parent_ids(self) -> list[str]:
        return list(self._record.parents)

    def get_owner(self) -> UserHandle:
        """
        First owner of the file.

        Raises:
            NoOwnerPresentError: if the resource lists no owners (shared
                drive items, or a partial response).
        """
        if not self._record.owners:
            raise NoOwnerPresentError(
                "File has no owner information",
                details={"file_id": self._record.file_id},
            )
        return UserHandle(self._record.owners[0])

    def get_owners(self) -> list[UserHandle]:
        return [UserHandle(owner) for owner in self._record.owners]

    # ----------------------------
    # Content
    # ----------------------------
    def get_as(self, mime_type: str) -> Blob:
        """
        Export a Google Workspace file to another format.

        Raises:
            UnsupportedConversionError: if the file is not a convertible
                Google type; no request is made in that case.
            RemoteApiError: if Drive answers with a non-success status.
        """
        require_convertible(self._record.mime_type)

        url = export_url(self._record.file_id, mime_type, self._version)
        resp = self._context.client.fetch(url)
        if not resp.ok:
            raise map_http_error(
                HttpErrorInfo(
                    status_code=resp.status_code,
                    message=f"Drive API returned error {resp.status_code}: {resp.text}",
                    body=resp.text,
                    details={"file_id": self._record.file_id, "mime_type": mime_type},
                )
            )

        logger.info("Exported file %s as %s", self._record.file_id, mime_type)
        return Blob(resp.content, mime_type, self._record.name)

    export_as = get_as

    def get_blob(self) -> Blob:
        """Download the raw content of a binary (non-Google) file."""
        if is_google_app(self._record.mime_type):
            raise UnsupportedConversionError(
                "Google Workspace files have no raw content; use get_as()",
                details={"mime_type": self._record.mime_type},
            )

        resp = self._context.client.fetch(download_url(self._record.file_id, self._version))
        if not resp.ok:
            raise map_http_error(
                HttpErrorInfo(
                    status_code=resp.status_code,
                    body=resp.text,
                    details={"file_id": self._record.file_id},
                )
            )
        return Blob(resp.content, self._record.mime_type, self._record.name)

    # ----------------------------
    # Mutators
    # ----------------------------
    def make_copy(
        self,
        name: Union[str, "FolderHandle", None] = None,
        destination: Optional["FolderHandle"] = None,
    ) -> "FileHandle":
        """
        Copy the file.

        Call shapes:
            make_copy()                 same name, same parents
            make_copy("X")              renamed, same parents
            make_copy(folder)           same name, placed in folder
            make_copy("X", folder)      renamed and placed in folder
        """
        if name is not None and not isinstance(name, str):
            if destination is not None:
                raise InvalidArgumentError("make_copy() got two destinations")
            name, destination = None, name

        client = self._context.client
        fresh = record_from_resource(client.get(self._record.file_id), self._version)

        new_name = name if name is not None else fresh.name
        parents = [destination.get_id()] if destination is not None else fresh.parents

        body = metadata(self._version, name=new_name, parents=parents)
        copied = client.copy(body, fresh.file_id)

        logger.info(
            "Copied file %s as %s into %s",
            fresh.file_id,
            sanitize_name(new_name),
            parents,
        )
        return FileHandle.from_resource(self._context, copied)

    def set_name(self, name: str) -> "FileHandle":
        self._context.client.update(metadata(self._version, name=name), self._record.file_id)
        self._record.name = name
        logger.info("Renamed file %s to %s", self._record.file_id, sanitize_name(name))
        return self

    def set_description(self, description: str) -> "FileHandle":
        self._context.client.update(
            metadata(self._version, description=description),
            self._record.file_id,
        )
        self._record.description = description
        logger.info("Updated description of file %s", self._record.file_id)
        return self

    def set_trashed(self, trashed: bool) -> "FileHandle":
        """v2 has dedicated trash/untrash calls; v3 flips the trashed field."""
        client = self._context.client
        file_id = self._record.file_id
        trashed = bool(trashed)

        body = trash_update(trashed, self._version)
        if body is not None:
            client.update(body, file_id, dict(_ALL_DRIVES))
        elif trashed:
            client.trash(file_id, dict(_ALL_DRIVES))
        else:
            client.untrash(file_id, dict(_ALL_DRIVES))

        self._record.trashed = trashed
        logger.info("Set trashed=%s on file %s", trashed, file_id)
        return self

    def add_viewer(self, email: str) -> "FileHandle":
        request = viewer_permission(email)
        self._context.client.create_permission(
            request.to_resource(self._version),
            self._record.file_id,
        )
        logger.info("Added viewer %s to file %s", sanitize_email(email), self._record.file_id)
        return self

    def add_viewers(self, emails: Iterable[str]) -> "FileHandle":
        for email in emails:
            self.add_viewer(email)
        return self

    def set_sharing(self, access: Access, permission: Permission) -> "FileHandle":
        """
        Share the file with a whole audience.

        Raises:
            UnsupportedPermissionError: for ORGANIZER and FILE_ORGANIZER.
            InvalidPermissionCombinationError: for NONE with anything but ANYONE.
        """
        validate_sharing(access, permission)
        request = build_permission(access, permission, self._effective_email(access), self._version)
        if not request.grants_access:
            logger.info(
                "Sharing %s/%s on file %s grants nothing; no permission created",
                access.name,
                permission.name,
                self._record.file_id,
            )
            return self

        self._context.client.create_permission(
            request.to_resource(self._version),
            self._record.file_id,
        )
        logger.info(
            "Shared file %s as %s/%s",
            self._record.file_id,
            access.name,
            permission.name,
        )
        return self

    # ----------------------------
    # Internals
    # ----------------------------
    def _effective_email(self, access: Access) -> Optional[str]:
        if access in (Access.ANYONE, Access.ANYONE_WITH_LINK):
            return self._context.user_email
        if self._context.user_email:
            return self._context.user_email
        return self._context.client.get_user_email()

    def __repr__(self) -> str:
        return f"FileHandle(id={self._record.file_id!r}, mime_type={self._record.mime_type!r})"
