"""ReDriveApp: DriveApp-compatible entry point using the drive.file scope."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from redrive.auth import AuthInfo
from redrive.client import GoogleDriveClient, RemoteResourceClient
from redrive.context import ApiVersion, DriveContext
from redrive.errors import (
    InvalidArgumentError,
    InvalidStateError,
    UnsupportedInVersionError,
    VersionNotConfiguredError,
)
from redrive.handles import FileHandle, FileIterator, FolderHandle, FolderIterator
from redrive.models import Blob
from redrive.schema import metadata, title_query
from redrive.util import DEFAULT_CONTENT_MIME, FOLDER_MIME, is_folder, sanitize_name

logger = logging.getLogger(__name__)

ClientFactory = Callable[[ApiVersion], RemoteResourceClient]


class ReDriveApp:
    """
    Factory for file/folder handles.

    set_api_version() must be called once before anything else; the chosen
    version is fixed for the lifetime of the app and of every handle it
    creates.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        user_email: Optional[str] = None,
    ) -> None:
        def factory(version: ApiVersion) -> RemoteResourceClient:
            return GoogleDriveClient(auth_info, version)

        self._client_factory: ClientFactory = factory
        self._user_email = user_email
        self._context: Optional[DriveContext] = None

    @classmethod
    def from_client_factory(
        cls,
        factory: ClientFactory,
        *,
        user_email: Optional[str] = None,
    ) -> "ReDriveApp":
        """Create app with an injected client factory (useful for tests)."""
        obj = cls.__new__(cls)
        obj._client_factory = factory
        obj._user_email = user_email
        obj._context = None
        return obj

    # ----------------------------
    # Configuration
    # ----------------------------
    def set_api_version(self, version: Any) -> None:
        """
        Select Drive API v2 or v3.

        Raises:
            InvalidVersionError: for anything other than 2 or 3; the app
                stays unconfigured.
            InvalidStateError: if a different version was already set.
        """
        parsed = ApiVersion.parse(version)
        if self._context is not None:
            if self._context.version is parsed:
                return
            raise InvalidStateError(
                "Drive API version is already set",
                details={"current": int(self._context.version), "requested": int(parsed)},
            )

        client = self._client_factory(parsed)
        self._context = DriveContext(version=parsed, client=client, user_email=self._user_email)
        logger.info("Using Drive API v%d", int(parsed))

    def get_api_version(self) -> ApiVersion:
        return self._require_context().version

    @property
    def is_configured(self) -> bool:
        return self._context is not None

    # ----------------------------
    # Lookup
    # ----------------------------
    def get_file_by_id(self, file_id: str) -> FileHandle:
        ctx = self._require_context()
        return FileHandle.from_resource(ctx, ctx.client.get(file_id))

    def get_folder_by_id(self, folder_id: str) -> FolderHandle:
        """
        Raises:
            InvalidArgumentError: if the id does not refer to a folder.
        """
        file = self.get_file_by_id(folder_id)
        if not is_folder(file.get_content_type()):
            raise InvalidArgumentError(
                "Resource is not a folder",
                details={"file_id": folder_id, "mime_type": file.get_content_type()},
            )
        return FolderHandle(file)

    def get_files_by_name(self, name: str) -> FileIterator:
        ctx = self._require_context()
        return FileIterator(ctx, title_query(name, ctx.version))

    def get_folders_by_name(self, name: str) -> FolderIterator:
        ctx = self._require_context()
        return FolderIterator(ctx, title_query(name, ctx.version, mime_type=FOLDER_MIME))

    def continue_file_iterator(self, continuation_token: str) -> FileIterator:
        return FileIterator.from_continuation_token(self._require_context(), continuation_token)

    def continue_folder_iterator(self, continuation_token: str) -> FolderIterator:
        return FolderIterator.from_continuation_token(self._require_context(), continuation_token)

    # ----------------------------
    # Creation
    # ----------------------------
    def create_file(self, *args: Any) -> FileHandle:
        """
        DriveApp.createFile() call shapes:
            create_file(blob)
            create_file(name, content)             created as text/plain
            create_file(name, content, mime_type)
        """
        self._require_context()
        if len(args) == 1:
            return self.create_file_from_blob(args[0])
        if len(args) == 2:
            return self.create_file_from_content(args[0], args[1])
        if len(args) == 3:
            return self.create_file_from_content(args[0], args[1], args[2])
        raise InvalidArgumentError(
            "Invalid number of arguments to create_file()",
            details={"arg_count": len(args)},
        )

    def create_file_from_blob(self, blob: Blob) -> FileHandle:
        ctx = self._require_writable_context("create_file")
        if not isinstance(blob, Blob):
            raise InvalidArgumentError("create_file() with one argument requires a Blob")

        body = metadata(ctx.version, mime_type=blob.get_content_type())
        if blob.get_name():
            body.update(metadata(ctx.version, name=blob.get_name()))
        resource = ctx.client.insert(body, blob)
        logger.info("Created file %s from blob", sanitize_name(blob.get_name()))
        return FileHandle.from_resource(ctx, resource)

    def create_file_from_content(
        self,
        name: str,
        content: Any,
        mime_type: str = DEFAULT_CONTENT_MIME,
    ) -> FileHandle:
        ctx = self._require_writable_context("create_file")
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("File name must be a non-empty string")

        mime_str = str(mime_type)
        if isinstance(content, (bytes, bytearray)):
            blob = Blob(bytes(content), mime_str, name)
        else:
            blob = Blob.from_text(str(content), mime_str, name)

        body = metadata(ctx.version, name=name, mime_type=mime_str)
        resource = ctx.client.insert(body, blob)
        logger.info("Created file %s (%s)", sanitize_name(name), mime_str)
        return FileHandle.from_resource(ctx, resource)

    def create_folder(self, name: str) -> FolderHandle:
        ctx = self._require_writable_context("create_folder")
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("Folder name must be a non-empty string")

        resource = ctx.client.insert(metadata(ctx.version, name=name, mime_type=FOLDER_MIME))
        logger.info("Created folder %s", sanitize_name(name))
        return FolderHandle(FileHandle.from_resource(ctx, resource))

    # ----------------------------
    # Internals
    # ----------------------------
    def _require_context(self) -> DriveContext:
        if self._context is None:
            raise VersionNotConfiguredError(
                "Drive API version not set. Call set_api_version() first."
            )
        return self._context

    def _require_writable_context(self, operation: str) -> DriveContext:
        ctx = self._require_context()
        if ctx.version is ApiVersion.V3:
            raise UnsupportedInVersionError(
                f"{operation}() is not supported for Drive API v3",
                details={"operation": operation},
            )
        return ctx
