"""Logical resource fields and their wire names in each Drive API dialect."""

from __future__ import annotations

from enum import Enum

from redrive.context import ApiVersion


class ResourceField(Enum):
    """Fields callers ask for, independent of the wire dialect."""

    ID = "id"
    NAME = "name"
    MIME_TYPE = "mimeType"
    DESCRIPTION = "description"
    CREATED_TIME = "createdTime"
    MODIFIED_TIME = "modifiedTime"
    SIZE = "size"
    URL = "url"
    PARENTS = "parents"
    OWNERS = "owners"


WIRE_NAMES: dict[ApiVersion, dict[ResourceField, str]] = {
    ApiVersion.V2: {
        ResourceField.ID: "id",
        ResourceField.NAME: "title",
        ResourceField.MIME_TYPE: "mimeType",
        ResourceField.DESCRIPTION: "description",
        ResourceField.CREATED_TIME: "createdDate",
        ResourceField.MODIFIED_TIME: "modifiedDate",
        ResourceField.SIZE: "fileSize",
        ResourceField.URL: "alternateLink",
        ResourceField.PARENTS: "parents",
        ResourceField.OWNERS: "owners",
    },
    ApiVersion.V3: {
        ResourceField.ID: "id",
        ResourceField.NAME: "name",
        ResourceField.MIME_TYPE: "mimeType",
        ResourceField.DESCRIPTION: "description",
        ResourceField.CREATED_TIME: "createdTime",
        ResourceField.MODIFIED_TIME: "modifiedTime",
        ResourceField.SIZE: "size",
        ResourceField.URL: "webViewLink",
        ResourceField.PARENTS: "parents",
        ResourceField.OWNERS: "owners",
    },
}

# Partial-response masks. v3 returns only id/name/mimeType/kind without one.
FILE_FIELDS: dict[ApiVersion, str] = {
    ApiVersion.V2: (
        "id,"
        "title,"
        "mimeType,"
        "description,"
        "fileSize,"
        "createdDate,"
        "modifiedDate,"
        "alternateLink,"
        "labels/trashed,"
        "parents(id),"
        "owners(displayName,emailAddress,picture/url)"
    ),
    ApiVersion.V3: (
        "id,"
        "name,"
        "mimeType,"
        "description,"
        "size,"
        "createdTime,"
        "modifiedTime,"
        "webViewLink,"
        "trashed,"
        "parents,"
        "owners(displayName,emailAddress,photoLink)"
    ),
}

LIST_ITEMS_KEY: dict[ApiVersion, str] = {
    ApiVersion.V2: "items",
    ApiVersion.V3: "files",
}

LIST_FIELDS: dict[ApiVersion, str] = {
    version: f"nextPageToken,{LIST_ITEMS_KEY[version]}({fields})"
    for version, fields in FILE_FIELDS.items()
}

PARENT_REFERENCE_KIND: str = "drive#parentReference"
