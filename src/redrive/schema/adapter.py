"""
Translation between logical file data and the v2/v3 wire resources.

Wire field names, payload shapes and trash semantics of both dialects live
here, so handles never branch on them themselves.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional
from urllib.parse import quote, urlencode

from redrive.context import ApiVersion
from redrive.models import FileRecord, OwnerInfo
from redrive.util.time import parse_optional_rfc3339

from .fields import (
    FILE_FIELDS,
    LIST_FIELDS,
    LIST_ITEMS_KEY,
    PARENT_REFERENCE_KIND,
    WIRE_NAMES,
    ResourceField,
)

DRIVE_API_BASE_URL: str = "https://www.googleapis.com/drive"


def field_name(logical: ResourceField, version: ApiVersion) -> str:
    """Return the wire name of a logical field in the given dialect."""
    return WIRE_NAMES[ApiVersion.require(version)][logical]


def resource_fields(version: ApiVersion) -> str:
    return FILE_FIELDS[ApiVersion.require(version)]


def list_fields(version: ApiVersion) -> str:
    return LIST_FIELDS[ApiVersion.require(version)]


def list_items_key(version: ApiVersion) -> str:
    return LIST_ITEMS_KEY[ApiVersion.require(version)]


def parents_payload(folder_ids: Iterable[str], version: ApiVersion) -> list[Any]:
    """Wrap folder ids the way the dialect expects in a request body."""
    if ApiVersion.require(version) is ApiVersion.V2:
        return [{"kind": PARENT_REFERENCE_KIND, "id": fid} for fid in folder_ids]
    return list(folder_ids)


def parent_ids(resource: dict[str, Any], version: ApiVersion) -> list[str]:
    raw = resource.get(field_name(ResourceField.PARENTS, version)) or []
    if not isinstance(raw, list):
        return []

    ids: list[str] = []
    for item in raw:
        if isinstance(item, dict):
            item = item.get("id")
        if isinstance(item, str):
            ids.append(item)
    return ids


def owner_from_wire(owner: dict[str, Any], version: ApiVersion) -> OwnerInfo:
    if ApiVersion.require(version) is ApiVersion.V2:
        picture = owner.get("picture") or {}
        photo_url = picture.get("url") if isinstance(picture, dict) else None
    else:
        photo_url = owner.get("photoLink")

    return OwnerInfo(
        name=owner.get("displayName"),
        email=owner.get("emailAddress"),
        photo_url=photo_url,
    )


def is_trashed(resource: dict[str, Any], version: ApiVersion) -> bool:
    if ApiVersion.require(version) is ApiVersion.V2:
        labels = resource.get("labels") or {}
        return bool(labels.get("trashed", False)) if isinstance(labels, dict) else False
    return bool(resource.get("trashed", False))


def _int_or_none(value: Any) -> Optional[int]:
    # Drive sends int64 values as decimal strings.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def record_from_resource(resource: dict[str, Any], version: ApiVersion) -> FileRecord:
    """Build a FileRecord from a files resource in the given dialect."""

    def get(logical: ResourceField) -> Any:
        return resource.get(field_name(logical, version))

    owners_raw = get(ResourceField.OWNERS) or []
    owners = [
        owner_from_wire(owner, version)
        for owner in owners_raw
        if isinstance(owner, dict)
    ]

    return FileRecord(
        file_id=str(get(ResourceField.ID) or ""),
        name=_str_or_none(get(ResourceField.NAME)) or "",
        mime_type=_str_or_none(get(ResourceField.MIME_TYPE)) or "",
        description=_str_or_none(get(ResourceField.DESCRIPTION)),
        size=_int_or_none(get(ResourceField.SIZE)),
        created_time=parse_optional_rfc3339(get(ResourceField.CREATED_TIME)),
        modified_time=parse_optional_rfc3339(get(ResourceField.MODIFIED_TIME)),
        owners=owners,
        parents=parent_ids(resource, version),
        url=_str_or_none(get(ResourceField.URL)),
        trashed=is_trashed(resource, version),
    )


def metadata(version: ApiVersion, **values: Any) -> dict[str, Any]:
    """
    Build a request body from logical keyword arguments.

    Example:
        metadata(ApiVersion.V2, name="a", mime_type="text/plain")
        -> {"title": "a", "mimeType": "text/plain"}
    """
    body: dict[str, Any] = {}
    for key, value in values.items():
        logical = ResourceField[key.upper()]
        if logical is ResourceField.PARENTS:
            value = parents_payload(value, version)
        body[field_name(logical, version)] = value
    return body


def trash_update(trashed: bool, version: ApiVersion) -> Optional[dict[str, Any]]:
    """
    files.update body that sets the trashed state.

    None for v2, which only changes it through files.trash / files.untrash.
    """
    if ApiVersion.require(version) is ApiVersion.V2:
        return None
    return {"trashed": bool(trashed)}


def _escape_query_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def title_query(
    name: str,
    version: ApiVersion,
    *,
    mime_type: Optional[str] = None,
) -> str:
    """Search query matching non-trashed items with exactly this name."""
    q = f"{field_name(ResourceField.NAME, version)} = '{_escape_query_value(name)}'"
    if mime_type is not None:
        q += f" and mimeType = '{_escape_query_value(mime_type)}'"
    return q + " and trashed = false"


def _files_url(file_id: str, version: ApiVersion) -> str:
    version = ApiVersion.require(version)
    return f"{DRIVE_API_BASE_URL}/v{int(version)}/files/{quote(file_id, safe='')}"


def export_url(file_id: str, mime_type: str, version: ApiVersion) -> str:
    return f"{_files_url(file_id, version)}/export?{urlencode({'mimeType': mime_type})}"


def download_url(file_id: str, version: ApiVersion) -> str:
    query = urlencode({"alt": "media", "supportsAllDrives": "true"})
    return f"{_files_url(file_id, version)}?{query}"
