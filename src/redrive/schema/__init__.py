"""Wire-schema mapping between the Drive v2 and v3 dialects."""

from __future__ import annotations

from .adapter import (
    download_url,
    export_url,
    field_name,
    list_fields,
    list_items_key,
    metadata,
    owner_from_wire,
    parent_ids,
    parents_payload,
    record_from_resource,
    resource_fields,
    title_query,
    trash_update,
)
from .fields import ResourceField

__all__ = [
    "ResourceField",
    "field_name",
    "resource_fields",
    "list_fields",
    "list_items_key",
    "parents_payload",
    "parent_ids",
    "owner_from_wire",
    "record_from_resource",
    "metadata",
    "title_query",
    "trash_update",
    "export_url",
    "download_url",
]
