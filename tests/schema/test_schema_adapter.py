import unittest
from datetime import datetime, timezone
from urllib.parse import parse_qs, urlparse

from redrive.context import ApiVersion
from redrive.errors import UnsupportedVersionError
from redrive.schema import (
    ResourceField,
    export_url,
    field_name,
    list_fields,
    list_items_key,
    metadata,
    parent_ids,
    parents_payload,
    record_from_resource,
    resource_fields,
    title_query,
    trash_update,
)

V2_RESOURCE = {
    "id": "F1",
    "title": "Report",
    "mimeType": "application/vnd.google-apps.document",
    "description": "quarterly",
    "fileSize": "2048",
    "createdDate": "2025-01-01T00:00:00.000Z",
    "modifiedDate": "2025-01-02T00:00:00.000Z",
    "alternateLink": "https://docs.google.com/document/d/F1/edit",
    "labels": {"trashed": True},
    "parents": [{"kind": "drive#parentReference", "id": "P1"}],
    "owners": [
        {
            "displayName": "Ann",
            "emailAddress": "ann@example.com",
            "picture": {"url": "https://photo/ann"},
        }
    ],
}

V3_RESOURCE = {
    "id": "F1",
    "name": "Report",
    "mimeType": "application/vnd.google-apps.document",
    "description": "quarterly",
    "size": "2048",
    "createdTime": "2025-01-01T00:00:00.000Z",
    "modifiedTime": "2025-01-02T00:00:00.000Z",
    "webViewLink": "https://docs.google.com/document/d/F1/edit",
    "trashed": True,
    "parents": ["P1"],
    "owners": [
        {
            "displayName": "Ann",
            "emailAddress": "ann@example.com",
            "photoLink": "https://photo/ann",
        }
    ],
}

REQUIRED_FIELDS = (
    ResourceField.NAME,
    ResourceField.CREATED_TIME,
    ResourceField.MODIFIED_TIME,
    ResourceField.SIZE,
    ResourceField.URL,
)


class TestFieldName(unittest.TestCase):
    def test_total_over_all_fields_for_both_versions(self) -> None:
        for version in ApiVersion:
            for logical in ResourceField:
                self.assertIsInstance(field_name(logical, version), str)

    def test_required_fields_differ_between_versions(self) -> None:
        expected_v2 = ["title", "createdDate", "modifiedDate", "fileSize", "alternateLink"]
        expected_v3 = ["name", "createdTime", "modifiedTime", "size", "webViewLink"]
        self.assertEqual([field_name(f, ApiVersion.V2) for f in REQUIRED_FIELDS], expected_v2)
        self.assertEqual([field_name(f, ApiVersion.V3) for f in REQUIRED_FIELDS], expected_v3)

    def test_plain_ints_are_accepted(self) -> None:
        self.assertEqual(field_name(ResourceField.NAME, 2), "title")  # type: ignore[arg-type]
        self.assertEqual(field_name(ResourceField.NAME, 3), "name")  # type: ignore[arg-type]

    def test_unknown_version_is_rejected(self) -> None:
        for bad in (1, 4, "3", None, True):
            with self.assertRaises(UnsupportedVersionError):
                field_name(ResourceField.NAME, bad)  # type: ignore[arg-type]

    def test_field_masks_use_version_names(self) -> None:
        self.assertIn("title", resource_fields(ApiVersion.V2))
        self.assertIn("webViewLink", resource_fields(ApiVersion.V3))
        self.assertTrue(list_fields(ApiVersion.V2).startswith("nextPageToken,items("))
        self.assertTrue(list_fields(ApiVersion.V3).startswith("nextPageToken,files("))
        self.assertEqual(list_items_key(ApiVersion.V2), "items")
        self.assertEqual(list_items_key(ApiVersion.V3), "files")


class TestParents(unittest.TestCase):
    def test_parents_payload_v2_wraps_references(self) -> None:
        self.assertEqual(
            parents_payload(["P1"], ApiVersion.V2),
            [{"kind": "drive#parentReference", "id": "P1"}],
        )

    def test_parents_payload_v3_is_plain_ids(self) -> None:
        self.assertEqual(parents_payload(["P1", "P2"], ApiVersion.V3), ["P1", "P2"])

    def test_parent_ids_inverts_payload(self) -> None:
        for version in ApiVersion:
            payload = {"parents": parents_payload(["A", "B"], version)}
            self.assertEqual(parent_ids(payload, version), ["A", "B"])

    def test_parent_ids_tolerates_missing(self) -> None:
        self.assertEqual(parent_ids({}, ApiVersion.V2), [])
        self.assertEqual(parent_ids({"parents": None}, ApiVersion.V3), [])


class TestRecordFromResource(unittest.TestCase):
    def test_same_record_from_both_dialects(self) -> None:
        r2 = record_from_resource(V2_RESOURCE, ApiVersion.V2)
        r3 = record_from_resource(V3_RESOURCE, ApiVersion.V3)
        self.assertEqual(r2, r3)

    def test_v2_record_fields(self) -> None:
        record = record_from_resource(V2_RESOURCE, ApiVersion.V2)
        self.assertEqual(record.file_id, "F1")
        self.assertEqual(record.name, "Report")
        self.assertEqual(record.size, 2048)
        self.assertEqual(record.created_time, datetime(2025, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(record.modified_time, datetime(2025, 1, 2, tzinfo=timezone.utc))
        self.assertEqual(record.parents, ["P1"])
        self.assertEqual(record.url, "https://docs.google.com/document/d/F1/edit")
        self.assertTrue(record.trashed)
        self.assertEqual(record.owners[0].photo_url, "https://photo/ann")
        self.assertEqual(record.owners[0].domain, "example.com")

    def test_missing_fields_become_defaults(self) -> None:
        record = record_from_resource({"id": "F2"}, ApiVersion.V3)
        self.assertEqual(record.name, "")
        self.assertIsNone(record.size)
        self.assertIsNone(record.created_time)
        self.assertEqual(record.owners, [])
        self.assertFalse(record.trashed)

    def test_v3_name_ignored_when_reading_v2(self) -> None:
        record = record_from_resource({"id": "F3", "name": "wrong"}, ApiVersion.V2)
        self.assertEqual(record.name, "")


class TestRequestShaping(unittest.TestCase):
    def test_metadata_maps_logical_keys(self) -> None:
        self.assertEqual(
            metadata(ApiVersion.V2, name="a", mime_type="text/plain", parents=["P"]),
            {
                "title": "a",
                "mimeType": "text/plain",
                "parents": [{"kind": "drive#parentReference", "id": "P"}],
            },
        )
        self.assertEqual(
            metadata(ApiVersion.V3, name="a", description="d"),
            {"name": "a", "description": "d"},
        )

    def test_title_query_escapes_quotes(self) -> None:
        q = title_query("Bob's", ApiVersion.V2)
        self.assertEqual(q, "title = 'Bob\\'s' and trashed = false")

    def test_title_query_with_mime_type(self) -> None:
        q = title_query("Docs", ApiVersion.V3, mime_type="application/vnd.google-apps.folder")
        self.assertEqual(
            q,
            "name = 'Docs' and mimeType = 'application/vnd.google-apps.folder'"
            " and trashed = false",
        )

    def test_trash_update_only_in_v3(self) -> None:
        self.assertIsNone(trash_update(True, ApiVersion.V2))
        self.assertEqual(trash_update(True, ApiVersion.V3), {"trashed": True})
        self.assertEqual(trash_update(0, 3), {"trashed": False})
        with self.assertRaises(UnsupportedVersionError):
            trash_update(True, 4)

    def test_export_url_per_version(self) -> None:
        for version, prefix in ((ApiVersion.V2, "/drive/v2/"), (ApiVersion.V3, "/drive/v3/")):
            url = urlparse(export_url("F1", "application/pdf", version))
            self.assertEqual(url.netloc, "www.googleapis.com")
            self.assertEqual(url.path, f"{prefix}files/F1/export")
            self.assertEqual(parse_qs(url.query), {"mimeType": ["application/pdf"]})


if __name__ == "__main__":
    unittest.main()
