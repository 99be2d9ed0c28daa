import unittest
from unittest.mock import Mock

from redrive.app import ReDriveApp
from redrive.context import ApiVersion
from redrive.errors import (
    InvalidArgumentError,
    InvalidStateError,
    InvalidVersionError,
    NotFoundError,
    UnsupportedInVersionError,
    VersionNotConfiguredError,
)
from redrive.handles import FileHandle, FolderHandle
from redrive.models import Blob
from redrive.util.mime import FOLDER_MIME


class FakeDrive:
    """In-memory v2 Drive: enough of RemoteResourceClient for round trips."""

    def __init__(self) -> None:
        self.calls = []
        self.files = {}
        self.contents = {}
        self._next = 0

    def _new_id(self) -> str:
        self._next += 1
        return f"N{self._next}"

    def get(self, file_id):
        self.calls.append(("get", file_id))
        if file_id not in self.files:
            raise NotFoundError("not found", status_code=404)
        return dict(self.files[file_id])

    def insert(self, metadata, content=None):
        self.calls.append(("insert", metadata, content))
        file_id = self._new_id()
        resource = {"id": file_id, **metadata, "parents": [{"id": "root"}]}
        self.files[file_id] = resource
        if content is not None:
            self.contents[file_id] = content.get_bytes()
        return dict(resource)

    def list(self, query, page_token=None):
        self.calls.append(("list", query, page_token))
        return {"items": [r for r in self.files.values() if r.get("title") in query]}


class TestReDriveAppConfiguration(unittest.TestCase):
    def setUp(self) -> None:
        self.factory = Mock(return_value=Mock())
        self.app = ReDriveApp.from_client_factory(self.factory)

    def test_operations_require_version(self) -> None:
        calls = [
            lambda: self.app.get_file_by_id("F1"),
            lambda: self.app.get_folder_by_id("F1"),
            lambda: self.app.create_file("n", "c"),
            lambda: self.app.create_file(Blob(b"x")),
            lambda: self.app.create_folder("n"),
            lambda: self.app.get_folders_by_name("n"),
            lambda: self.app.get_files_by_name("n"),
            lambda: self.app.get_api_version(),
            lambda: self.app.continue_file_iterator("t"),
        ]
        for call in calls:
            with self.assertRaises(VersionNotConfiguredError):
                call()
        self.factory.assert_not_called()

    def test_invalid_version_leaves_app_unconfigured(self) -> None:
        for bad in (4, 1, "2", None, True):
            with self.assertRaises(InvalidVersionError):
                self.app.set_api_version(bad)
        self.assertFalse(self.app.is_configured)
        with self.assertRaises(VersionNotConfiguredError):
            self.app.get_file_by_id("F1")

    def test_set_api_version_builds_client_for_version(self) -> None:
        self.app.set_api_version(3)
        self.factory.assert_called_once_with(ApiVersion.V3)
        self.assertIs(self.app.get_api_version(), ApiVersion.V3)
        self.assertTrue(self.app.is_configured)

    def test_set_api_version_again(self) -> None:
        self.app.set_api_version(ApiVersion.V2)
        self.app.set_api_version(2)
        self.factory.assert_called_once()
        with self.assertRaises(InvalidStateError):
            self.app.set_api_version(3)
        self.assertIs(self.app.get_api_version(), ApiVersion.V2)


class TestReDriveAppV2(unittest.TestCase):
    def setUp(self) -> None:
        self.drive = FakeDrive()
        self.app = ReDriveApp.from_client_factory(lambda version: self.drive)
        self.app.set_api_version(2)

    def test_create_then_fetch_round_trip(self) -> None:
        created = self.app.create_file("Test ReDriveApp", "test test test")

        fetched = self.app.get_file_by_id(created.get_id())

        self.assertIsInstance(fetched, FileHandle)
        self.assertEqual(fetched.get_name(), "Test ReDriveApp")
        self.assertEqual(fetched.get_content_type(), "text/plain")
        self.assertEqual(self.drive.contents[created.get_id()], b"test test test")

    def test_create_file_with_mime_type(self) -> None:
        created = self.app.create_file("a.pdf", b"%PDF", "application/pdf")

        _, metadata, blob = self.drive.calls[-1]
        self.assertEqual(metadata, {"title": "a.pdf", "mimeType": "application/pdf"})
        self.assertEqual(blob.get_content_type(), "application/pdf")
        self.assertEqual(created.get_content_type(), "application/pdf")

    def test_create_file_from_blob(self) -> None:
        blob = Blob(b"\x89PNG", "image/png").set_name("testBlob.png")

        created = self.app.create_file(blob)

        self.assertEqual(self.app.get_file_by_id(created.get_id()).get_name(), "testBlob.png")
        _, metadata, content = self.drive.calls[0]
        self.assertEqual(metadata, {"mimeType": "image/png", "title": "testBlob.png"})
        self.assertIs(content, blob)

    def test_create_file_from_unnamed_blob_omits_title(self) -> None:
        self.app.create_file(Blob(b"x", "text/csv"))
        _, metadata, _ = self.drive.calls[0]
        self.assertEqual(metadata, {"mimeType": "text/csv"})

    def test_create_file_argument_errors(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            self.app.create_file()
        with self.assertRaises(InvalidArgumentError):
            self.app.create_file("a", "b", "c", "d")
        with self.assertRaises(InvalidArgumentError):
            self.app.create_file("just a name")
        with self.assertRaises(InvalidArgumentError):
            self.app.create_file("", "content")
        self.assertEqual(self.drive.calls, [])

    def test_create_folder(self) -> None:
        folder = self.app.create_folder("ReDriveApp Test Folder")

        self.assertIsInstance(folder, FolderHandle)
        self.assertEqual(folder.get_name(), "ReDriveApp Test Folder")
        self.assertEqual(
            self.drive.calls[0],
            ("insert", {"title": "ReDriveApp Test Folder", "mimeType": FOLDER_MIME}, None),
        )

    def test_get_folder_by_id(self) -> None:
        created = self.app.create_folder("Docs")

        folder = self.app.get_folder_by_id(created.get_id())

        self.assertEqual(folder.get_name(), "Docs")
        self.assertEqual(self.drive.calls[-1], ("get", created.get_id()))

    def test_get_folder_by_id_rejects_files(self) -> None:
        created = self.app.create_file("a.txt", "x")
        with self.assertRaises(InvalidArgumentError):
            self.app.get_folder_by_id(created.get_id())

    def test_get_file_by_id_propagates_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.app.get_file_by_id("missing")

    def test_get_folders_by_name_queries_title_and_folder_type(self) -> None:
        self.app.create_folder("Docs")

        folders = list(self.app.get_folders_by_name("Docs"))

        self.assertEqual([f.get_name() for f in folders], ["Docs"])
        _, query, _ = self.drive.calls[-1]
        self.assertIn("title = 'Docs'", query)
        self.assertIn(FOLDER_MIME, query)

    def test_get_files_by_name_and_continue(self) -> None:
        self.app.create_file("a.txt", "x")
        it = self.app.get_files_by_name("a.txt")
        token = it.get_continuation_token()

        resumed = self.app.continue_file_iterator(token)

        self.assertEqual([f.get_name() for f in resumed], ["a.txt"])


class TestReDriveAppV3(unittest.TestCase):
    def setUp(self) -> None:
        self.client = Mock()
        self.app = ReDriveApp.from_client_factory(lambda version: self.client)
        self.app.set_api_version(3)

    def test_creation_unsupported(self) -> None:
        with self.assertRaises(UnsupportedInVersionError):
            self.app.create_file("n", "c")
        with self.assertRaises(UnsupportedInVersionError):
            self.app.create_file("n", "c", "text/csv")
        with self.assertRaises(UnsupportedInVersionError):
            self.app.create_file(Blob(b"x"))
        with self.assertRaises(UnsupportedInVersionError):
            self.app.create_folder("n")
        self.client.insert.assert_not_called()

    def test_get_file_by_id_reads_v3_dialect(self) -> None:
        self.client.get.return_value = {"id": "F1", "name": "v3 name", "mimeType": "text/plain"}

        handle = self.app.get_file_by_id("F1")

        self.assertEqual(handle.get_name(), "v3 name")
        self.client.get.assert_called_once_with("F1")


if __name__ == "__main__":
    unittest.main()
