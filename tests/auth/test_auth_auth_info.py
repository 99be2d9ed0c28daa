import unittest

from redrive.auth import DEFAULT_SCOPES, DRIVE_FILE_SCOPE, AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_defaults_to_drive_file_scope(self) -> None:
        info = AuthInfo(client_secrets_file="secrets.json", token_file="token.json")
        self.assertEqual(info.scopes, DEFAULT_SCOPES)
        self.assertEqual(info.scopes, (DRIVE_FILE_SCOPE,))
        self.assertEqual(info.restricted_scopes, ())

    def test_scopes_are_normalized_to_tuple(self) -> None:
        info = AuthInfo("s.json", "t.json", scopes=[DRIVE_FILE_SCOPE])
        self.assertEqual(info.scopes, (DRIVE_FILE_SCOPE,))

    def test_restricted_scopes_are_reported(self) -> None:
        full = "https://www.googleapis.com/auth/drive"
        info = AuthInfo("s.json", "t.json", scopes=[DRIVE_FILE_SCOPE, full])
        self.assertEqual(info.restricted_scopes, (full,))

    def test_empty_paths_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(client_secrets_file="", token_file="t.json")
        with self.assertRaises(ValueError):
            AuthInfo(client_secrets_file="s.json", token_file="  ")

    def test_bad_scopes_are_rejected(self) -> None:
        with self.assertRaises(TypeError):
            AuthInfo("s.json", "t.json", scopes=DRIVE_FILE_SCOPE)
        with self.assertRaises(ValueError):
            AuthInfo("s.json", "t.json", scopes=[])
        with self.assertRaises(ValueError):
            AuthInfo("s.json", "t.json", scopes=[""])


if __name__ == "__main__":
    unittest.main()
