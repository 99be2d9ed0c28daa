import unittest

from redrive.util.log_sanitizer import sanitize_email, sanitize_name


class TestLogSanitizer(unittest.TestCase):
    def test_sanitize_email_keeps_domain_only(self) -> None:
        self.assertEqual(sanitize_email("user@example.com"), "***@example.com (16 chars)")

    def test_sanitize_email_invalid(self) -> None:
        self.assertEqual(sanitize_email(None), "[invalid-email]")
        self.assertEqual(sanitize_email("nobody"), "[invalid-email]")

    def test_sanitize_name_truncates(self) -> None:
        self.assertEqual(sanitize_name("report.pdf"), "'report.pdf' (10 chars)")
        self.assertEqual(sanitize_name("a" * 25, max_preview_length=5), "'aaaaa...' (25 chars)")
        self.assertEqual(sanitize_name(""), "[empty-name]")


if __name__ == "__main__":
    unittest.main()
