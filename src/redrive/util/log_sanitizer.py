"""Keep user identifiers out of log records."""

from __future__ import annotations

from typing import Optional


def sanitize_email(email: Optional[str]) -> str:
    """
    Show only the domain and length of an email address.

    Example:
        "user@example.com" -> "***@example.com (16 chars)"
    """
    if not email or "@" not in email:
        return "[invalid-email]"

    domain = email.split("@", 1)[1]
    return f"***@{domain} ({len(email)} chars)"


def sanitize_name(name: Optional[str], max_preview_length: int = 20) -> str:
    """Truncate a file name for logging."""
    if not name:
        return "[empty-name]"

    preview = name[:max_preview_length]
    if len(name) > max_preview_length:
        preview += "..."
    return f"'{preview}' ({len(name)} chars)"
