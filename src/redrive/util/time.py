from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def parse_rfc3339(value: str) -> datetime:
    """
    Parse RFC3339 timestamp string into tz-aware UTC datetime.

    Accepts strings like:
      - 2025-01-01T12:34:56Z
      - 2025-01-01T12:34:56.123Z
      - 2025-01-01T12:34:56+09:00
    """
    if not isinstance(value, str) or not value:
        raise ValueError("RFC3339 value must be a non-empty string")

    s = value.strip()
    # fromisoformat doesn't accept 'Z' before 3.11, so normalize.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)  # raises ValueError if invalid
    if dt.tzinfo is None:
        raise ValueError("RFC3339 value must carry a timezone")
    return dt.astimezone(timezone.utc)


def parse_optional_rfc3339(value: object) -> Optional[datetime]:
    """Lenient variant for wire data: None for missing or unparseable values."""
    if not isinstance(value, str):
        return None
    try:
        return parse_rfc3339(value)
    except ValueError:
        return None
