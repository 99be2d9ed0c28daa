from .log_sanitizer import sanitize_email, sanitize_name
from .mime import (
    CONVERTIBLE_MIMES,
    DEFAULT_CONTENT_MIME,
    FOLDER_MIME,
    is_convertible,
    is_folder,
    is_google_app,
    require_convertible,
)
from .time import parse_optional_rfc3339, parse_rfc3339

__all__ = [
    "FOLDER_MIME",
    "DEFAULT_CONTENT_MIME",
    "CONVERTIBLE_MIMES",
    "is_folder",
    "is_google_app",
    "is_convertible",
    "require_convertible",
    "parse_rfc3339",
    "parse_optional_rfc3339",
    "sanitize_email",
    "sanitize_name",
]
