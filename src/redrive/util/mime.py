from __future__ import annotations

from redrive.errors import UnsupportedConversionError

FOLDER_MIME: str = "application/vnd.google-apps.folder"
GOOGLE_APPS_PREFIX: str = "application/vnd.google-apps."
DEFAULT_CONTENT_MIME: str = "text/plain"

# Native types Drive can export to other formats.
CONVERTIBLE_MIMES: frozenset[str] = frozenset(
    {
        "application/vnd.google-apps.document",
        "application/vnd.google-apps.drawing",
        "application/vnd.google-apps.presentation",
        "application/vnd.google-apps.spreadsheet",
    }
)


def is_folder(mime_type: str | None) -> bool:
    return mime_type == FOLDER_MIME


def is_google_app(mime_type: str | None) -> bool:
    """Returns True if the MIME type is a Google 'apps' type."""
    if not mime_type:
        return False
    return mime_type.startswith(GOOGLE_APPS_PREFIX)


def is_convertible(mime_type: str | None) -> bool:
    return mime_type in CONVERTIBLE_MIMES


def require_convertible(mime_type: str | None) -> None:
    """
    Raise unless Drive can export the given source type.

    Conversion between two non-Google formats (png -> jpg, ...) is not
    something files.export offers, so it is rejected rather than approximated.
    """
    if not is_convertible(mime_type):
        raise UnsupportedConversionError(
            f"Export is only supported for Google Workspace types, got: {mime_type}",
            details={"mime_type": mime_type},
        )
