"""Remote Drive access for redrive."""

from __future__ import annotations

from .drive_client import GoogleDriveClient
from .protocol import FetchResponse, RemoteResourceClient

__all__ = ["GoogleDriveClient", "FetchResponse", "RemoteResourceClient"]
