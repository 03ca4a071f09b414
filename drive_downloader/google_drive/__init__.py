from __future__ import annotations

from .exceptions import (
    GoogleDriveError,
    GoogleDriveRequestError,
    GoogleDriveResponseError,
    GoogleDriveStorageError,
    InvalidGoogleDriveInputError,
    InvalidGoogleDriveUrlError,
)
from .types import DownloadErrorKind, DownloadResult, DownloadTarget
from .url_utils import ParsedGoogleDriveUrl, get_file_id_from_url, parse_google_drive_url

__all__ = [
    "DownloadErrorKind",
    "DownloadResult",
    "DownloadTarget",
    "GoogleDriveError",
    "GoogleDriveRequestError",
    "GoogleDriveResponseError",
    "GoogleDriveStorageError",
    "InvalidGoogleDriveInputError",
    "InvalidGoogleDriveUrlError",
    "ParsedGoogleDriveUrl",
    "get_file_id_from_url",
    "parse_google_drive_url",
]
