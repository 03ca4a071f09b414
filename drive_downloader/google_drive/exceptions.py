from __future__ import annotations

from typing import Optional


class GoogleDriveError(Exception):
    """Base error for Google Drive download failures."""


class InvalidGoogleDriveInputError(GoogleDriveError, ValueError):
    """Raised when an argument is missing, empty or not a string."""


class InvalidGoogleDriveUrlError(GoogleDriveError):
    """Raised when Google Drive URL cannot be parsed or lacks a file id."""


class GoogleDriveRequestError(GoogleDriveError):
    """Raised when the request to Google Drive could not be completed."""


class GoogleDriveResponseError(GoogleDriveError):
    """Raised when Google Drive answers with a non-success status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GoogleDriveStorageError(GoogleDriveError):
    """Raised when the destination directory or file cannot be written."""
