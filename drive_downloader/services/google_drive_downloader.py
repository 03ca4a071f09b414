from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Union

from drive_downloader.config import Settings
from drive_downloader.google_drive.client import GoogleDriveClient
from drive_downloader.google_drive.exceptions import (
    GoogleDriveError,
    GoogleDriveRequestError,
    GoogleDriveResponseError,
    GoogleDriveStorageError,
    InvalidGoogleDriveInputError,
)
from drive_downloader.google_drive.storage import GoogleDriveStorage, is_plain_name
from drive_downloader.google_drive.types import DownloadErrorKind, DownloadResult, DownloadTarget


logger = logging.getLogger(__name__)

_ERROR_KINDS = (
    (GoogleDriveResponseError, DownloadErrorKind.HTTP),
    (GoogleDriveRequestError, DownloadErrorKind.NETWORK),
    (GoogleDriveStorageError, DownloadErrorKind.FILESYSTEM),
    (InvalidGoogleDriveInputError, DownloadErrorKind.INVALID_INPUT),
)


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _error_kind(exc: GoogleDriveError) -> DownloadErrorKind:
    for error_type, kind in _ERROR_KINDS:
        if isinstance(exc, error_type):
            return kind
    return DownloadErrorKind.UNKNOWN


class GoogleDriveDownloaderService:
    def __init__(
        self,
        client: GoogleDriveClient,
        storage: GoogleDriveStorage,
        settings: Settings,
    ) -> None:
        self._client = client
        self._storage = storage
        self._settings = settings

    @property
    def storage(self) -> GoogleDriveStorage:
        return self._storage

    async def download(
        self,
        file_id: str,
        dir_path: Union[str, Path],
        filename: str,
        extension: str,
    ) -> DownloadResult:
        return await asyncio.to_thread(self.download_sync, file_id, dir_path, filename, extension)

    def download_sync(
        self,
        file_id: str,
        dir_path: Union[str, Path],
        filename: str,
        extension: str,
    ) -> DownloadResult:
        """Fetch ``file_id`` and save it as ``<dir_path>/<filename>.<extension>``.

        Failures never raise. They are logged and reported through the
        returned ``DownloadResult``, whose ``error`` tells the kind apart.
        """
        invalid = self._validate(file_id, dir_path, filename, extension)
        if invalid is not None:
            logger.error(invalid)
            return DownloadResult.failure(DownloadErrorKind.INVALID_INPUT, invalid)

        target = DownloadTarget(dir_path=dir_path, filename=filename, extension=str(extension))
        try:
            self._storage.ensure_directory(target.dir_path)
            content = self._client.fetch_bytes(file_id)
            path = self._storage.write_bytes(target.path, content)
        except GoogleDriveError as exc:
            logger.error("Error saving the document: %s", exc)
            return DownloadResult.failure(_error_kind(exc), str(exc))

        logger.info("Document saved successfully at %s", path)
        return DownloadResult.success(path)

    @staticmethod
    def _validate(file_id: Any, dir_path: Any, filename: Any, extension: Any) -> str | None:
        if not _is_non_empty_str(file_id):
            return "Invalid fileId provided"
        if not (_is_non_empty_str(dir_path) or isinstance(dir_path, Path)):
            return "Invalid directory path provided"
        if not _is_non_empty_str(filename):
            return "Invalid filename provided"
        if not is_plain_name(filename):
            return "Filename must not contain path separators"
        if not is_plain_name(str(extension), allow_empty=True):
            return "Extension must not contain path separators"
        return None
