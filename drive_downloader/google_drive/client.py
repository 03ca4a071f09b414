from __future__ import annotations

import logging
from typing import Callable

import requests

from drive_downloader.config import Settings
from .exceptions import GoogleDriveRequestError, GoogleDriveResponseError


logger = logging.getLogger(__name__)


class GoogleDriveClient:
    def __init__(
        self,
        settings: Settings,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self._settings = settings
        # One session per request; downloads run in worker threads.
        self._session_factory = session_factory

    def build_download_url(self, file_id: str) -> str:
        return self._settings.download_url_template.format(file_id=file_id)

    def fetch_bytes(self, file_id: str) -> bytes:
        """Issue a single GET for ``file_id`` and return the whole body.

        Only 2xx answers count as success. The body is buffered in memory.
        Drive's HTML warning page for large files is returned as-is.
        """
        url = self.build_download_url(file_id)
        logger.debug("Requesting %s", url)
        try:
            with self._session_factory() as session:
                session.headers.update({"User-Agent": self._settings.user_agent})
                response = session.get(url, timeout=self._settings.request_timeout)
        except requests.RequestException as exc:
            raise GoogleDriveRequestError(f"Failed to fetch document: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise GoogleDriveResponseError(
                f"Failed to fetch document: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )
        return response.content
