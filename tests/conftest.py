from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest
import requests

from drive_downloader.config import Settings
from drive_downloader.google_drive.client import GoogleDriveClient
from drive_downloader.google_drive.storage import GoogleDriveStorage
from drive_downloader.services.google_drive_downloader import GoogleDriveDownloaderService


FILE_ID = "1CwGEerIO-bunXA0e_yXySEmKNuSECytW"


def make_response(status_code: int, content: bytes = b"", reason: str = "OK") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = content
    return response


class FakeSession:
    def __init__(
        self,
        response: Optional[requests.Response] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.headers: dict = {}
        self.opened = 0
        self.closed = 0
        self.calls: List[dict] = []
        self._response = response
        self._error = error

    def __enter__(self) -> "FakeSession":
        self.opened += 1
        return self

    def __exit__(self, *exc_info) -> None:
        self.closed += 1

    def get(self, url: str, **kwargs) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        if self._error is not None:
            raise self._error
        return self._response


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(media_directory=tmp_path / "media", request_timeout=None)


@pytest.fixture
def make_service(settings: Settings, tmp_path: Path):
    def _make(session: FakeSession) -> GoogleDriveDownloaderService:
        client = GoogleDriveClient(settings, session_factory=lambda: session)
        storage = GoogleDriveStorage(tmp_path / "media" / "google-drive")
        return GoogleDriveDownloaderService(client=client, storage=storage, settings=settings)

    return _make
