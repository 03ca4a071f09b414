from __future__ import annotations

from functools import lru_cache

from drive_downloader.config import Settings, get_settings
from drive_downloader.google_drive.client import GoogleDriveClient
from drive_downloader.google_drive.storage import GoogleDriveStorage
from drive_downloader.services.google_drive_downloader import GoogleDriveDownloaderService


@lru_cache(maxsize=1)
def get_google_drive_service() -> GoogleDriveDownloaderService:
    settings = get_settings()
    client = GoogleDriveClient(settings)
    root = settings.media_directory / "google-drive"
    storage = GoogleDriveStorage(root)
    return GoogleDriveDownloaderService(client=client, storage=storage, settings=settings)


def get_settings_dependency() -> Settings:
    return get_settings()
