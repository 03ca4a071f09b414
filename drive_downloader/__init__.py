from __future__ import annotations

from .downloader import download_file, download_file_result
from .google_drive.url_utils import get_file_id_from_url

__all__ = [
    "download_file",
    "download_file_result",
    "get_file_id_from_url",
]
