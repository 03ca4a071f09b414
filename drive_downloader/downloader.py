from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from drive_downloader.dependencies import get_google_drive_service
from drive_downloader.google_drive.types import DownloadResult


async def download_file_result(
    file_id: str,
    dir_path: Union[str, Path],
    filename: str,
    extension: str,
) -> DownloadResult:
    service = get_google_drive_service()
    return await service.download(file_id, dir_path, filename, extension)


async def download_file(
    file_id: str,
    dir_path: Union[str, Path],
    filename: str,
    extension: str,
) -> Optional[str]:
    """Download a Drive file to ``<dir_path>/<filename>.<extension>``.

    Returns the destination path as a string, or ``None`` if anything went
    wrong. Use ``download_file_result`` to find out why.
    """
    result = await download_file_result(file_id, dir_path, filename, extension)
    if result.path is None:
        return None
    return str(result.path)
