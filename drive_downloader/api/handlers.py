from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from drive_downloader.dependencies import get_google_drive_service
from drive_downloader.google_drive.exceptions import (
    GoogleDriveStorageError,
    InvalidGoogleDriveInputError,
    InvalidGoogleDriveUrlError,
)
from drive_downloader.google_drive.types import DownloadErrorKind
from drive_downloader.google_drive.url_utils import get_file_id_from_url
from drive_downloader.models import (
    DriveDownloadRequest,
    DriveDownloadResponse,
    DriveFileIdRequest,
    DriveFileIdResponse,
    DriveFileMetadata,
)
from drive_downloader.services.google_drive_downloader import GoogleDriveDownloaderService

router = APIRouter()
gdrive_router = APIRouter(prefix="/google-drive", tags=["google-drive"])

_ERROR_STATUS = {
    DownloadErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    DownloadErrorKind.NETWORK: status.HTTP_502_BAD_GATEWAY,
    DownloadErrorKind.HTTP: status.HTTP_502_BAD_GATEWAY,
    DownloadErrorKind.FILESYSTEM: status.HTTP_500_INTERNAL_SERVER_ERROR,
    DownloadErrorKind.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@gdrive_router.post("/file-id", response_model=DriveFileIdResponse)
async def extract_google_drive_file_id(request: DriveFileIdRequest) -> DriveFileIdResponse:
    try:
        file_id = get_file_id_from_url(request.url)
    except (InvalidGoogleDriveInputError, InvalidGoogleDriveUrlError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return DriveFileIdResponse(file_id=file_id)


@gdrive_router.post("/download", response_model=DriveDownloadResponse)
async def download_google_drive_file(
    request: DriveDownloadRequest,
    service: GoogleDriveDownloaderService = Depends(get_google_drive_service),
) -> DriveDownloadResponse:
    try:
        file_id = request.file_id or get_file_id_from_url(request.url)
        directory = service.storage.resolve_within_root(request.directory)
        service.storage.check_file_name(request.filename, request.extension)
    except (InvalidGoogleDriveInputError, InvalidGoogleDriveUrlError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except GoogleDriveStorageError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc

    result = await service.download(file_id, directory, request.filename, request.extension)
    if not result.ok:
        raise HTTPException(status_code=_ERROR_STATUS[result.error], detail=result.message)

    metadata = DriveFileMetadata(
        file_id=file_id,
        local_path=str(result.path),
        size_bytes=result.path.stat().st_size,
    )
    return DriveDownloadResponse(file=metadata)


router.include_router(gdrive_router)
