from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class DriveFileIdRequest(BaseModel):
    url: str = Field(..., description="Google Drive sharing link")


class DriveFileIdResponse(BaseModel):
    file_id: str


class DriveDownloadRequest(BaseModel):
    url: Optional[str] = Field(default=None, description="Google Drive sharing link")
    file_id: Optional[str] = Field(default=None, description="Google Drive file id")
    filename: str = Field(..., min_length=1, description="Base file name, without extension")
    extension: str = Field(..., description="File extension, e.g. 'pdf'")
    directory: Optional[str] = Field(
        default=None,
        description="Sub-directory of the download root to save into",
    )

    @model_validator(mode="after")
    def _require_source(self) -> "DriveDownloadRequest":
        if not self.url and not self.file_id:
            raise ValueError("Either url or file_id must be provided")
        return self


class DriveFileMetadata(BaseModel):
    file_id: str
    local_path: str
    size_bytes: Optional[int] = None


class DriveDownloadResponse(BaseModel):
    file: DriveFileMetadata
