from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath
from typing import Optional, Union


class DownloadErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    NETWORK = "network"
    HTTP = "http"
    FILESYSTEM = "filesystem"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DownloadTarget:
    dir_path: Union[str, Path]
    filename: str
    extension: str

    @property
    def path(self) -> Path:
        # A leading anchor on the name is dropped so the file stays under dir_path.
        name = PurePath(f"{self.filename}.{self.extension}")
        parts = name.parts[1:] if name.anchor else name.parts
        return Path(self.dir_path, *parts)


@dataclass(frozen=True)
class DownloadResult:
    path: Optional[Path] = None
    error: Optional[DownloadErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.path is not None

    @classmethod
    def success(cls, path: Path) -> "DownloadResult":
        return cls(path=path)

    @classmethod
    def failure(cls, error: DownloadErrorKind, message: str) -> "DownloadResult":
        return cls(error=error, message=message)
