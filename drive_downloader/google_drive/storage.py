from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import GoogleDriveStorageError, InvalidGoogleDriveInputError


_SEPARATORS = {"/", "\\", os.sep}


def is_plain_name(value: Any, *, allow_empty: bool = False) -> bool:
    """True when ``value`` is a string usable as a single path component."""
    if not isinstance(value, str):
        return False
    if not value:
        return allow_empty
    if value in {".", ".."}:
        return False
    return not any(sep in value for sep in _SEPARATORS)


class GoogleDriveStorage:
    def __init__(self, root: Optional[Path] = None) -> None:
        self._root = root

    @property
    def root(self) -> Optional[Path]:
        return self._root

    def resolve_within_root(self, directory: Optional[str]) -> Path:
        """Map a caller-supplied relative directory onto the storage root."""
        if self._root is None:
            raise GoogleDriveStorageError("Storage has no root directory configured")
        if not directory:
            return self._root
        candidate = Path(directory)
        if candidate.is_absolute() or ".." in candidate.parts:
            raise InvalidGoogleDriveInputError("Directory must be relative and stay inside the download root")
        return self._root / candidate

    @staticmethod
    def check_file_name(filename: Any, extension: Any) -> None:
        if not is_plain_name(filename):
            raise InvalidGoogleDriveInputError("Filename must be a plain name without path separators")
        if not is_plain_name(extension, allow_empty=True):
            raise InvalidGoogleDriveInputError("Extension must not contain path separators")

    @staticmethod
    def ensure_directory(dir_path: Union[str, Path]) -> Path:
        directory = Path(dir_path)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise GoogleDriveStorageError(f"Could not create directory '{directory}': {exc}") from exc
        return directory

    @staticmethod
    def write_bytes(path: Path, content: bytes) -> Path:
        # Overwrites in place; concurrent writers to one path race.
        try:
            path.write_bytes(content)
        except OSError as exc:
            raise GoogleDriveStorageError(f"Could not write file '{path}': {exc}") from exc
        return path
