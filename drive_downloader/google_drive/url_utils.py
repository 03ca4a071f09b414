from __future__ import annotations

import re
from dataclasses import dataclass

from .exceptions import InvalidGoogleDriveInputError, InvalidGoogleDriveUrlError


_FILE_ID_RE = re.compile(r"/d/([a-zA-Z0-9_-]+)/")


@dataclass(frozen=True)
class ParsedGoogleDriveUrl:
    file_id: str
    original_url: str


def get_file_id_from_url(url: str) -> str:
    """Return the file id embedded in a share URL.

    Only the ``/d/<id>/`` path form is recognised, e.g.
    ``https://drive.google.com/file/d/<id>/view?usp=sharing``. The slash after
    the id is required; ``?id=`` query links are not supported.

    Raises ``InvalidGoogleDriveInputError`` when ``url`` is not a non-empty
    string and ``InvalidGoogleDriveUrlError`` when no id can be found.
    """
    if not url or not isinstance(url, str):
        raise InvalidGoogleDriveInputError("A valid URL string must be provided.")

    match = _FILE_ID_RE.search(url)
    if not match:
        raise InvalidGoogleDriveUrlError("Could not extract the file ID from the provided URL.")
    return match.group(1)


def parse_google_drive_url(url: str) -> ParsedGoogleDriveUrl:
    file_id = get_file_id_from_url(url)
    return ParsedGoogleDriveUrl(file_id=file_id, original_url=url)
