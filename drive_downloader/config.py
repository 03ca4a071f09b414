from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _as_float(value: Optional[str], *, default: Optional[float]) -> Optional[float]:
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


DEFAULT_DOWNLOAD_URL_TEMPLATE = "https://drive.google.com/uc?export=download&id={file_id}"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/128.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class Settings:
    download_url_template: str = os.getenv("GDRIVE_DOWNLOAD_URL_TEMPLATE", DEFAULT_DOWNLOAD_URL_TEMPLATE)
    # None means the request may block indefinitely.
    request_timeout: Optional[float] = _as_float(os.getenv("GDRIVE_REQUEST_TIMEOUT"), default=None)
    user_agent: str = os.getenv("GDRIVE_USER_AGENT", DEFAULT_USER_AGENT)
    media_directory: Path = Path(os.getenv("MEDIA_DIR", "downloads"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        settings = Settings()
        media_dir = settings.media_directory.expanduser().resolve()
        object.__setattr__(settings, "media_directory", media_dir)
        _settings = settings
    return _settings
