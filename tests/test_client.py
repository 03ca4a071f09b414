from __future__ import annotations

import pytest
import requests

from drive_downloader.config import Settings
from drive_downloader.google_drive.client import GoogleDriveClient
from drive_downloader.google_drive.exceptions import GoogleDriveRequestError, GoogleDriveResponseError

from conftest import FILE_ID, FakeSession, make_response


def test_builds_fixed_download_url(settings):
    client = GoogleDriveClient(settings, session_factory=FakeSession)
    assert client.build_download_url(FILE_ID) == (
        f"https://drive.google.com/uc?export=download&id={FILE_ID}"
    )


def test_fetch_returns_whole_body_without_timeout(settings):
    session = FakeSession(response=make_response(200, b"%PDF-1.4 body"))
    client = GoogleDriveClient(settings, session_factory=lambda: session)

    assert client.fetch_bytes(FILE_ID) == b"%PDF-1.4 body"
    assert len(session.calls) == 1
    assert session.calls[0]["timeout"] is None
    assert session.headers["User-Agent"] == settings.user_agent


def test_fetch_uses_configured_timeout(tmp_path):
    settings = Settings(media_directory=tmp_path, request_timeout=5.0)
    session = FakeSession(response=make_response(200, b"x"))
    GoogleDriveClient(settings, session_factory=lambda: session).fetch_bytes(FILE_ID)
    assert session.calls[0]["timeout"] == 5.0


def test_fetch_raises_on_http_failure(settings):
    session = FakeSession(response=make_response(404, b"missing", reason="Not Found"))
    client = GoogleDriveClient(settings, session_factory=lambda: session)

    with pytest.raises(GoogleDriveResponseError) as excinfo:
        client.fetch_bytes(FILE_ID)
    assert excinfo.value.status_code == 404
    assert "Not Found" in str(excinfo.value)


def test_fetch_wraps_network_errors(settings):
    session = FakeSession(error=requests.ConnectionError("connection reset"))
    client = GoogleDriveClient(settings, session_factory=lambda: session)

    with pytest.raises(GoogleDriveRequestError, match="connection reset"):
        client.fetch_bytes(FILE_ID)


@pytest.mark.parametrize("status_code, reason", [(300, "Multiple Choices"), (304, "Not Modified")])
def test_fetch_rejects_non_2xx_success_below_400(settings, status_code, reason):
    session = FakeSession(response=make_response(status_code, b"<html>", reason=reason))
    client = GoogleDriveClient(settings, session_factory=lambda: session)

    with pytest.raises(GoogleDriveResponseError) as excinfo:
        client.fetch_bytes(FILE_ID)
    assert excinfo.value.status_code == status_code


def test_fetch_opens_and_closes_a_session_per_call(settings):
    sessions = []

    def factory() -> FakeSession:
        session = FakeSession(response=make_response(200, b"x"))
        sessions.append(session)
        return session

    client = GoogleDriveClient(settings, session_factory=factory)
    client.fetch_bytes(FILE_ID)
    client.fetch_bytes(FILE_ID)

    assert len(sessions) == 2
    assert all(s.opened == 1 and s.closed == 1 for s in sessions)
