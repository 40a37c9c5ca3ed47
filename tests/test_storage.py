"""Object storage paths and the Supabase Storage client."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import UUID

import pytest

from app.services.errors import StorageError
from app.services.storage import StorageClient, build_object_path, path_from_public_url

ACCOUNT = UUID("11111111-1111-1111-1111-111111111111")


def _client() -> StorageClient:
    return StorageClient(base_url="https://proj.supabase.co", api_key="service-key")


def _response(status_code: int, text: str = "") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    return resp


def test_object_path_convention():
    now = datetime.fromtimestamp(1_700_000_000.5)
    assert build_object_path(ACCOUNT, "Slide.JPG", now) == f"{ACCOUNT}/1700000000500.JPG"


def test_object_path_keeps_last_extension():
    now = datetime.fromtimestamp(1_700_000_000)
    assert build_object_path(ACCOUNT, "voice.note.m4a", now).endswith(".m4a")


def test_path_from_public_url():
    url = f"https://proj.supabase.co/storage/v1/object/public/diary-photos/{ACCOUNT}/1.jpg"
    assert path_from_public_url("diary-photos", url) == f"{ACCOUNT}/1.jpg"


def test_path_from_foreign_url():
    with pytest.raises(ValueError):
        path_from_public_url("diary-photos", "https://elsewhere.example/pic.jpg")


def test_public_url():
    assert _client().public_url("child-photos", "a/1.png") == (
        "https://proj.supabase.co/storage/v1/object/public/child-photos/a/1.png"
    )


async def test_upload_returns_public_url():
    client = _client()
    with patch.object(StorageClient, "_request", AsyncMock(return_value=_response(200))) as request:
        url = await client.upload_file("child-photos", ACCOUNT, "maya.png", b"png", "image/png")

    method, target = request.await_args.args
    headers = request.await_args.kwargs["headers"]
    assert method == "POST"
    assert target.startswith(f"https://proj.supabase.co/storage/v1/object/child-photos/{ACCOUNT}/")
    assert headers["x-upsert"] == "false"
    assert headers["Content-Type"] == "image/png"
    assert url.startswith(f"https://proj.supabase.co/storage/v1/object/public/child-photos/{ACCOUNT}/")
    assert url.endswith(".png")


async def test_upload_failure_raises():
    client = _client()
    with patch.object(StorageClient, "_request", AsyncMock(return_value=_response(400, "Duplicate"))):
        with pytest.raises(StorageError) as exc:
            await client.upload_file("diary-photos", ACCOUNT, "a.jpg", b"x")
    assert exc.value.status_code == 400
    assert exc.value.action == "upload"


async def test_delete_file():
    client = _client()
    url = client.public_url("strategy-audio", f"{ACCOUNT}/9.mp3")
    with patch.object(StorageClient, "_request", AsyncMock(return_value=_response(200))) as request:
        await client.delete_file("strategy-audio", url)
    assert request.await_args.kwargs["json"] == {"prefixes": [f"{ACCOUNT}/9.mp3"]}
