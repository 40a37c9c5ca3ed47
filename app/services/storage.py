"""Object storage for photos and audio (Supabase Storage REST API)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Literal, Optional
from uuid import UUID

import httpx

from app.config import STORAGE_TIMEOUT, SUPABASE_SERVICE_ROLE_KEY, SUPABASE_URL
from app.services.errors import StorageError

logger = logging.getLogger(__name__)

Bucket = Literal["child-photos", "diary-photos", "strategy-audio"]


def build_object_path(account_id: UUID | str, filename: str, now: Optional[datetime] = None) -> str:
    """``{account_id}/{upload_timestamp_ms}.{extension}``."""
    now = now or datetime.now()
    extension = filename.rsplit(".", 1)[-1]
    return f"{account_id}/{int(now.timestamp() * 1000)}.{extension}"


def path_from_public_url(bucket: str, url: str) -> str:
    """Recover the object path from a public URL issued for ``bucket``."""
    parts = url.split(f"{bucket}/", 1)
    if len(parts) < 2 or not parts[1]:
        raise ValueError("Invalid file URL")
    return parts[1]


@dataclass
class StorageClient:
    base_url: str
    api_key: str
    timeout: float = STORAGE_TIMEOUT

    def _headers(self, extra: Optional[dict[str, str]] = None) -> dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
        }
        if extra:
            headers.update(extra)
        return headers

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{bucket}/{path}"

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, url, **kwargs)

    async def upload_file(
        self,
        bucket: Bucket,
        account_id: UUID | str,
        filename: str,
        content: bytes,
        content_type: Optional[str] = None,
    ) -> str:
        """Upload under a fresh path (never overwrites) and return its public URL."""
        path = build_object_path(account_id, filename)
        resp = await self._request(
            "POST",
            f"{self.base_url}/storage/v1/object/{bucket}/{path}",
            content=content,
            headers=self._headers({
                "Content-Type": content_type or "application/octet-stream",
                "cache-control": "max-age=3600",
                "x-upsert": "false",
            }),
        )
        if resp.status_code >= 400:
            logger.warning("Upload to %s failed (%s)", bucket, resp.status_code)
            raise StorageError("upload", resp.status_code, resp.text or "<empty response>")
        logger.info("Uploaded %s/%s (%d bytes)", bucket, path, len(content))
        return self.public_url(bucket, path)

    async def delete_file(self, bucket: Bucket, url: str) -> None:
        path = path_from_public_url(bucket, url)
        resp = await self._request(
            "DELETE",
            f"{self.base_url}/storage/v1/object/{bucket}",
            json={"prefixes": [path]},
            headers=self._headers({"Content-Type": "application/json"}),
        )
        if resp.status_code >= 400:
            logger.warning("Delete from %s failed (%s)", bucket, resp.status_code)
            raise StorageError("delete", resp.status_code, resp.text or "<empty response>")


@lru_cache
def get_storage_client() -> StorageClient:
    if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
        raise RuntimeError("Missing SUPABASE_URL/SUPABASE_SERVICE_ROLE_KEY for storage access.")
    return StorageClient(base_url=SUPABASE_URL, api_key=SUPABASE_SERVICE_ROLE_KEY)
