"""Photo and audio uploads to object storage."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from pydantic import BaseModel

from app.api.auth import CurrentAccount
from app.services.storage import Bucket, StorageClient, get_storage_client, path_from_public_url

router = APIRouter(prefix="/uploads", tags=["uploads"])

StorageDep = Annotated[StorageClient, Depends(get_storage_client)]

# Max upload size: 10 MB
_MAX_BYTES = 10 * 1024 * 1024


class UploadResponse(BaseModel):
    url: str


@router.post("/{bucket}", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(
    bucket: Bucket,
    account: CurrentAccount,
    storage: StorageDep,
    file: UploadFile = File(...),
) -> UploadResponse:
    """Store a file under ``{account_id}/{timestamp}.{ext}`` and return its public URL."""
    if bucket == "strategy-audio" and account.role != "creator":
        raise HTTPException(status_code=403, detail="Creator account required.")
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Empty file")
    if len(content) > _MAX_BYTES:
        raise HTTPException(status_code=413, detail="File too large (max 10 MB)")
    url = await storage.upload_file(
        bucket, account.user_id, file.filename or "upload.bin", content, file.content_type
    )
    return UploadResponse(url=url)


@router.delete("/{bucket}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(
    bucket: Bucket,
    account: CurrentAccount,
    storage: StorageDep,
    url: str = Query(..., description="Public URL returned by the upload"),
) -> None:
    try:
        path = path_from_public_url(bucket, url)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if ".." in path.split("/"):
        raise HTTPException(status_code=400, detail="Invalid file URL")
    # Objects live under the uploader's account folder
    if not path.startswith(f"{account.user_id}/"):
        raise HTTPException(status_code=403, detail="Not your file")
    await storage.delete_file(bucket, url)
