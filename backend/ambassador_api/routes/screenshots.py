from __future__ import annotations
from datetime import timedelta
from fastapi import APIRouter, Depends, HTTPException, Query
from minio.error import MinioException
from urllib3.exceptions import HTTPError as TransportError
import structlog
from ambassador_api.auth_deps import get_current_identity
from ambassador_api.config import settings
from ambassador_api.schemas.auth import Identity
from ambassador_api.schemas.upload import UploadRequest, UploadResponse, ScreenshotUrl
from ambassador_api.services.storage import BlobVault, UploadTooLarge, decode_upload, get_vault, make_blob_path

router = APIRouter(tags=["screenshots"])
log = structlog.get_logger()

VAULT_ERRORS = (MinioException, TransportError, OSError)

@router.post("/upload", response_model=UploadResponse)
async def upload_screenshot(payload: UploadRequest, vault: BlobVault = Depends(get_vault)):
    """
    Anonymous upload into the private vault. The response carries the handle
    (to be stored on the submission) and a one-hour URL for the confirmation screen.
    """
    try:
        data = decode_upload(payload.file_data)
    except UploadTooLarge:
        max_mb = settings.upload_max_bytes // (1024 * 1024)
        raise HTTPException(status_code=413, detail=f"File too large. Max {max_mb}MB.")
    except ValueError:
        raise HTTPException(status_code=400, detail="fileName and fileData (base64) required")

    blob_path = make_blob_path(payload.file_name)
    try:
        await vault.put_bytes(blob_path, data, payload.mime_type)
        sas_url = vault.presign_get(blob_path, timedelta(minutes=settings.upload_url_ttl_minutes))
    except VAULT_ERRORS:
        log.exception("upload_failed", blob_path=blob_path)
        raise HTTPException(status_code=500, detail="Upload failed")
    log.info("screenshot_uploaded", blob_path=blob_path, size=len(data))
    return UploadResponse(sas_url=sas_url, blob_path=blob_path, file_name=blob_path)

@router.get("/view-screenshot", response_model=ScreenshotUrl)
async def view_screenshot(
    blob_path: str = Query(..., alias="blobPath", min_length=1),
    vault: BlobVault = Depends(get_vault),
    identity: Identity = Depends(get_current_identity),
):
    # fresh short-lived URL per request; nothing is persisted
    try:
        sas_url = vault.presign_get(blob_path, timedelta(minutes=settings.view_url_ttl_minutes))
    except VAULT_ERRORS:
        log.exception("view_url_failed", blob_path=blob_path)
        raise HTTPException(status_code=500, detail="Failed to generate view URL")
    return ScreenshotUrl(sas_url=sas_url)
