from __future__ import annotations
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import datetime, timezone
import os
import structlog
from ambassador_api.config import settings
from ambassador_api.db import get_session
from ambassador_api.services import records

router = APIRouter(tags=["system"])
log = structlog.get_logger()

@router.get("/health")
async def health(request: Request):
    # no store access here; see /health/store
    return {
        "status": "ok",
        "environment": settings.environment,
        "time": datetime.now(timezone.utc).isoformat(),
        "databaseConfigured": bool(os.getenv("DATABASE_URL")),
        "jwtSecretConfigured": settings.jwt_secret_configured,
        "blobStorageConfigured": bool(os.getenv("S3_ENDPOINT")),
        "requestId": request.headers.get("x-request-id") or request.state.request_id,
    }

@router.get("/health/store")
async def store_health(session: AsyncSession = Depends(get_session)):
    results: dict[str, dict] = {}
    ok = True
    for name in records.COLLECTIONS:
        try:
            results[name] = {"status": "ok", "count": await records.count_collection(session, name)}
        except SQLAlchemyError:
            log.exception("store_check_failed", collection=name)
            await session.rollback()
            ok = False
            results[name] = {"status": "error"}
    return JSONResponse(
        status_code=200 if ok else 500,
        content={"connected": ok, "collections": results, "time": datetime.now(timezone.utc).isoformat()},
    )

@router.get("/version")
async def version():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "git_sha": settings.git_sha,
    }
