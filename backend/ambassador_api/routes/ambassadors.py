from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog
from ambassador_api.auth_deps import require_admin
from ambassador_api.db import get_session
from ambassador_api.schemas.ambassador import AmbassadorCreate, AmbassadorPublic
from ambassador_api.schemas.auth import Identity
from ambassador_api.security import hash_password
from ambassador_api.services import records

router = APIRouter(prefix="/ambassadors", tags=["ambassadors"])
log = structlog.get_logger()

DUPLICATE = "An ambassador with this email already exists"

@router.get("", response_model=list[AmbassadorPublic])
async def list_ambassadors(
    session: AsyncSession = Depends(get_session),
    admin: Identity = Depends(require_admin),
):
    try:
        rows = await records.list_ambassadors(session)
    except SQLAlchemyError:
        log.exception("ambassadors_fetch_failed")
        raise HTTPException(status_code=500, detail="Failed to fetch ambassadors")
    return [AmbassadorPublic.model_validate(a) for a in rows]

@router.post("", response_model=AmbassadorPublic, status_code=201)
async def create_ambassador(
    payload: AmbassadorCreate,
    session: AsyncSession = Depends(get_session),
    admin: Identity = Depends(require_admin),
):
    try:
        # scan-then-insert; the unique index on email catches the racing case
        if await records.ambassador_email_taken(session, payload.email):
            raise HTTPException(status_code=409, detail=DUPLICATE)
        amb = await records.insert_ambassador(
            session,
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
            campus=payload.campus,
        )
    except IntegrityError:
        await session.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE)
    except SQLAlchemyError:
        log.exception("ambassador_create_failed")
        raise HTTPException(status_code=500, detail="Failed to create ambassador")
    log.info("ambassador_created", ambassador_id=amb.id, by=admin.id)
    return AmbassadorPublic.model_validate(amb)
