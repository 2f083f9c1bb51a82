from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog
from ambassador_api.auth_deps import get_current_identity
from ambassador_api.db import get_session
from ambassador_api.schemas.auth import Identity
from ambassador_api.schemas.submission import SubmissionCreate, SubmissionPublic
from ambassador_api.services import records

router = APIRouter(prefix="/submissions", tags=["submissions"])
log = structlog.get_logger()

@router.post("", response_model=SubmissionPublic, status_code=201)
async def create_submission(payload: SubmissionCreate, session: AsyncSession = Depends(get_session)):
    """Anonymous: the audience member scanning a QR code has no account. Event existence is not checked."""
    try:
        sub = await records.insert_submission(
            session,
            event_id=payload.event_id,
            email=payload.email,
            campus=payload.campus,
            blob_path=payload.blob_path,
            screenshot_name=payload.screenshot_name,
        )
    except SQLAlchemyError:
        log.exception("submission_create_failed", event_id=payload.event_id)
        raise HTTPException(status_code=500, detail="Failed to create submission")
    log.info("submission_created", submission_id=sub.id, event_id=sub.event_id)
    return SubmissionPublic.model_validate(sub)

@router.get("", response_model=list[SubmissionPublic])
async def list_submissions(
    event_id: str | None = Query(default=None, alias="eventId"),
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
):
    # any authenticated identity sees every submission, regardless of event membership
    try:
        rows = await records.list_submissions(session, event_id=event_id)
    except SQLAlchemyError:
        log.exception("submissions_fetch_failed")
        raise HTTPException(status_code=500, detail="Failed to fetch submissions")
    return [SubmissionPublic.model_validate(s) for s in rows]
