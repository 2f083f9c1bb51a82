from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog
from ambassador_api.auth_deps import get_current_identity
from ambassador_api.db import get_session
from ambassador_api.schemas.auth import Identity
from ambassador_api.schemas.event import EventCreate, EventPublic, EventSummary
from ambassador_api.services import records

router = APIRouter(tags=["events"])
log = structlog.get_logger()

@router.get("/events", response_model=list[EventPublic])
async def list_events(
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
):
    # admins see everything; ambassadors only events they are listed on
    member_id = None if identity.role == "admin" else identity.id
    try:
        rows = await records.list_events(session, member_id=member_id)
    except SQLAlchemyError:
        log.exception("events_fetch_failed")
        raise HTTPException(status_code=500, detail="Failed to fetch events")
    return [EventPublic.model_validate(ev) for ev in rows]

@router.post("/events", response_model=EventPublic, status_code=201)
async def create_event(
    payload: EventCreate,
    session: AsyncSession = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
):
    ids = payload.ambassador_ids
    if identity.id not in ids:
        ids = [identity.id, *ids]
    try:
        ev = await records.insert_event(
            session,
            title=payload.title,
            campus=payload.campus,
            date=payload.date,
            total_audience=payload.total_audience,
            ambassador_ids=ids,
        )
    except SQLAlchemyError:
        log.exception("event_create_failed")
        raise HTTPException(status_code=500, detail="Failed to create event")
    log.info("event_created", event_id=ev.id, by=identity.id, role=identity.role)
    return EventPublic.model_validate(ev)

@router.get("/event-public", response_model=EventSummary)
async def event_public(
    id: str = Query(..., min_length=1),
    session: AsyncSession = Depends(get_session),
):
    try:
        ev = await records.get_event(session, id)
    except SQLAlchemyError:
        log.exception("event_fetch_failed", event_id=id)
        raise HTTPException(status_code=500, detail="Failed to fetch event")
    if not ev:
        raise HTTPException(status_code=404, detail="Event not found")
    return EventSummary.model_validate(ev)
