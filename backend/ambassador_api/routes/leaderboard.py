from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog
from ambassador_api.auth_deps import require_admin
from ambassador_api.db import get_session
from ambassador_api.schemas.ambassador import LeaderboardRow
from ambassador_api.schemas.auth import Identity
from ambassador_api.services.leaderboard import leaderboard

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])
log = structlog.get_logger()

@router.get("", response_model=list[LeaderboardRow])
async def get_leaderboard(
    session: AsyncSession = Depends(get_session),
    admin: Identity = Depends(require_admin),
):
    try:
        return await leaderboard(session)
    except SQLAlchemyError:
        log.exception("leaderboard_failed")
        raise HTTPException(status_code=500, detail="Failed to compute leaderboard")
