from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog
from ambassador_api.db import get_session
from ambassador_api.schemas.ambassador import AmbassadorPublic
from ambassador_api.schemas.auth import LoginRequest, LoginResponse
from ambassador_api.security import verify_password, issue_token
from ambassador_api.services import records

router = APIRouter(prefix="/auth", tags=["auth"])
log = structlog.get_logger()

@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, session: AsyncSession = Depends(get_session)):
    try:
        if payload.role == "admin":
            admin = await records.find_admin_by_email(session, payload.email)
            if not admin or not verify_password(payload.password, admin.password_hash):
                raise HTTPException(status_code=401, detail="Invalid credentials")
            token = issue_token(admin.id, admin.email, "admin")
            return LoginResponse(token=token, user={"email": admin.email, "role": "admin"})

        amb = await records.find_ambassador_by_email(session, payload.email)
        if not amb or not verify_password(payload.password, amb.password_hash):
            raise HTTPException(status_code=401, detail="Invalid credentials")
        token = issue_token(amb.id, amb.email, "ambassador", {"campus": amb.campus})
        user = AmbassadorPublic.model_validate(amb).model_dump(by_alias=True)
        return LoginResponse(token=token, user={**user, "role": "ambassador"})
    except SQLAlchemyError:
        log.exception("login_failed")
        raise HTTPException(status_code=500, detail="Server error")
