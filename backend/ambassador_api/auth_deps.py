from __future__ import annotations
from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from ambassador_api.schemas.auth import Identity
from ambassador_api.security import verify_token

# auto_error off: a missing header must surface as our 401 body, not FastAPI's 403
security = HTTPBearer(auto_error=False)

async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Identity:
    claims = verify_token(credentials.credentials if credentials else None)
    if claims is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return Identity.model_validate(claims)

async def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    if identity.role != "admin":
        raise HTTPException(status_code=403, detail="Forbidden")
    return identity
