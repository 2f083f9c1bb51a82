from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Any, Literal, Optional
import jwt
from passlib.context import CryptContext
from ambassador_api.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

JWT_ALG = "HS256"
Role = Literal["admin", "ambassador"]

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        # unknown or corrupt hash format
        return False

def issue_token(
    identity_id: str,
    email: str,
    role: Role,
    attributes: Optional[dict[str, Any]] = None,
    *,
    now: Optional[datetime] = None,
) -> str:
    """Sign a bearer token binding id, email, role and role-specific attributes (e.g. campus)."""
    now = now or datetime.now(timezone.utc)
    payload = {
        **(attributes or {}),
        "id": identity_id,
        "email": email,
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=settings.token_ttl_hours)).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=JWT_ALG)

def verify_token(token: Optional[str]) -> Optional[dict[str, Any]]:
    """Return the embedded claims, or None when the token is missing, forged, expired or malformed."""
    if not token:
        return None
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[JWT_ALG],
            options={"require": ["exp", "id", "role"]},
        )
    except jwt.PyJWTError:
        return None
    if claims.get("role") not in ("admin", "ambassador"):
        return None
    return claims
