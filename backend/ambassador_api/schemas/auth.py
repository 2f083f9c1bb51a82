from __future__ import annotations
from typing import Any, Literal
from pydantic import BaseModel, Field
from ambassador_api.schemas.base import AccountEmail

class LoginRequest(BaseModel):
    email: AccountEmail
    password: str = Field(min_length=1)
    role: str | None = None

class LoginResponse(BaseModel):
    token: str
    user: dict[str, Any]

class Identity(BaseModel):
    """Claims carried by a verified bearer token."""
    id: str
    email: str
    role: Literal["admin", "ambassador"]
    campus: str | None = None
