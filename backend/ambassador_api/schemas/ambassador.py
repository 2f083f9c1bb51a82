from __future__ import annotations
from pydantic import Field
from ambassador_api.schemas.base import AccountEmail, CamelModel


class AmbassadorCreate(CamelModel):
    name: str = Field(min_length=1, max_length=120)
    email: AccountEmail
    password: str = Field(min_length=1, max_length=128)
    campus: str = Field(min_length=1, max_length=120)


class AmbassadorPublic(CamelModel):
    # deliberately no password field of any kind
    id: str
    name: str
    email: str
    campus: str
    created_at: int


class LeaderboardRow(CamelModel):
    id: str
    name: str
    email: str
    campus: str
    events: int
    reach: int
    proofs: int
    conversion_rate: int
