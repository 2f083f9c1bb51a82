from __future__ import annotations
import math
import re
from typing import Any, List
from pydantic import Field, field_validator
from ambassador_api.schemas.base import CamelModel


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class EventCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    campus: str = Field(min_length=1, max_length=120)
    date: str = Field(min_length=1, max_length=64)
    total_audience: int = Field(ge=1)
    ambassador_ids: List[str] = Field(min_length=1)

    @field_validator("total_audience", mode="before")
    @classmethod
    def leading_integer(cls, v: Any):
        # "3.7", 3.7 and "40 people" all count as their leading whole number
        if isinstance(v, bool):
            raise ValueError("totalAudience must be a number")
        if isinstance(v, float):
            return int(v) if math.isfinite(v) else v
        if isinstance(v, str):
            m = _LEADING_INT.match(v)
            return int(m.group(1)) if m else v
        return v

    @field_validator("ambassador_ids")
    @classmethod
    def no_blank_ids(cls, v: list[str]):
        if any(not i for i in v):
            raise ValueError("ambassadorIds must not contain empty ids")
        return v


class EventPublic(CamelModel):
    id: str
    title: str
    campus: str
    date: str
    total_audience: int
    ambassador_ids: List[str]
    qr_code: str
    created_at: int


class EventSummary(CamelModel):
    """What the anonymous QR landing page may see."""
    id: str
    title: str
    campus: str
    date: str
