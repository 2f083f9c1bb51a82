from __future__ import annotations
from pydantic import Field
from ambassador_api.schemas.base import CamelModel


class SubmissionCreate(CamelModel):
    event_id: str = Field(min_length=1, max_length=64)
    # audience emails are taken as typed; no format check on the anonymous path
    email: str = Field(min_length=1, max_length=320)
    campus: str = Field(min_length=1, max_length=120)
    blob_path: str = Field(min_length=1)
    screenshot_name: str | None = Field(default=None, max_length=255)


class SubmissionPublic(CamelModel):
    id: str
    event_id: str
    email: str
    campus: str
    # 🔒 vault handle only; signed URLs come from /view-screenshot
    blob_path: str
    screenshot_name: str | None = None
    uploaded_at: int
