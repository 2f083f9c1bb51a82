from __future__ import annotations
from pydantic import Field
from ambassador_api.schemas.base import CamelModel


class UploadRequest(CamelModel):
    file_name: str = Field(min_length=1, max_length=255)
    file_data: str = Field(min_length=1, description="base64-encoded bytes")
    mime_type: str | None = None


class UploadResponse(CamelModel):
    sas_url: str
    blob_path: str
    file_name: str


class ScreenshotUrl(CamelModel):
    sas_url: str
