from __future__ import annotations
import uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, BigInteger
from ambassador_api.db import Base
from ambassador_api.services.codes import now_ms


class Submission(Base):
    __tablename__ = "submissions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # not a foreign key: audience members may submit for any event id
    event_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    campus: Mapped[str] = mapped_column(String(120), nullable=False)
    # vault handle, never a URL
    blob_path: Mapped[str] = mapped_column(Text(), nullable=False)
    screenshot_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    uploaded_at: Mapped[int] = mapped_column(BigInteger, index=True, nullable=False, default=now_ms)  # epoch millis
