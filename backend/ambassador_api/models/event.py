from __future__ import annotations
import uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Integer, BigInteger, ForeignKey
from ambassador_api.db import Base
from ambassador_api.services.codes import generate_code, now_ms


class Event(Base):
    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    campus: Mapped[str] = mapped_column(String(120), nullable=False)
    date: Mapped[str] = mapped_column(String(64), nullable=False)
    total_audience: Mapped[int] = mapped_column(Integer, nullable=False)
    qr_code: Mapped[str] = mapped_column(String(16), nullable=False, default=generate_code)
    created_at: Mapped[int] = mapped_column(BigInteger, index=True, nullable=False, default=now_ms)  # epoch millis

    members: Mapped[list["EventAmbassador"]] = relationship(
        back_populates="event",
        order_by="EventAmbassador.position",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    @property
    def ambassador_ids(self) -> list[str]:
        return [m.ambassador_id for m in self.members]


class EventAmbassador(Base):
    """One row per entry of Event.ambassadorIds, kept as sent (repeats included). ambassador_id is a plain lookup key, not a foreign key."""
    __tablename__ = "event_ambassadors"

    event_id: Mapped[str] = mapped_column(String(36), ForeignKey("events.id", ondelete="CASCADE"), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    ambassador_id: Mapped[str] = mapped_column(String(36), index=True, nullable=False)

    event: Mapped[Event] = relationship(back_populates="members")
