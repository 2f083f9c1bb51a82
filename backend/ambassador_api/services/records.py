from __future__ import annotations
from typing import Sequence
from sqlalchemy import select, func, exists
from sqlalchemy.ext.asyncio import AsyncSession
from ambassador_api.models.admin import Admin
from ambassador_api.models.ambassador import Ambassador
from ambassador_api.models.event import Event, EventAmbassador
from ambassador_api.models.submission import Submission


COLLECTIONS = {
    "ambassadors": Ambassador,
    "events": Event,
    "submissions": Submission,
    "admins": Admin,
}


# --- identities -------------------------------------------------------------

async def find_admin_by_email(session: AsyncSession, email: str) -> Admin | None:
    return await session.scalar(select(Admin).where(Admin.email == email))

async def find_ambassador_by_email(session: AsyncSession, email: str) -> Ambassador | None:
    return await session.scalar(select(Ambassador).where(Ambassador.email == email))

async def ambassador_email_taken(session: AsyncSession, email: str) -> bool:
    # exact, case-sensitive match against the stored value
    return bool(await session.scalar(select(exists().where(Ambassador.email == email))))

async def list_ambassadors(session: AsyncSession) -> Sequence[Ambassador]:
    return (await session.execute(select(Ambassador).order_by(Ambassador.name.asc()))).scalars().all()

async def insert_ambassador(session: AsyncSession, *, name: str, email: str, password_hash: str, campus: str) -> Ambassador:
    amb = Ambassador(name=name, email=email, password_hash=password_hash, campus=campus)
    session.add(amb)
    await session.commit()
    return amb

async def insert_admin(session: AsyncSession, *, email: str, password_hash: str) -> Admin:
    admin = Admin(email=email, password_hash=password_hash)
    session.add(admin)
    await session.commit()
    return admin


# --- events -----------------------------------------------------------------

async def get_event(session: AsyncSession, event_id: str) -> Event | None:
    return await session.get(Event, event_id)

async def list_events(session: AsyncSession, *, member_id: str | None = None) -> Sequence[Event]:
    """Newest first. With member_id, only events whose ambassadorIds contain it."""
    q = select(Event)
    if member_id is not None:
        q = q.where(
            exists().where(EventAmbassador.event_id == Event.id, EventAmbassador.ambassador_id == member_id)
        )
    q = q.order_by(Event.created_at.desc())
    return (await session.execute(q)).scalars().all()

async def insert_event(
    session: AsyncSession,
    *,
    title: str,
    campus: str,
    date: str,
    total_audience: int,
    ambassador_ids: list[str],
) -> Event:
    ev = Event(title=title, campus=campus, date=date, total_audience=total_audience)
    for position, aid in enumerate(ambassador_ids):
        ev.members.append(EventAmbassador(ambassador_id=aid, position=position))
    session.add(ev)
    await session.commit()
    return ev


# --- submissions ------------------------------------------------------------

async def list_submissions(session: AsyncSession, *, event_id: str | None = None) -> Sequence[Submission]:
    q = select(Submission)
    if event_id:
        q = q.where(Submission.event_id == event_id)
    q = q.order_by(Submission.uploaded_at.desc())
    return (await session.execute(q)).scalars().all()

async def insert_submission(
    session: AsyncSession,
    *,
    event_id: str,
    email: str,
    campus: str,
    blob_path: str,
    screenshot_name: str | None,
) -> Submission:
    sub = Submission(
        event_id=event_id, email=email, campus=campus,
        blob_path=blob_path, screenshot_name=screenshot_name,
    )
    session.add(sub)
    await session.commit()
    return sub


# --- maintenance ------------------------------------------------------------

async def count_collection(session: AsyncSession, name: str) -> int:
    model = COLLECTIONS[name]
    return int(await session.scalar(select(func.count()).select_from(model)) or 0)
