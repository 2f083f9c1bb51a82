from __future__ import annotations
import math
from collections import defaultdict
from typing import Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from ambassador_api.models.ambassador import Ambassador
from ambassador_api.models.event import Event
from ambassador_api.models.submission import Submission
from ambassador_api.schemas.ambassador import LeaderboardRow
from ambassador_api.services import records


def _round(x: float) -> int:
    # half up, so 2.5 people of reach counts as 3
    return math.floor(x + 0.5)


def compute_rows(
    ambassadors: Sequence[Ambassador],
    events: Sequence[Event],
    submissions: Sequence[Submission],
) -> list[LeaderboardRow]:
    """
    Reach splits each event's audience evenly across its ambassadors.
    Conversion is proofs per unit of (unrounded) reach, as a whole percentage.
    """
    proofs_by_event: dict[str, int] = defaultdict(int)
    for s in submissions:
        proofs_by_event[s.event_id] += 1

    rows = []
    for amb in ambassadors:
        mine = [ev for ev in events if amb.id in ev.ambassador_ids]
        reach = sum(ev.total_audience / len(ev.ambassador_ids) for ev in mine)
        proofs = sum(proofs_by_event[ev.id] for ev in mine)
        rows.append(LeaderboardRow(
            id=amb.id,
            name=amb.name,
            email=amb.email,
            campus=amb.campus,
            events=len(mine),
            reach=_round(reach),
            proofs=proofs,
            conversion_rate=_round(proofs / reach * 100) if reach > 0 else 0,
        ))
    rows.sort(key=lambda r: r.reach, reverse=True)
    return rows


async def leaderboard(session: AsyncSession) -> list[LeaderboardRow]:
    ambassadors = await records.list_ambassadors(session)
    events = await records.list_events(session)
    submissions = await records.list_submissions(session)
    return compute_rows(ambassadors, events, submissions)
