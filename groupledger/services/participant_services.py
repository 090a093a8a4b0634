import logging
import random
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from sqlalchemy import func
from fastapi import HTTPException
from groupledger.core.config import settings
from groupledger.models.participant import Participant
from groupledger.models.expense import Expense
from groupledger.models.group import Group
from groupledger.schemas.participant import ParticipantCreate, ParticipantUpdate
from groupledger.services.group_services import get_owned_group, list_group_participants

logger = logging.getLogger(__name__)

def random_color() -> str:
    return f"#{random.randint(0, 0xFFFFFF):06x}"

async def list_participants(db: AsyncSession, group_id: str, user_id: str):
    await get_owned_group(db, group_id, user_id)
    return await list_group_participants(db, group_id)

async def create_participant(db: AsyncSession, data: ParticipantCreate, user_id: str):
    await get_owned_group(db, data.group_id, user_id)

    count_q = select(func.count()).select_from(Participant).where(Participant.group_id == data.group_id)
    count = (await db.execute(count_q)).scalar_one()

    if count >= settings.MAX_PARTICIPANTS:
        raise HTTPException(400, f"Maximum {settings.MAX_PARTICIPANTS} participants allowed per group")

    participant = Participant(
        group_id=data.group_id,
        name=data.name,
        color=data.color or random_color(),
        avatar=data.avatar,
    )
    db.add(participant)

    await db.commit()
    await db.refresh(participant)

    logger.info("Participant %s added to group %s", participant.id, data.group_id)
    return participant

async def get_participant_for_owner(db: AsyncSession, participant_id: str, user_id: str) -> Participant:
    q = (
        select(Participant, Group.owner_id)
        .join(Group, Group.id == Participant.group_id)
        .where(Participant.id == participant_id)
    )
    row = (await db.execute(q)).first()

    if not row:
        raise HTTPException(404, "Participant not found")

    if row.owner_id != user_id:
        raise HTTPException(403, "Unauthorized")

    return row.Participant

async def edit_participant(db: AsyncSession, participant_id: str, data: ParticipantUpdate, user_id: str):
    participant = await get_participant_for_owner(db, participant_id, user_id)

    if data.name is not None:
        participant.name = data.name
    if data.color is not None:
        participant.color = data.color
    if data.avatar is not None:
        participant.avatar = data.avatar

    await db.commit()
    await db.refresh(participant)
    return participant

async def delete_participant(db: AsyncSession, participant_id: str, user_id: str):
    participant = await get_participant_for_owner(db, participant_id, user_id)

    q = (
        select(Expense)
        .options(selectinload(Expense.splits))
        .where(Expense.group_id == participant.group_id)
    )
    expenses = (await db.execute(q)).scalars().all()

    # dropping a referenced participant would unbalance the group's ledger
    for expense in expenses:
        if (
            expense.payer_id == participant_id
            or participant_id in (expense.participant_ids or [])
            or any(s.participant_id == participant_id for s in expense.splits)
        ):
            raise HTTPException(400, "Participant is part of existing expenses; edit or delete those first")

    await db.delete(participant)
    await db.commit()

    logger.info("Participant %s removed from group %s", participant_id, participant.group_id)
    return {"status": "deleted"}
