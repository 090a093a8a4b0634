import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import delete
from fastapi import HTTPException
from groupledger.models.group import Group
from groupledger.models.participant import Participant
from groupledger.models.expense import Expense
from groupledger.models.expense_split import ExpenseSplit
from groupledger.schemas.group import GroupCreate, GroupUpdate

logger = logging.getLogger(__name__)

async def get_owned_group(db: AsyncSession, group_id: str, user_id: str) -> Group:
    res = await db.execute(select(Group).where(Group.id == group_id))
    group = res.scalar_one_or_none()

    # foreign groups are reported as missing
    if not group or group.owner_id != user_id:
        raise HTTPException(404, "Group not found")

    return group

async def create_group(db: AsyncSession, data: GroupCreate, owner_id: str):
    group = Group(name=data.name, owner_id=owner_id)
    db.add(group)

    await db.commit()
    await db.refresh(group)

    logger.info("Group %s created by %s", group.id, owner_id)
    return group

async def list_group_for_user(db: AsyncSession, user_id: str):
    q = (
        select(Group)
        .where(Group.owner_id == user_id)
        .order_by(Group.created_at, Group.id)
    )
    result = await db.execute(q)
    return result.scalars().all()

async def list_group_participants(db: AsyncSession, group_id: str):
    q = (
        select(Participant)
        .where(Participant.group_id == group_id)
        .order_by(Participant.created_at, Participant.id)
    )
    result = await db.execute(q)
    return result.scalars().all()

async def get_group_detail(db: AsyncSession, group_id: str, user_id: str):
    group = await get_owned_group(db, group_id, user_id)
    participants = await list_group_participants(db, group_id)

    return {
        "id": group.id,
        "name": group.name,
        "owner_id": group.owner_id,
        "created_at": group.created_at,
        "updated_at": group.updated_at,
        "participants": participants,
    }

async def edit_group(db: AsyncSession, group_id: str, user_id: str, data: GroupUpdate):
    group = await get_owned_group(db, group_id, user_id)

    if data.name:
        group.name = data.name

    await db.commit()
    await db.refresh(group)
    return group

async def delete_group(db: AsyncSession, group_id: str, user_id: str):
    group = await get_owned_group(db, group_id, user_id)

    expense_ids = select(Expense.id).where(Expense.group_id == group_id)
    await db.execute(delete(ExpenseSplit).where(ExpenseSplit.expense_id.in_(expense_ids)))
    await db.execute(delete(Expense).where(Expense.group_id == group_id))
    await db.execute(delete(Participant).where(Participant.group_id == group_id))

    await db.delete(group)
    await db.commit()

    logger.info("Group %s deleted", group_id)
    return {"status": "deleted"}
