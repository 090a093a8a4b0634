import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from fastapi import HTTPException
from groupledger.core.exceptions import InvalidSplitConfiguration
from groupledger.core.splits import compute_splits
from groupledger.models.expense import Expense
from groupledger.models.expense_split import ExpenseSplit
from groupledger.models.group import Group
from groupledger.models.participant import Participant
from groupledger.schemas.expense import ExpenseCreate, ExpenseUpdate, SplitMode
from groupledger.services.group_services import get_owned_group

logger = logging.getLogger(__name__)

async def group_member_ids(db: AsyncSession, group: Group) -> set:
    q = select(Participant.id).where(Participant.group_id == group.id)
    res = await db.execute(q)
    # the owner takes part in every group implicitly
    return {group.owner_id, *res.scalars().all()}

def validate_members(members: set, payer_id: str, participant_ids):
    if len(participant_ids) != len(set(participant_ids)):
        raise HTTPException(400, "Duplicate participants found in expense")

    if payer_id not in members:
        raise HTTPException(400, "Payer is not a member of the group")

    if not set(participant_ids) <= members:
        raise HTTPException(400, "Some participants are not group members")

def resolve_splits(amount, mode, participant_ids, custom_amounts=None, percentages=None):
    try:
        splits = compute_splits(amount, mode, participant_ids, custom_amounts, percentages)
    except InvalidSplitConfiguration as e:
        raise HTTPException(400, str(e))

    return [
        ExpenseSplit(participant_id=s.participant_id, amount=s.amount, position=i)
        for i, s in enumerate(splits)
    ]

async def load_expense(db: AsyncSession, expense_id: str):
    q = (
        select(Expense)
        .options(selectinload(Expense.splits))
        .where(Expense.id == expense_id)
        .execution_options(populate_existing=True)
    )
    res = await db.execute(q)
    return res.scalar_one_or_none()

async def get_expense_for_owner(db: AsyncSession, expense_id: str, user_id: str):
    expense = await load_expense(db, expense_id)

    if not expense:
        raise HTTPException(404, "Expense not found")

    res = await db.execute(select(Group).where(Group.id == expense.group_id))
    group = res.scalar_one_or_none()

    if not group or group.owner_id != user_id:
        raise HTTPException(403, "Unauthorized")

    return expense, group

async def create_expense(db: AsyncSession, data: ExpenseCreate, user_id: str):
    group = await get_owned_group(db, data.group_id, user_id)

    members = await group_member_ids(db, group)
    validate_members(members, data.payer_id, data.participant_ids)

    splits = resolve_splits(
        data.amount,
        data.split_mode,
        data.participant_ids,
        data.custom_amounts,
        data.percentages,
    )

    expense = Expense(
        group_id=group.id,
        payer_id=data.payer_id,
        amount=data.amount,
        description=data.description,
        spent_on=data.spent_on,
        participant_ids=list(data.participant_ids),
        split_mode=data.split_mode.value,
        splits=splits,
    )
    db.add(expense)
    await db.commit()

    logger.info("Expense %s of %s recorded in group %s", expense.id, data.amount, group.id)
    return await load_expense(db, expense.id)

async def list_group_expenses(db: AsyncSession, group_id: str, user_id: str):
    await get_owned_group(db, group_id, user_id)

    q = (
        select(Expense)
        .options(selectinload(Expense.splits))
        .where(Expense.group_id == group_id)
        .order_by(Expense.created_at, Expense.id)
    )
    res = await db.execute(q)
    return res.scalars().all()

async def edit_expense(db: AsyncSession, expense_id: str, data: ExpenseUpdate, user_id: str):
    expense, group = await get_expense_for_owner(db, expense_id, user_id)

    amount = data.amount if data.amount is not None else expense.amount
    payer_id = data.payer_id if data.payer_id is not None else expense.payer_id
    participant_ids = data.participant_ids if data.participant_ids is not None else expense.participant_ids
    split_mode = data.split_mode if data.split_mode is not None else SplitMode(expense.split_mode)

    members = await group_member_ids(db, group)
    validate_members(members, payer_id, participant_ids)

    # any change to what is being split means the old splits are stale
    if data.amount is not None or data.participant_ids is not None or data.split_mode is not None:
        expense.splits = resolve_splits(
            amount,
            split_mode,
            participant_ids,
            data.custom_amounts,
            data.percentages,
        )

    expense.amount = amount
    expense.payer_id = payer_id
    expense.participant_ids = list(participant_ids)
    expense.split_mode = split_mode.value

    if data.description is not None:
        expense.description = data.description
    if data.spent_on is not None:
        expense.spent_on = data.spent_on

    await db.commit()

    logger.info("Expense %s updated", expense_id)
    return await load_expense(db, expense_id)

async def delete_expense(db: AsyncSession, expense_id: str, user_id: str):
    expense, _ = await get_expense_for_owner(db, expense_id, user_id)

    await db.delete(expense)
    await db.commit()

    logger.info("Expense %s deleted", expense_id)
    return {"status": "deleted"}
