from typing import Optional, Protocol, Sequence
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from groupledger.db.session import get_db
from groupledger.models.expense import Expense
from groupledger.models.group import Group
from groupledger.models.participant import Participant
from groupledger.models.user import User
from groupledger.schemas.balances import ParticipantRef

OWNER_FALLBACK_NAME = "You"

class LedgerRepository(Protocol):
    """Read side the balance engine needs for one group."""

    async def list_expenses(self, group_id: str) -> Sequence[Expense]: ...

    async def list_participants(self, group_id: str) -> Sequence[Participant]: ...

    async def get_owner(self, group_id: str) -> Optional[ParticipantRef]: ...

class SqlLedgerRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_expenses(self, group_id: str):
        q = (
            select(Expense)
            .options(selectinload(Expense.splits))
            .where(Expense.group_id == group_id)
            .order_by(Expense.created_at, Expense.id)
        )
        res = await self.db.execute(q)
        return res.scalars().all()

    async def list_participants(self, group_id: str):
        q = (
            select(Participant)
            .where(Participant.group_id == group_id)
            .order_by(Participant.created_at, Participant.id)
        )
        res = await self.db.execute(q)
        return res.scalars().all()

    async def get_owner(self, group_id: str):
        q = (
            select(User.id, User.name)
            .join(Group, Group.owner_id == User.id)
            .where(Group.id == group_id)
        )
        res = await self.db.execute(q)
        row = res.first()

        if not row:
            return None

        return ParticipantRef(id=row.id, name=row.name or OWNER_FALLBACK_NAME)

async def get_ledger_repository(db: AsyncSession = Depends(get_db)) -> LedgerRepository:
    return SqlLedgerRepository(db)
