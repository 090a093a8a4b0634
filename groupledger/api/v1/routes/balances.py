from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from groupledger.db.session import get_db
from groupledger.core.dependencies import get_current_user
from groupledger.schemas.balances import GroupBalanceOut
from groupledger.services.balance_services import get_group_balance_sheet
from groupledger.services.group_services import get_owned_group
from groupledger.services.ledger_repository import LedgerRepository, get_ledger_repository

router = APIRouter()

@router.get("/{group_id}", response_model=GroupBalanceOut)
async def group_balances(
    group_id: str,
    db: AsyncSession = Depends(get_db),
    repo: LedgerRepository = Depends(get_ledger_repository),
    current_user = Depends(get_current_user)
):
    await get_owned_group(db, group_id, current_user.id)
    return await get_group_balance_sheet(repo, group_id, current_user.id)
