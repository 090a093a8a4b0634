from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from groupledger.db.session import get_db
from groupledger.services.group_services import create_group, list_group_for_user, get_group_detail, edit_group, delete_group, get_owned_group
from groupledger.services.balance_services import get_group_summary
from groupledger.services.ledger_repository import LedgerRepository, get_ledger_repository
from groupledger.schemas.group import GroupCreate, GroupUpdate, GroupOut, GroupDetailOut
from groupledger.schemas.balances import GroupSummaryOut
from groupledger.core.dependencies import get_current_user

router = APIRouter()

@router.post("/", response_model=GroupOut, description="create new group")
async def create_new_group(
    data: GroupCreate,
    db: AsyncSession = Depends(get_db),
    user = Depends(get_current_user)
):
    return await create_group(db, data, user.id)

@router.get("/my-groups", response_model=list[GroupOut], description="get user groups")
async def my_groups(db: AsyncSession = Depends(get_db), user = Depends(get_current_user)):
    return await list_group_for_user(db, user.id)

@router.get("/{group_id}", response_model=GroupDetailOut)
async def fetch_group(group_id: str, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await get_group_detail(db, group_id, current_user.id)

@router.patch("/{group_id}", response_model=GroupOut)
async def edit(group_id: str, data: GroupUpdate, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await edit_group(db, group_id, current_user.id, data)

@router.delete("/{group_id}")
async def del_group(group_id: str, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await delete_group(db, group_id=group_id, user_id=current_user.id)

@router.get("/{group_id}/summary", response_model=GroupSummaryOut, description="plain-text overview of the group")
async def group_summary(
    group_id: str,
    db: AsyncSession = Depends(get_db),
    repo: LedgerRepository = Depends(get_ledger_repository),
    current_user = Depends(get_current_user)
):
    group = await get_owned_group(db, group_id, current_user.id)
    return await get_group_summary(repo, group.id, group.name, current_user.id)
