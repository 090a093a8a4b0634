from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from groupledger.db.session import get_db
from groupledger.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseOut
from groupledger.services.expense_services import create_expense, delete_expense, edit_expense, list_group_expenses
from groupledger.core.dependencies import get_current_user

router = APIRouter()

@router.get("/", response_model=list[ExpenseOut], description="get all expenses of a group")
async def fetch_expenses(
    group_id: str,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user),
):
    return await list_group_expenses(db, group_id, current_user.id)

@router.post("/", response_model=ExpenseOut)
async def add_expense(data: ExpenseCreate, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await create_expense(db, data, current_user.id)

@router.patch("/{expense_id}", response_model=ExpenseOut)
async def edit(expense_id: str, data: ExpenseUpdate, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await edit_expense(db, expense_id, data, user_id=current_user.id)

@router.delete("/{expense_id}")
async def del_expense(expense_id: str, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await delete_expense(db, expense_id, user_id=current_user.id)
