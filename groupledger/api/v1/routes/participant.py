from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from groupledger.db.session import get_db
from groupledger.schemas.participant import ParticipantCreate, ParticipantUpdate, ParticipantOut
from groupledger.services.participant_services import list_participants, create_participant, edit_participant, delete_participant
from groupledger.core.dependencies import get_current_user

router = APIRouter()

@router.get("/", response_model=list[ParticipantOut])
async def fetch_participants(group_id: str, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await list_participants(db, group_id, current_user.id)

@router.post("/", response_model=ParticipantOut)
async def add_participant(data: ParticipantCreate, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await create_participant(db, data, current_user.id)

@router.patch("/{participant_id}", response_model=ParticipantOut)
async def edit(participant_id: str, data: ParticipantUpdate, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await edit_participant(db, participant_id, data, current_user.id)

@router.delete("/{participant_id}")
async def remove(participant_id: str, db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    return await delete_participant(db, participant_id, current_user.id)
