from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List
from groupledger.schemas.participant import ParticipantOut

class GroupCreate(BaseModel):
    name: str = Field(min_length=1)

class GroupUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)

class GroupOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    owner_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

class GroupDetailOut(GroupOut):
    participants: List[ParticipantOut] = []
