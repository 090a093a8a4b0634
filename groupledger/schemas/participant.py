from pydantic import BaseModel, ConfigDict, Field

HEX_COLOR = r"^#[0-9a-fA-F]{6}$"

class ParticipantCreate(BaseModel):
    group_id: str
    name: str = Field(min_length=1)
    color: str | None = Field(default=None, pattern=HEX_COLOR)
    avatar: str | None = None

class ParticipantUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    color: str | None = Field(default=None, pattern=HEX_COLOR)
    avatar: str | None = None

class ParticipantOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    group_id: str
    name: str
    color: str | None = None
    avatar: str | None = None
