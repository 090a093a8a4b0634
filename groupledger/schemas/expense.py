from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from groupledger.schemas.common import Money

class SplitMode(str, Enum):
    EQUAL = "equal"
    CUSTOM = "custom"
    PERCENTAGE = "percentage"

class SplitItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    participant_id: str
    amount: Money

class CustomAmount(BaseModel):
    participant_id: str
    amount: Money = Field(ge=0)

class PercentageShare(BaseModel):
    participant_id: str
    percentage: Decimal = Field(ge=0, le=100)

class ExpenseCreate(BaseModel):
    group_id: str
    amount: Money = Field(gt=0)
    description: str = Field(min_length=1)
    spent_on: date
    payer_id: str
    participant_ids: List[str] = Field(min_length=1)
    split_mode: SplitMode = SplitMode.EQUAL
    custom_amounts: Optional[List[CustomAmount]] = None
    percentages: Optional[List[PercentageShare]] = None

class ExpenseUpdate(BaseModel):
    amount: Optional[Money] = Field(default=None, gt=0)
    description: Optional[str] = Field(default=None, min_length=1)
    spent_on: Optional[date] = None
    payer_id: Optional[str] = None
    participant_ids: Optional[List[str]] = Field(default=None, min_length=1)
    split_mode: Optional[SplitMode] = None
    custom_amounts: Optional[List[CustomAmount]] = None
    percentages: Optional[List[PercentageShare]] = None

class ExpenseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    group_id: str
    amount: Money
    description: str
    spent_on: date
    payer_id: str
    participant_ids: List[str]
    split_mode: SplitMode
    splits: List[SplitItem]
    created_at: datetime | None = None
    updated_at: datetime | None = None
