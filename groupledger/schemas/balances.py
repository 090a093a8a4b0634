from pydantic import BaseModel
from typing import List
from groupledger.schemas.common import Money

class ParticipantRef(BaseModel):
    id: str
    name: str

class Balance(BaseModel):
    participant_id: str
    participant_name: str
    # positive: owes into the group, negative: is owed
    net_balance: Money

class Settlement(BaseModel):
    from_id: str
    to_id: str
    amount: Money

class GroupTotals(BaseModel):
    total_spent: Money
    total_owed: Money
    total_owed_to_user: Money

class GroupBalanceOut(BaseModel):
    balances: List[Balance]
    settlements: List[Settlement]
    totals: GroupTotals

class GroupSummaryOut(BaseModel):
    group_id: str
    summary: str
