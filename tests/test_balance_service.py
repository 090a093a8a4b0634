from collections import Counter
from decimal import Decimal
from types import SimpleNamespace
import pytest
from fastapi import HTTPException
from groupledger.core.splits import compute_splits
from groupledger.schemas.balances import ParticipantRef
from groupledger.services.balance_services import get_group_balance_sheet, get_group_summary

class InMemoryLedger:
    def __init__(self, expenses, participants, owner):
        self.expenses = expenses
        self.participants = participants
        self.owner = owner
        self.calls = Counter()

    async def list_expenses(self, group_id):
        self.calls["list_expenses"] += 1
        return self.expenses

    async def list_participants(self, group_id):
        self.calls["list_participants"] += 1
        return self.participants

    async def get_owner(self, group_id):
        self.calls["get_owner"] += 1
        return self.owner

def make_ledger():
    amount = Decimal("100.00")
    expenses = [
        SimpleNamespace(payer_id="u1", amount=amount, splits=compute_splits(amount, "equal", ["u1", "p1", "p2"])),
    ]
    participants = [SimpleNamespace(id="p1", name="Bob"), SimpleNamespace(id="p2", name="Carol")]
    return InMemoryLedger(expenses, participants, ParticipantRef(id="u1", name="Alice"))

async def test_balance_sheet():
    sheet = await get_group_balance_sheet(make_ledger(), "g1", "u1")

    assert [(b.participant_name, b.net_balance) for b in sheet.balances] == [
        ("Bob", Decimal("33.33")),
        ("Carol", Decimal("33.33")),
        ("Alice", Decimal("-66.66")),
    ]
    assert [(s.from_id, s.to_id, s.amount) for s in sheet.settlements] == [
        ("p1", "u1", Decimal("33.33")),
        ("p2", "u1", Decimal("33.33")),
    ]
    assert sheet.totals.total_spent == Decimal("100.00")
    assert sheet.totals.total_owed_to_user == Decimal("66.66")

async def test_balance_sheet_for_missing_group():
    with pytest.raises(HTTPException) as exc:
        await get_group_balance_sheet(InMemoryLedger([], [], None), "g1", "u1")

    assert exc.value.status_code == 404

async def test_summary_text():
    result = await get_group_summary(make_ledger(), "g1", "Trip", "u1")
    summary = result["summary"]

    assert summary.startswith('Group Summary for "Trip":')
    assert "Total Expenses: 1 expense\n" in summary
    assert "Total Amount: $100.00" in summary
    assert "Participants: 3 (including you)" in summary
    assert "- Bob owes $33.33" in summary
    assert "- Alice is owed $66.66" in summary
    assert "1. Bob should pay Alice $33.33" in summary
    assert "2. Carol should pay Alice $33.33" in summary

async def test_summary_when_settled():
    ledger = InMemoryLedger([], [SimpleNamespace(id="p1", name="Bob")], ParticipantRef(id="u1", name="Alice"))

    summary = (await get_group_summary(ledger, "g1", "Empty", "u1"))["summary"]

    assert "Total Expenses: 0 expenses" in summary
    assert "- Bob is settled" in summary
    assert summary.endswith("All balances are settled!")

async def test_summary_reads_each_collection_once():
    ledger = make_ledger()

    await get_group_summary(ledger, "g1", "Trip", "u1")

    assert ledger.calls == {"get_owner": 1, "list_expenses": 1, "list_participants": 1}

async def test_missing_group_reads_nothing_else():
    ledger = InMemoryLedger([], [], None)

    with pytest.raises(HTTPException):
        await get_group_summary(ledger, "g1", "Trip", "u1")

    assert ledger.calls == {"get_owner": 1}
