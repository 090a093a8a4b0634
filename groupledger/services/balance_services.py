import logging
from fastapi import HTTPException
from groupledger.core.balance import compute_balances, compute_group_totals, plan_settlements
from groupledger.schemas.balances import GroupBalanceOut
from groupledger.services.ledger_repository import LedgerRepository

logger = logging.getLogger(__name__)

async def _load_ledger(repo: LedgerRepository, group_id: str):
    owner = await repo.get_owner(group_id)

    if owner is None:
        raise HTTPException(404, "Group not found")

    expenses = await repo.list_expenses(group_id)
    participants = await repo.list_participants(group_id)
    return owner, expenses, participants

def build_balance_sheet(expenses, participants, owner, user_id: str) -> GroupBalanceOut:
    balances = compute_balances(expenses, participants, owner)
    settlements = plan_settlements(balances)
    totals = compute_group_totals(expenses, balances, user_id)

    logger.debug(
        "%d expenses, %d balances, %d settlements",
        len(expenses), len(balances), len(settlements),
    )

    return GroupBalanceOut(balances=balances, settlements=settlements, totals=totals)

async def get_group_balance_sheet(repo: LedgerRepository, group_id: str, user_id: str) -> GroupBalanceOut:
    owner, expenses, participants = await _load_ledger(repo, group_id)
    return build_balance_sheet(expenses, participants, owner, user_id)

def build_group_summary(group_name: str, sheet: GroupBalanceOut, expense_count: int, participant_names) -> str:
    names = {b.participant_id: b.participant_name for b in sheet.balances}

    lines = [
        f'Group Summary for "{group_name}":',
        "",
        f"Total Expenses: {expense_count} expense{'' if expense_count == 1 else 's'}",
        f"Total Amount: ${sheet.totals.total_spent:.2f}",
        "",
        f"Participants: {len(participant_names) + 1} (including you)",
    ]
    lines += [f"- {name}" for name in participant_names]

    lines += ["", "Current Balances:"]
    for b in sheet.balances:
        if b.net_balance > 0:
            lines.append(f"- {b.participant_name} owes ${b.net_balance:.2f}")
        elif b.net_balance < 0:
            lines.append(f"- {b.participant_name} is owed ${abs(b.net_balance):.2f}")
        else:
            lines.append(f"- {b.participant_name} is settled")

    lines.append("")
    if sheet.settlements:
        lines.append("Settlement Suggestions:")
        for i, s in enumerate(sheet.settlements, start=1):
            lines.append(
                f"{i}. {names.get(s.from_id, 'Someone')} should pay "
                f"{names.get(s.to_id, 'someone')} ${s.amount:.2f}"
            )
    else:
        lines.append("All balances are settled!")

    return "\n".join(lines)

async def get_group_summary(repo: LedgerRepository, group_id: str, group_name: str, user_id: str):
    owner, expenses, participants = await _load_ledger(repo, group_id)
    sheet = build_balance_sheet(expenses, participants, owner, user_id)

    return {
        "group_id": group_id,
        "summary": build_group_summary(
            group_name,
            sheet,
            len(expenses),
            [p.name for p in participants],
        ),
    }
