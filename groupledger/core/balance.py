import logging
from decimal import Decimal
from typing import Dict, List, Sequence
from groupledger.core.utils import TOLERANCE, ZERO, is_settled, qround, to_decimal
from groupledger.schemas.balances import Balance, GroupTotals, ParticipantRef, Settlement

logger = logging.getLogger(__name__)

def compute_balances(expenses: Sequence, participants: Sequence, owner: ParticipantRef) -> List[Balance]:
    """Net balance of every participant in a group, owner last.

    ``expenses`` need ``payer_id``, ``amount`` and ``splits`` (items with
    ``participant_id`` and ``amount``); ``participants`` need ``id`` and
    ``name``. Positive balances owe into the group, negative ones are owed.
    """
    roster = [*participants, owner]
    net: Dict[str, Decimal] = {p.id: ZERO for p in roster}

    for expense in expenses:
        # The payer advanced the whole amount
        net[expense.payer_id] = net.get(expense.payer_id, ZERO) - to_decimal(expense.amount)

        for split in expense.splits:
            net[split.participant_id] = net.get(split.participant_id, ZERO) + to_decimal(split.amount)

    stray = set(net) - {p.id for p in roster}
    if stray:
        logger.warning("Ignoring balances of ids outside the roster: %s", sorted(stray))

    return [
        Balance(
            participant_id=p.id,
            participant_name=p.name,
            net_balance=qround(net[p.id]),
        )
        for p in roster
    ]

def plan_settlements(balances: Sequence[Balance]) -> List[Settlement]:
    """Greedy debtor/creditor matching.

    Largest debtor pays largest creditor until one of them is settled. Yields
    at most N-1 transfers for N unsettled balances, which is not always the
    global minimum.
    """
    pending = [
        [b.participant_id, qround(b.net_balance)]
        for b in balances
        if abs(to_decimal(b.net_balance)) > TOLERANCE
    ]
    pending.sort(key=lambda x: x[1], reverse=True)

    settlements: List[Settlement] = []
    i, j = 0, len(pending) - 1

    while i < j:
        debtor, creditor = pending[i], pending[j]

        # Nothing left to match on one side
        if debtor[1] <= 0 or creditor[1] >= 0:
            break

        amount = qround(min(debtor[1], -creditor[1]))
        settlements.append(Settlement(from_id=debtor[0], to_id=creditor[0], amount=amount))

        debtor[1] -= amount
        creditor[1] += amount

        if is_settled(debtor[1]):
            i += 1
        if is_settled(creditor[1]):
            j -= 1

    return settlements

def compute_group_totals(expenses: Sequence, balances: Sequence[Balance], user_id: str) -> GroupTotals:
    total_spent = qround(sum((to_decimal(e.amount) for e in expenses), ZERO))

    mine = next((b.net_balance for b in balances if b.participant_id == user_id), ZERO)
    # the planner drops balances of up to one cent, so totals do too
    owed = mine if mine > TOLERANCE else ZERO
    owed_to_user = -mine if mine < -TOLERANCE else ZERO

    return GroupTotals(
        total_spent=total_spent,
        total_owed=qround(owed),
        total_owed_to_user=qround(owed_to_user),
    )
