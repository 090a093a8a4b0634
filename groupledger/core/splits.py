from decimal import Decimal
from typing import List, Optional, Sequence
from groupledger.core.exceptions import InvalidSplitConfiguration
from groupledger.core.utils import TOLERANCE, qround, to_decimal
from groupledger.schemas.expense import CustomAmount, PercentageShare, SplitItem, SplitMode

HUNDRED = Decimal("100")

def compute_splits(
    amount,
    mode,
    participant_ids: Sequence[str],
    custom_amounts: Optional[Sequence[CustomAmount]] = None,
    percentages: Optional[Sequence[PercentageShare]] = None,
) -> List[SplitItem]:
    """Resolve an expense into per-participant split amounts.

    Every mode adds up to ``amount`` to the cent. Equal splits give the
    rounding remainder to the first entry, percentage splits to the largest
    share; custom amounts must already add up exactly. Percentages must
    total 100 within 0.01.
    """
    try:
        mode = SplitMode(mode)
    except ValueError:
        raise InvalidSplitConfiguration(f"Unknown split mode: {mode!r}")

    total = qround(amount)

    if mode == SplitMode.EQUAL:
        if not participant_ids:
            raise InvalidSplitConfiguration("Equal split needs at least one participant")

        share = qround(total / len(participant_ids))
        splits = [SplitItem(participant_id=pid, amount=share) for pid in participant_ids]

        remainder = total - share * len(participant_ids)
        if remainder:
            splits[0].amount = qround(splits[0].amount + remainder)
        return splits

    if mode == SplitMode.CUSTOM:
        if not custom_amounts:
            raise InvalidSplitConfiguration("Custom split requires custom amounts")
        _check_participants([c.participant_id for c in custom_amounts], participant_ids)

        splits = [
            SplitItem(participant_id=c.participant_id, amount=qround(c.amount))
            for c in custom_amounts
        ]
        allocated = sum((s.amount for s in splits), Decimal("0"))
        if allocated != total:
            raise InvalidSplitConfiguration(
                f"Custom amounts add up to {allocated}, expected {total}"
            )
        return splits

    if not percentages:
        raise InvalidSplitConfiguration("Percentage split requires percentages")
    _check_participants([p.participant_id for p in percentages], participant_ids)

    pct_total = sum((to_decimal(p.percentage) for p in percentages), Decimal("0"))
    if abs(pct_total - HUNDRED) > TOLERANCE:
        raise InvalidSplitConfiguration(f"Percentages add up to {pct_total}, expected 100")

    splits = [
        SplitItem(
            participant_id=p.participant_id,
            amount=qround(total * to_decimal(p.percentage) / HUNDRED),
        )
        for p in percentages
    ]

    # largest share absorbs the rounding remainder, first entry on ties
    remainder = total - sum((s.amount for s in splits), Decimal("0"))
    if remainder:
        largest = max(splits, key=lambda s: s.amount)
        largest.amount = qround(largest.amount + remainder)
    return splits

def _check_participants(split_ids: List[str], participant_ids: Sequence[str]):
    if len(split_ids) != len(set(split_ids)):
        raise InvalidSplitConfiguration("Duplicate participants in split data")

    unknown = set(split_ids) - set(participant_ids)
    if unknown:
        raise InvalidSplitConfiguration(
            f"Split data names participants outside the expense: {', '.join(sorted(unknown))}"
        )
