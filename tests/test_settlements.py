from decimal import Decimal
from groupledger.core.balance import plan_settlements
from groupledger.schemas.balances import Balance, GroupBalanceOut, GroupTotals, Settlement

def balances(**values):
    return [
        Balance(participant_id=pid, participant_name=pid, net_balance=Decimal(v))
        for pid, v in values.items()
    ]

def triples(settlements):
    return [(s.from_id, s.to_id, s.amount) for s in settlements]

def test_single_debtor_pays_most_negative_creditor_first():
    # sorted [X 50, Z -20, Y -30]: the end pointer starts on Y
    result = plan_settlements(balances(X="50.00", Y="-30.00", Z="-20.00"))

    assert triples(result) == [
        ("X", "Y", Decimal("30.00")),
        ("X", "Z", Decimal("20.00")),
    ]

def test_single_creditor_collects_from_each_debtor():
    result = plan_settlements(balances(P="-45.00", Q="15.00", R="30.00"))

    assert triples(result) == [
        ("R", "P", Decimal("30.00")),
        ("Q", "P", Decimal("15.00")),
    ]

def test_empty_and_settled_inputs():
    assert plan_settlements([]) == []
    assert plan_settlements(balances(A="0.00", B="0.01", C="-0.01")) == []

def test_tie_keeps_input_order():
    result = plan_settlements(balances(A="10.00", B="10.00", C="-20.00"))

    assert triples(result) == [
        ("A", "C", Decimal("10.00")),
        ("B", "C", Decimal("10.00")),
    ]

def test_partial_matches_chain_through():
    result = plan_settlements(balances(A="70.00", B="10.00", C="-40.00", D="-40.00"))

    assert triples(result) == [
        ("A", "D", Decimal("40.00")),
        ("A", "C", Decimal("30.00")),
        ("B", "C", Decimal("10.00")),
    ]

def test_at_most_n_minus_one():
    bal = balances(A="12.34", B="56.78", C="-9.99", D="-40.00", E="-19.13")

    result = plan_settlements(bal)

    assert len(result) <= 4
    assert all(s.amount > 0 and s.from_id != s.to_id for s in result)

def test_input_is_not_mutated():
    bal = balances(X="50.00", Y="-50.00")

    plan_settlements(bal)

    assert [b.net_balance for b in bal] == [Decimal("50.00"), Decimal("-50.00")]

def test_one_sided_input_yields_no_wrong_way_payment():
    assert plan_settlements(balances(A="5.00", B="3.00")) == []

def test_json_round_trip_keeps_cents():
    sheet = GroupBalanceOut(
        balances=balances(A="-66.66", B="33.33", C="33.33"),
        settlements=[
            Settlement(from_id="B", to_id="A", amount=Decimal("33.33")),
            Settlement(from_id="C", to_id="A", amount=Decimal("33.33")),
        ],
        totals=GroupTotals(
            total_spent=Decimal("100.00"),
            total_owed=Decimal("0"),
            total_owed_to_user=Decimal("66.66"),
        ),
    )

    payload = sheet.model_dump_json()
    restored = GroupBalanceOut.model_validate_json(payload)

    assert restored == sheet
    assert '"net_balance":-66.66' in payload
    assert restored.settlements[0].amount == Decimal("33.33")
