from decimal import Decimal, ROUND_HALF_UP, getcontext

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")

# Magnitudes under one cent count as settled
TOLERANCE = CENTS

def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))

def qround(d) -> Decimal:
    return to_decimal(d).quantize(CENTS, rounding=ROUND_HALF_UP)

def is_settled(amount) -> bool:
    return abs(to_decimal(amount)) < TOLERANCE
