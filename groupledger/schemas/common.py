from decimal import Decimal
from typing import Annotated
from pydantic import AfterValidator, PlainSerializer
from groupledger.core.utils import qround

# Currency amount held as Decimal cents, rendered as a 2-decimal JSON number
Money = Annotated[
    Decimal,
    AfterValidator(qround),
    PlainSerializer(lambda v: float(qround(v)), return_type=float, when_used="json"),
]
