from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class InitialPayment:
    """予約時に請求する金額と残りの未払い額"""

    amount_paid: Decimal
    amount_due: Decimal
