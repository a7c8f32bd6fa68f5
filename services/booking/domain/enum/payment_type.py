from enum import Enum


class PaymentType(str, Enum):
    """予約時の支払い方法"""

    FULL = "full"
    DEPOSIT = "deposit"
    INSTALLMENT = "installment"
