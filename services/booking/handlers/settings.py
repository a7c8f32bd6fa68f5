import os
from decimal import Decimal, InvalidOperation

from services.booking.domain.value_object import FinancePolicy
from services.shared.domain import InvalidArgumentException

DEPOSIT_RATE_ENV = "BOOKING_DEPOSIT_RATE"
PLATFORM_FEE_RATE_ENV = "BOOKING_PLATFORM_FEE_RATE"


def _rate_from_env(name: str, default: Decimal) -> Decimal:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return Decimal(raw.strip())
    except InvalidOperation as e:
        raise InvalidArgumentException(name, f"must be a decimal rate: {raw}") from e


def load_finance_policy() -> FinancePolicy:
    """環境変数から料金ポリシーを読み込む（未設定ならデフォルト値）"""
    defaults = FinancePolicy()
    try:
        return FinancePolicy(
            deposit_rate=_rate_from_env(DEPOSIT_RATE_ENV, defaults.deposit_rate),
            platform_fee_rate=_rate_from_env(
                PLATFORM_FEE_RATE_ENV, defaults.platform_fee_rate
            ),
        )
    except InvalidArgumentException:
        raise
    except ValueError as e:
        raise InvalidArgumentException("finance_policy", str(e)) from e
