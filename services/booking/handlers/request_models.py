from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from services.booking.domain.enum import PaymentType


def _float_to_decimal(v: object) -> object:
    # float は str 経由で Decimal にする（2 進小数の誤差を持ち込まない）
    if isinstance(v, float):
        return Decimal(str(v))
    return v


class PaymentBreakdownRequest(BaseModel):
    """支払い見積もりリクエストモデル"""

    total_price: Decimal = Field(..., ge=0, description="予約の合計金額（USD）")
    payment_type: PaymentType = PaymentType.DEPOSIT
    deposit_percentage: Decimal | None = Field(
        default=None,
        ge=0,
        le=100,
        description="サービスに設定されたデポジット率（%）",
    )

    @field_validator("total_price", "deposit_percentage", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _float_to_decimal(v)


class CancellationQuoteRequest(BaseModel):
    """キャンセル見積もりリクエストモデル"""

    booking: dict[str, Any]
    cancelled_at: datetime | None = None
    cancellation_policy: str | None = None


class CheckInRequest(BaseModel):
    """チェックイン QR 発行リクエストモデル"""

    booking: dict[str, Any]


class VerifyCheckInRequest(BaseModel):
    """チェックイン照合リクエストモデル"""

    booking: dict[str, Any]
    code: str | None = Field(default=None, max_length=64)
    qr_data: str | None = None

    @model_validator(mode="after")
    def require_code_or_qr_data(self) -> "VerifyCheckInRequest":
        if self.code is None and self.qr_data is None:
            raise ValueError("Either code or qr_data is required")
        return self
