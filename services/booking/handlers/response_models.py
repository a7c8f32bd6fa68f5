from typing import Generic, TypeVar

from pydantic import BaseModel

from services.booking.applications import (
    CancellationQuote,
    CheckInPass,
    PaymentQuote,
)

DataT = TypeVar("DataT")


class PaymentQuoteData(BaseModel):
    """支払い見積もりのレスポンスモデル"""

    total_price: str
    deposit_amount: str
    remainder_amount: str
    platform_fee: str
    guide_payout: str
    amount_paid: str
    amount_due: str
    currency: str


class CancellationQuoteData(BaseModel):
    """キャンセル見積もりのレスポンスモデル"""

    can_cancel: bool
    refund_amount: str
    currency: str
    deadline: str | None = None
    cancellation_policy: str | None = None


class CheckInPassData(BaseModel):
    """チェックイン QR のレスポンスモデル"""

    qr_data: str
    verification_code: str


class CheckInVerificationData(BaseModel):
    """チェックイン照合結果のレスポンスモデル"""

    valid: bool


class SuccessResponse(BaseModel, Generic[DataT]):
    """成功レスポンスモデル"""

    status: str = "success"
    data: DataT


def payment_quote_response(quote: PaymentQuote) -> dict:
    breakdown = quote.breakdown
    return SuccessResponse[PaymentQuoteData](
        data=PaymentQuoteData(
            total_price=str(breakdown.total_price),
            deposit_amount=str(breakdown.deposit_amount),
            remainder_amount=str(breakdown.remainder_amount),
            platform_fee=str(breakdown.platform_fee),
            guide_payout=str(breakdown.guide_payout),
            amount_paid=str(quote.initial_payment.amount_paid),
            amount_due=str(quote.initial_payment.amount_due),
            currency=str(breakdown.currency),
        )
    ).model_dump()


def cancellation_quote_response(quote: CancellationQuote) -> dict:
    return SuccessResponse[CancellationQuoteData](
        data=CancellationQuoteData(
            can_cancel=quote.can_cancel,
            refund_amount=str(quote.refund_amount.amount),
            currency=str(quote.refund_amount.currency),
            deadline=quote.deadline.isoformat() if quote.deadline else None,
            cancellation_policy=quote.policy_type.value if quote.policy_type else None,
        )
    ).model_dump()


def check_in_pass_response(check_in_pass: CheckInPass) -> dict:
    return SuccessResponse[CheckInPassData](
        data=CheckInPassData(
            qr_data=check_in_pass.qr_data,
            verification_code=check_in_pass.verification_code,
        )
    ).model_dump()


def check_in_verification_response(valid: bool) -> dict:
    return SuccessResponse[CheckInVerificationData](
        data=CheckInVerificationData(valid=valid)
    ).model_dump()
