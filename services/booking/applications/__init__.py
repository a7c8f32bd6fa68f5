from .check_in_booking import CheckInPass, CheckInService
from .quote_cancellation import CancellationQuote, QuoteCancellationService
from .quote_payment import PaymentQuote, QuotePaymentService

__all__ = [
    "CheckInPass",
    "CheckInService",
    "CancellationQuote",
    "QuoteCancellationService",
    "PaymentQuote",
    "QuotePaymentService",
]
