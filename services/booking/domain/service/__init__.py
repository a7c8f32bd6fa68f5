from .booking_finance import (
    calculate_initial_payment,
    calculate_payment_breakdown,
    calculate_refund_amount,
    can_cancel_booking,
    get_cancellation_deadline,
    resolve_cancellation_policy,
)
from .check_in import (
    generate_check_in_qr_data,
    generate_verification_code,
    parse_check_in_qr_data,
    verify_check_in_code,
    verify_check_in_payload,
)
from .status_display import format_booking_status, get_status_color

__all__ = [
    "calculate_payment_breakdown",
    "calculate_initial_payment",
    "get_cancellation_deadline",
    "resolve_cancellation_policy",
    "can_cancel_booking",
    "calculate_refund_amount",
    "format_booking_status",
    "get_status_color",
    "generate_check_in_qr_data",
    "generate_verification_code",
    "parse_check_in_qr_data",
    "verify_check_in_code",
    "verify_check_in_payload",
]
