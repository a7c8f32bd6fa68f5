from .booking_status import BookingStatus
from .cancellation_policy_type import CancellationPolicyType
from .payment_type import PaymentType

__all__ = ["BookingStatus", "CancellationPolicyType", "PaymentType"]
