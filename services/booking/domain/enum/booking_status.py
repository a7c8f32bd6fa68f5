from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    遷移（PENDING → CONFIRMED → IN_PROGRESS → COMPLETED、
    および CANCELLED / DISPUTED / REFUNDED）は予約管理側が管理する。
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DISPUTED = "disputed"
    REFUNDED = "refunded"
