from services.booking.domain.enum import BookingStatus

UNKNOWN_STATUS_LABEL = "Unknown Status"
DEFAULT_STATUS_COLOR = "text-gray-600 bg-gray-50 border-gray-200"

_STATUS_LABELS: dict[BookingStatus, str] = {
    BookingStatus.PENDING: "Pending Confirmation",
    BookingStatus.CONFIRMED: "Confirmed",
    BookingStatus.IN_PROGRESS: "In Progress",
    BookingStatus.COMPLETED: "Completed",
    BookingStatus.CANCELLED: "Cancelled",
    BookingStatus.DISPUTED: "Disputed",
    BookingStatus.REFUNDED: "Refunded",
}

_STATUS_COLORS: dict[BookingStatus, str] = {
    BookingStatus.PENDING: "text-yellow-600 bg-yellow-50 border-yellow-200",
    BookingStatus.CONFIRMED: "text-blue-600 bg-blue-50 border-blue-200",
    BookingStatus.IN_PROGRESS: "text-purple-600 bg-purple-50 border-purple-200",
    BookingStatus.COMPLETED: "text-green-600 bg-green-50 border-green-200",
    BookingStatus.CANCELLED: DEFAULT_STATUS_COLOR,
    BookingStatus.DISPUTED: "text-red-600 bg-red-50 border-red-200",
    BookingStatus.REFUNDED: "text-orange-600 bg-orange-50 border-orange-200",
}


def _lookup(status: object) -> BookingStatus | None:
    try:
        return BookingStatus(status)
    except ValueError:
        return None


def format_booking_status(status: BookingStatus | str) -> str:
    """予約ステータスの表示名"""
    booking_status = _lookup(status)
    if booking_status is None:
        return UNKNOWN_STATUS_LABEL
    return _STATUS_LABELS[booking_status]


def get_status_color(status: BookingStatus | str) -> str:
    """予約ステータスの配色（Tailwind のクラス）"""
    booking_status = _lookup(status)
    if booking_status is None:
        return DEFAULT_STATUS_COLOR
    return _STATUS_COLORS[booking_status]
