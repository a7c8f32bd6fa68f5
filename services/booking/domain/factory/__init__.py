from .booking_factory import BookingFactory, as_booking

__all__ = ["BookingFactory", "as_booking"]
