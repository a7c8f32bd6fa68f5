from .clock import Clock, fixed_clock, utc_now
from .formatters import format_currency
from .http_response import api_response, error_response, parse_json_body
from .logger import get_logger
from .validators import (
    require_instant,
    require_non_negative_number,
    require_number,
    to_decimal,
)

__all__ = [
    "Clock",
    "utc_now",
    "fixed_clock",
    "format_currency",
    "api_response",
    "error_response",
    "parse_json_body",
    "get_logger",
    "to_decimal",
    "require_number",
    "require_non_negative_number",
    "require_instant",
]
