from datetime import datetime, timezone
from decimal import Decimal

import pytest

from services.shared.domain import InvalidArgumentException
from services.shared.utils import (
    require_instant,
    require_non_negative_number,
    require_number,
    to_decimal,
)


class TestToDecimal:
    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_is_returned_as_is(self):
        value = Decimal("1.23")
        assert to_decimal(value) is value


class TestRequireNumber:
    def test_accepts_int_float_and_decimal(self):
        assert require_number(10, "x") == Decimal("10")
        assert require_number(10.25, "x") == Decimal("10.25")
        assert require_number(Decimal("10.255"), "x") == Decimal("10.255")

    @pytest.mark.parametrize("value", ["10", None, True, [], float("nan"), Decimal("NaN")])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(InvalidArgumentException) as exc_info:
            require_number(value, "total_price")
        assert exc_info.value.argument == "total_price"

    def test_rejects_negative_when_non_negative_required(self):
        with pytest.raises(InvalidArgumentException, match="non-negative"):
            require_non_negative_number(-1, "total_price")

    def test_rejects_decimal_beyond_float_range(self):
        with pytest.raises(InvalidArgumentException, match="finite"):
            require_number(Decimal("1e400"), "total_price")


class TestRequireInstant:
    def test_accepts_datetime_and_string(self):
        expected = datetime(2025, 7, 1, tzinfo=timezone.utc)
        assert require_instant(expected, "d").value == expected
        assert require_instant("2025-07-01T00:00:00Z", "d").value == expected

    @pytest.mark.parametrize("value", ["tomorrow", 1719792000, None])
    def test_rejects_invalid_values(self, value):
        with pytest.raises(InvalidArgumentException) as exc_info:
            require_instant(value, "cancelled_at")
        assert exc_info.value.argument == "cancelled_at"
        assert isinstance(exc_info.value, ValueError)
