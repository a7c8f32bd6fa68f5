import pytest

from services.booking.domain.value_object import VerificationCode, string_hash32


class TestStringHash32:
    def test_matches_previously_issued_values(self):
        assert string_hash32("booking-001-BK-1001") == -208463788
        assert string_hash32("a-b") == 94710

    def test_wraps_around_to_signed_32_bit(self):
        value = string_hash32("booking-002-BK-1001")
        assert value == -2015918251
        assert -(2**31) <= value < 2**31


class TestVerificationCode:
    @pytest.mark.parametrize(
        "booking_id, booking_number, expected",
        [
            ("booking-001", "BK-1001", "003G43OS"),
            ("booking-001", "BK-1002", "003G43OR"),
            ("booking-002", "BK-1001", "00XC84H7"),
            ("a", "b", "0000212U"),
            ("", "x", "00000163"),
            # 非 ASCII は UTF-16 のコードユニット単位（サロゲートペア含む）
            ("é-ñ", "🏔", "00UWMLUW"),
        ],
    )
    def test_for_booking(self, booking_id, booking_number, expected):
        code = VerificationCode.for_booking(booking_id, booking_number)
        assert code.value == expected
        assert str(code) == expected

    def test_is_deterministic(self):
        first = VerificationCode.for_booking("booking-001", "BK-1001")
        second = VerificationCode.for_booking("booking-001", "BK-1001")
        assert first == second

    def test_matches_ignores_case_and_whitespace(self):
        code = VerificationCode("003G43OS")
        assert code.matches("  003g43os ")
        assert not code.matches("003G43OR")

    @pytest.mark.parametrize("value", ["", "ABC", "003G43OS1", "003G-3OS"])
    def test_invalid_code_raises_error(self, value):
        with pytest.raises(ValueError, match="Invalid verification code"):
            VerificationCode(value)
