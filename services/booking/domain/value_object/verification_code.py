from __future__ import annotations

from dataclasses import dataclass

_BASE36_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_CODE_LENGTH = 8


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def string_hash32(text: str) -> int:
    """31 倍の乗算ハッシュ（32bit 符号付き整数でラップアラウンド）

    発行済みコードとの互換性のため UTF-16 のコードユニット単位で計算する。
    """
    encoded = text.encode("utf-16-le")
    hash_value = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        hash_value = _to_int32((hash_value << 5) - hash_value + code_unit)
    return hash_value


@dataclass(frozen=True)
class VerificationCode:
    """チェックイン用の照合コード（8 文字の英数字）

    暗号学的な強度は無い。表示・照合の利便性のためのコードであり、
    アクセス制御には使わないこと（必要なら HMAC ベースに置き換える）。
    """

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != _CODE_LENGTH or not self.value.isalnum():
            raise ValueError(f"Invalid verification code: {self.value}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def for_booking(cls, booking_id: str, booking_number: str) -> VerificationCode:
        """予約 ID と予約番号から照合コードを生成する"""
        hash_value = string_hash32(f"{booking_id}-{booking_number}")
        code = _to_base36(abs(hash_value))[:_CODE_LENGTH]
        return cls(code.rjust(_CODE_LENGTH, "0"))

    def matches(self, candidate: str) -> bool:
        """入力されたコード（前後空白・大文字小文字を無視）と一致するか"""
        return candidate.strip().upper() == self.value
