from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .currency import Currency

CENT = Decimal("0.01")


def quantize_cents(value: Decimal) -> Decimal:
    """セント単位に四捨五入する（ROUND_HALF_UP）

    桁数の大きい金額でも丸められるよう、精度を値の桁数に合わせて広げる。
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_cents(value: float) -> float:
    """float の金額をセント単位に丸める

    value × 100 を最も近い整数に丸め（ちょうど .5 は大きい方へ）100 で割る。
    積は float のまま計算するため 4.02 × 0.25 は 1.0049999... となり 1.00 に丸まる。
    """
    scaled = value * 100
    if not math.isfinite(scaled):
        return value
    cents = math.floor(scaled)
    if scaled - cents >= 0.5:
        cents += 1
    return cents / 100


def to_cents(value: float) -> Decimal:
    """round_cents 済みの float を小数 2 桁の Decimal に変換する"""
    return quantize_cents(Decimal(str(value)))


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    Value Object として不変性を保証。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def rounded(self) -> Money:
        """セント単位に丸めた Money を返す"""
        return Money(amount=quantize_cents(self.amount), currency=self.currency)

    @classmethod
    def usd(cls, amount: Decimal | int | str) -> Money:
        """米ドルで Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency.usd())
