import math
from datetime import datetime
from decimal import Decimal, InvalidOperation

from services.shared.domain import InvalidArgumentException, IsoDateTime


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def require_number(value: object, argument: str) -> Decimal:
    """数値（int / float / Decimal）であることを検証して Decimal に変換する

    bool・文字列・None・NaN・無限大は数値とみなさない。
    金額は float で計算するため、float の範囲を超える Decimal も受け付けない。
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidArgumentException(argument, "must be a number")
    try:
        amount = to_decimal(value)
    except (InvalidOperation, ValueError) as e:
        raise InvalidArgumentException(argument, "must be a number") from e
    if not amount.is_finite() or math.isinf(float(amount)):
        raise InvalidArgumentException(argument, "must be a finite number")
    return amount


def require_non_negative_number(value: object, argument: str) -> Decimal:
    amount = require_number(value, argument)
    if amount < 0:
        raise InvalidArgumentException(argument, "must be a non-negative number")
    return amount


def require_instant(value: object, argument: str) -> IsoDateTime:
    """datetime または ISO 8601 文字列を IsoDateTime に変換する"""
    if not isinstance(value, (datetime, str)):
        raise InvalidArgumentException(argument, "must be a datetime or ISO 8601 string")
    try:
        return IsoDateTime.from_value(value)
    except ValueError as e:
        raise InvalidArgumentException(argument, "must be a valid date/time") from e
