from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    タイムゾーン無しの値は UTC として扱う。
    """

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=timezone.utc))

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        if not isinstance(s, str):
            raise ValueError(f"Invalid ISO 8601 datetime: {s!r}")
        try:
            dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    @classmethod
    def from_value(cls, v: datetime | str) -> IsoDateTime:
        """datetime または ISO 8601 文字列から生成"""
        if isinstance(v, datetime):
            return cls(value=v)
        return cls.from_string(v)

    def __str__(self) -> str:
        return self.value.isoformat()

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value

    def minus(self, delta: timedelta) -> IsoDateTime:
        return IsoDateTime(value=self.value - delta)

    def days_since(self, other: IsoDateTime) -> float:
        """other から self までの日数（小数を含む、過去なら負）"""
        return (self.value - other.value) / timedelta(days=1)

    def to_utc_millis_string(self) -> str:
        """ミリ秒精度・Z 終端の UTC 文字列（例: 2024-06-01T12:00:00.000Z）"""
        utc = self.value.astimezone(timezone.utc)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
