from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """現在時刻（UTC）を返すデフォルトの Clock"""
    return datetime.now(timezone.utc)


def fixed_clock(instant: datetime) -> Clock:
    """常に同じ時刻を返す Clock を生成する"""

    def _now() -> datetime:
        return instant

    return _now
