from datetime import datetime, timezone

import pytest

from services.shared.utils import fixed_clock


@pytest.fixture
def now():
    """全テスト共通の現在時刻"""
    return datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(now):
    """現在時刻を固定した Clock"""
    return fixed_clock(now)
