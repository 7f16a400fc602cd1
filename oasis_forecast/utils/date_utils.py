"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import List


def generate_horizon(start: date, days: int) -> List[date]:
    """Generate `days` consecutive dates beginning at start (empty when days <= 0)"""
    return [start + timedelta(days=i) for i in range(max(days, 0))]


def lookback_start(today: date, days: int) -> date:
    """First date of a trailing window ending today"""
    return today - timedelta(days=days)
