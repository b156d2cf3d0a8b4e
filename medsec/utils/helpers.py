"""
Helper Functions
Small numeric and time helpers shared by the engine
"""

from datetime import datetime, timezone
from typing import Union

Number = Union[int, float]

def clamp(value: Number, lower: Number, upper: Number) -> Number:
    return max(lower, min(upper, value))

def calculate_percentage(part: float, whole: float, decimal_places: int = 2) -> float:
    if whole == 0:
        return 0.0
    percentage = (part / whole) * 100
    return round(percentage, decimal_places)

def utc_now() -> datetime:
    return datetime.now(timezone.utc)
