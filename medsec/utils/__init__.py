"""
MedSec - Utilities Module
Logging configuration and shared helpers
"""

from medsec.utils.logger import setup_logging, log_system_event
from medsec.utils.helpers import clamp, calculate_percentage, utc_now

__all__ = [
    "setup_logging",
    "log_system_event",
    "clamp",
    "calculate_percentage",
    "utc_now"
]
