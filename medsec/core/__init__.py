"""
MedSec - Core Module
Central configuration and error types
"""

from medsec.core.config import Settings, settings
from medsec.core.exceptions import (
    ThreatEngineError,
    InsufficientTrainingDataError,
    SnapshotValidationError
)

__all__ = [
    "Settings",
    "settings",
    "ThreatEngineError",
    "InsufficientTrainingDataError",
    "SnapshotValidationError"
]
