"""
MedSec - Models Module
Event, feature and classification data structures
"""

from medsec.models.ml_models import (
    ThreatLabel,
    Severity,
    PatientSafety,
    RawEvent,
    FeatureVector,
    TrainingSample,
    ClassificationResult,
    ModelMetrics,
    CANONICAL_LABEL_ORDER,
    DEFAULT_FEATURE_WEIGHTS,
    FEATURE_NAMES,
    THREAT_THRESHOLDS
)

from medsec.models.schemas import (
    TrainingSampleResponse,
    ThreatSummary,
    SystemHealth
)

__all__ = [
    # ML Models
    "ThreatLabel",
    "Severity",
    "PatientSafety",
    "RawEvent",
    "FeatureVector",
    "TrainingSample",
    "ClassificationResult",
    "ModelMetrics",
    "CANONICAL_LABEL_ORDER",
    "DEFAULT_FEATURE_WEIGHTS",
    "FEATURE_NAMES",
    "THREAT_THRESHOLDS",

    # API Schemas
    "TrainingSampleResponse",
    "ThreatSummary",
    "SystemHealth"
]
