"""
Pydantic Schemas for the MedSec API
Request/response models that are not part of the engine core
"""

from pydantic import Field
from typing import Dict

from medsec.models.ml_models import CamelModel

class TrainingSampleResponse(CamelModel):
    training_data_size: int
    retrained: bool

class ThreatSummary(CamelModel):
    total_events: int = 0
    by_threat_type: Dict[str, int] = Field(default_factory=dict)
    by_severity: Dict[str, int] = Field(default_factory=dict)
    hipaa_impacted: int = 0
    patient_safety_alerts: int = 0
    average_risk_score: float = 0.0
    high_priority_percentage: float = 0.0

class SystemHealth(CamelModel):
    status: str
    version: str
    is_model_trained: bool
    training_data_size: int
