"""
Machine Learning data models for feature extraction, training and classification
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Dict, Optional
from datetime import datetime
from enum import Enum

class ThreatLabel(str, Enum):
    BENIGN = "benign"
    MALWARE = "malware"
    INTRUSION = "intrusion"
    DDOS = "ddos"
    DATA_BREACH = "data_breach"
    MEDICAL_DEVICE_ATTACK = "medical_device_attack"

# Declaration order doubles as the tie-break order for ensemble votes.
CANONICAL_LABEL_ORDER = list(ThreatLabel)

class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class PatientSafety(str, Enum):
    SAFE = "safe"
    CONCERN = "concern"
    RISK = "risk"
    CRITICAL = "critical"

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class RawEvent(CamelModel):
    """Network event as supplied by the telemetry source. Every field is optional."""

    source_ip: Optional[str] = Field(default=None, alias="sourceIP")
    destination_ip: Optional[str] = Field(default=None, alias="destinationIP")
    packet_size: Optional[float] = None
    payload: Optional[str] = None
    timestamp: Optional[datetime] = None
    bytes_transferred: Optional[float] = None
    packets_per_second: Optional[float] = None
    protocol: Optional[str] = None
    connection_duration: Optional[float] = None
    unique_ports: Optional[float] = None
    protocol_diversity: Optional[float] = None
    source_reputation: Optional[float] = None
    destination_reputation: Optional[float] = None
    geographic_distance: Optional[float] = None

class FeatureVector(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    packet_size: float
    connection_duration: float
    bytes_transferred: float
    packets_per_second: float
    unique_ports: float
    protocol_diversity: float
    payload_entropy: float
    suspicious_strings: int
    time_of_day: int
    day_of_week: int
    source_reputation: float
    destination_reputation: float
    geographic_distance: float
    is_encrypted: bool
    has_base64: bool
    is_medical_device: bool
    is_patient_data: bool
    hipaa_relevant: bool

FEATURE_NAMES = list(FeatureVector.model_fields)
FEATURE_ALIASES = {name: to_camel(name) for name in FEATURE_NAMES}

class TrainingSample(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    features: FeatureVector
    label: ThreatLabel
    confidence: float = Field(ge=0.0, le=1.0)

class ClassificationResult(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    threat_type: ThreatLabel
    confidence: float = Field(ge=0.0, le=1.0)
    severity: Severity
    risk_score: int = Field(ge=0, le=100)
    hipaa_impact: bool
    patient_safety: PatientSafety
    recommendations: List[str]
    fallback: bool = False

class ModelMetrics(CamelModel):
    is_model_trained: bool
    training_data_size: int
    num_trees: int
    feature_weights: Dict[str, float]
    threat_thresholds: Dict[str, float]

DEFAULT_FEATURE_WEIGHTS = {
    "packetSize": 0.08,
    "connectionDuration": 0.06,
    "bytesTransferred": 0.12,
    "packetsPerSecond": 0.15,
    "uniquePorts": 0.09,
    "protocolDiversity": 0.07,
    "payloadEntropy": 0.11,
    "suspiciousStrings": 0.13,
    "timeOfDay": 0.03,
    "dayOfWeek": 0.02,
    "sourceReputation": 0.10,
    "destinationReputation": 0.08,
    "geographicDistance": 0.04,
    "isEncrypted": 0.05,
    "hasBase64": 0.06,
    "isMedicalDevice": 0.18,
    "isPatientData": 0.20,
    "hipaaRelevant": 0.17
}

THREAT_THRESHOLDS = {
    ThreatLabel.BENIGN.value: 0.3,
    ThreatLabel.MALWARE.value: 0.6,
    ThreatLabel.INTRUSION.value: 0.7,
    ThreatLabel.DDOS.value: 0.8,
    ThreatLabel.DATA_BREACH.value: 0.9,
    ThreatLabel.MEDICAL_DEVICE_ATTACK.value: 0.95
}
