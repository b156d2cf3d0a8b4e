"""
Feature Engineering for the Threat Classifier
Extracts a fixed-shape feature vector from raw network events
"""

import logging
import re
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Union

import numpy as np
from pydantic import ValidationError

from medsec.models.ml_models import FeatureVector, RawEvent
from medsec.utils.helpers import utc_now

logger = logging.getLogger(__name__)

EventInput = Union[RawEvent, Mapping[str, Any], None]

MEDICAL_DEVICE_PREFIXES = (
    '10.100.', '10.200.', '172.20.', '172.21.',
    '192.168.100.', '192.168.200.'
)

ENCRYPTION_ENTROPY_THRESHOLD = 7.0

class FeatureEngineer:
    def __init__(self):
        self.injection_tokens = [
            'eval', 'exec', 'system', 'shell', 'cmd', 'script',
            'union', 'select', 'drop', 'insert', 'update', 'delete'
        ]
        self.health_data_tokens = ['patient', 'medical', 'phi', 'ssn', 'dob', 'mrn']
        self.malware_tokens = [
            'trojan', 'backdoor', 'malware', 'virus', 'ransomware',
            'encrypt', 'decrypt', 'bitcoin', 'ransom'
        ]
        self.suspicious_patterns = [
            re.compile(re.escape(token), re.IGNORECASE)
            for token in self.injection_tokens + self.health_data_tokens + self.malware_tokens
        ]
        self.patient_data_patterns = [
            re.compile(r'\b\d{3}-\d{2}-\d{4}\b'),  # SSN
            re.compile(r'\b\d{2}/\d{2}/\d{4}\b'),  # dates
            re.compile(r'\bmrn\s*[:=]\s*\d+', re.IGNORECASE),
            re.compile(r'\bpatient\s+id\s*[:=]\s*\d+', re.IGNORECASE),
            re.compile(r'\bdob\s*[:=]', re.IGNORECASE),
            re.compile(r'\bphi\b', re.IGNORECASE)
        ]
        self.base64_pattern = re.compile(r'[A-Za-z0-9+/]*={0,2}')

    def extract_features(self, event: EventInput) -> FeatureVector:
        raw = self._coerce_event(event)
        payload = raw.payload or ''
        timestamp = self._resolve_timestamp(raw.timestamp)
        entropy = self.calculate_entropy(payload)
        is_patient_data = self.contains_patient_data(payload)

        return FeatureVector(
            packet_size=self._or_default(raw.packet_size, 0.0),
            connection_duration=self._or_default(raw.connection_duration, 0.0),
            bytes_transferred=self._or_default(raw.bytes_transferred, 0.0),
            packets_per_second=self._or_default(raw.packets_per_second, 0.0),
            unique_ports=self._or_default(raw.unique_ports, 1.0),
            protocol_diversity=self._or_default(raw.protocol_diversity, 0.0),
            payload_entropy=entropy,
            suspicious_strings=self.count_suspicious_strings(payload),
            time_of_day=timestamp.hour,
            day_of_week=timestamp.isoweekday() % 7,
            source_reputation=self._or_default(raw.source_reputation, 0.5),
            destination_reputation=self._or_default(raw.destination_reputation, 0.5),
            geographic_distance=self._or_default(raw.geographic_distance, 0.0),
            is_encrypted=entropy > ENCRYPTION_ENTROPY_THRESHOLD,
            has_base64=self.detect_base64(payload),
            is_medical_device=self.is_medical_device_ip(raw.source_ip),
            is_patient_data=is_patient_data,
            hipaa_relevant=self.is_hipaa_relevant(raw)
        )

    def calculate_entropy(self, text: str) -> float:
        if not text:
            return 0.0

        frequencies = Counter(text)
        if len(frequencies) == 1:
            return 0.0

        counts = np.array(list(frequencies.values()), dtype=float)
        probabilities = counts / len(text)
        entropy = -np.sum(probabilities * np.log2(probabilities))

        return float(entropy)

    def count_suspicious_strings(self, payload: str) -> int:
        if not payload:
            return 0

        return sum(len(pattern.findall(payload)) for pattern in self.suspicious_patterns)

    def detect_encryption(self, payload: str) -> bool:
        return self.calculate_entropy(payload) > ENCRYPTION_ENTROPY_THRESHOLD

    def detect_base64(self, payload: str) -> bool:
        return len(payload) > 20 and bool(self.base64_pattern.fullmatch(payload))

    def is_medical_device_ip(self, ip_address: Optional[str]) -> bool:
        if not ip_address:
            return False

        return ip_address.startswith(MEDICAL_DEVICE_PREFIXES)

    def contains_patient_data(self, payload: str) -> bool:
        if not payload:
            return False

        return any(pattern.search(payload) for pattern in self.patient_data_patterns)

    def is_hipaa_relevant(self, event: EventInput) -> bool:
        raw = self._coerce_event(event)
        return (
            self.contains_patient_data(raw.payload or '')
            or self.is_medical_device_ip(raw.source_ip)
            or self.is_medical_device_ip(raw.destination_ip)
        )

    def _coerce_event(self, event: EventInput) -> RawEvent:
        if isinstance(event, RawEvent):
            return event

        if not event:
            return RawEvent()

        data: Dict[str, Any] = dict(event)
        try:
            return RawEvent.model_validate(data)
        except ValidationError as e:
            invalid = {str(error['loc'][0]) for error in e.errors() if error['loc']}
            invalid_keys = set(invalid)
            for name, field in RawEvent.model_fields.items():
                if name in invalid or field.alias in invalid:
                    invalid_keys.update({name, field.alias})

            logger.warning(f"Ignoring malformed event fields: {sorted(invalid)}")
            cleaned = {key: value for key, value in data.items() if key not in invalid_keys}
            try:
                return RawEvent.model_validate(cleaned)
            except ValidationError:
                logger.warning("Event could not be parsed, using neutral defaults")
                return RawEvent()

    def _resolve_timestamp(self, timestamp: Optional[datetime]) -> datetime:
        return timestamp if timestamp is not None else utc_now()

    @staticmethod
    def _or_default(value: Optional[float], default: float) -> float:
        return default if value is None else value

def extract_features(event: EventInput) -> FeatureVector:
    return FeatureEngineer().extract_features(event)
