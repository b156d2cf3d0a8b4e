"""
Risk Scoring
Maps a threat label and feature vector to an integer 0-100 risk score
"""

from medsec.models.ml_models import FeatureVector, ThreatLabel
from medsec.utils.helpers import clamp

BASE_SCORES = {
    ThreatLabel.BENIGN: 10,
    ThreatLabel.MALWARE: 60,
    ThreatLabel.INTRUSION: 70,
    ThreatLabel.DDOS: 65,
    ThreatLabel.DATA_BREACH: 85,
    ThreatLabel.MEDICAL_DEVICE_ATTACK: 90
}

MIN_RISK_SCORE = 0
MAX_RISK_SCORE = 100

class RiskScorer:
    def __init__(self):
        self.base_scores = dict(BASE_SCORES)

    def score(self, label: ThreatLabel, features: FeatureVector) -> int:
        total = self.threat_score(label, features) + self.hospital_surcharge(features)
        return int(clamp(total, MIN_RISK_SCORE, MAX_RISK_SCORE))

    def threat_score(self, label: ThreatLabel, features: FeatureVector) -> int:
        score = self.base_scores[label]

        if features.suspicious_strings > 3:
            score += 15
        if features.payload_entropy > 7.0:
            score += 10
        if features.packets_per_second > 500:
            score += 12
        if features.source_reputation < 0.3:
            score += 20
        if features.bytes_transferred > 1_000_000:
            score += 15

        return int(clamp(score, MIN_RISK_SCORE, MAX_RISK_SCORE))

    def hospital_surcharge(self, features: FeatureVector) -> int:
        surcharge = 0

        if features.is_medical_device:
            surcharge += 20
        if features.is_patient_data:
            surcharge += 30
        if features.hipaa_relevant:
            surcharge += 25

        return surcharge
