from unittest.mock import patch

import pytest

from medsec.ml.feature_engineer import extract_features
from medsec.ml.recommendations import MEDICAL_DEVICE_RECOMMENDATION, PATIENT_DATA_RECOMMENDATION
from medsec.ml.threat_classifier import ThreatClassifier, classify_threat
from medsec.models.ml_models import PatientSafety, Severity, ThreatLabel

PHI_ON_DEVICE_EVENT = {
    "sourceIP": "10.100.5.5",
    "destinationIP": "10.0.2.50",
    "payload": "patient mrn=123 ssn 123-45-6789",
    "bytesTransferred": 200000,
    "packetsPerSecond": 10
}

DDOS_EVENT = {
    "sourceIP": "10.0.0.5",
    "destinationIP": "10.0.2.50",
    "payload": "GET /status",
    "packetsPerSecond": 5000
}

BENIGN_EVENT = {
    "sourceIP": "10.0.0.5",
    "destinationIP": "10.0.2.50",
    "payload": "normal_traffic",
    "bytesTransferred": 4000,
    "packetsPerSecond": 20
}

class TestTrainedClassification:
    def test_phi_on_medical_device(self, trained_classifier):
        features = extract_features(PHI_ON_DEVICE_EVENT)
        assert features.is_medical_device == True
        assert features.is_patient_data == True
        assert features.hipaa_relevant == True
        # patient, mrn and ssn tokens; the decision list's first clause fires
        assert features.suspicious_strings == 3

        result = trained_classifier.classify(PHI_ON_DEVICE_EVENT)

        assert result.threat_type == ThreatLabel.MEDICAL_DEVICE_ATTACK
        assert result.confidence == 1.0
        assert result.risk_score == 100
        assert result.severity == Severity.CRITICAL
        assert result.patient_safety == PatientSafety.CRITICAL
        assert result.hipaa_impact == True
        assert result.fallback == False
        assert result.recommendations[0] == "Immediately isolate affected medical device"
        assert result.recommendations[-2:] == [MEDICAL_DEVICE_RECOMMENDATION, PATIENT_DATA_RECOMMENDATION]

    def test_ddos_without_hospital_context(self, trained_classifier):
        result = trained_classifier.classify(DDOS_EVENT)

        assert result.threat_type == ThreatLabel.DDOS
        assert result.risk_score == 77
        assert result.severity == Severity.HIGH
        assert result.patient_safety == PatientSafety.SAFE
        assert result.hipaa_impact == False
        assert result.confidence == 1.0

    def test_benign_event(self, trained_classifier):
        result = trained_classifier.classify(BENIGN_EVENT)

        assert result.threat_type == ThreatLabel.BENIGN
        assert result.risk_score == 10
        assert result.severity == Severity.LOW
        assert result.recommendations == []

    def test_data_breach_from_patient_export(self, trained_classifier):
        result = trained_classifier.classify({
            "sourceIP": "10.0.3.3",
            "destinationIP": "203.0.113.50",
            "payload": "Patient ID: 4411 DOB: 01/02/1980",
            "bytesTransferred": 2_500_000,
            "sourceReputation": 0.2
        })

        # 85 base + 15 bytes + 20 reputation + 30 patient data + 25 hipaa, clamped
        assert result.threat_type == ThreatLabel.DATA_BREACH
        assert result.risk_score == 100
        assert result.severity == Severity.CRITICAL
        assert result.patient_safety == PatientSafety.CONCERN

    def test_result_is_frozen(self, trained_classifier):
        result = trained_classifier.classify(BENIGN_EVENT)
        with pytest.raises(Exception):
            result.risk_score = 0

class TestUntrainedClassification:
    def test_benign_event_uses_fallback(self, untrained_classifier):
        result = untrained_classifier.classify(BENIGN_EVENT)

        assert result.fallback == True
        assert result.threat_type == ThreatLabel.BENIGN
        assert result.confidence == 0.5
        assert result.severity == Severity.LOW

    def test_ensemble_not_consulted(self, untrained_classifier):
        with patch.object(untrained_classifier.predictor, "predict") as mock_predict:
            result = untrained_classifier.classify(PHI_ON_DEVICE_EVENT)

        mock_predict.assert_not_called()
        assert result.threat_type == ThreatLabel.MEDICAL_DEVICE_ATTACK
        assert result.confidence == 0.7
        assert result.risk_score == 85

    def test_module_level_helper(self, seeded_settings):
        with patch("medsec.ml.model_store.default_settings", seeded_settings):
            result = classify_threat(BENIGN_EVENT)

        assert result.fallback == True
        assert result.threat_type == ThreatLabel.BENIGN

class TestBatchAnalysis:
    def test_batch_classify_preserves_order(self, trained_classifier):
        results = trained_classifier.batch_classify([DDOS_EVENT, BENIGN_EVENT, PHI_ON_DEVICE_EVENT])

        assert [r.threat_type for r in results] == [
            ThreatLabel.DDOS, ThreatLabel.BENIGN, ThreatLabel.MEDICAL_DEVICE_ATTACK
        ]

    def test_summarize(self, trained_classifier):
        results = trained_classifier.batch_classify([DDOS_EVENT, BENIGN_EVENT, PHI_ON_DEVICE_EVENT, BENIGN_EVENT])
        summary = trained_classifier.summarize(results)

        assert summary.total_events == 4
        assert summary.by_threat_type == {"ddos": 1, "benign": 2, "medical_device_attack": 1}
        assert summary.by_severity == {"high": 1, "low": 2, "critical": 1}
        assert summary.hipaa_impacted == 1
        assert summary.patient_safety_alerts == 1
        assert summary.average_risk_score == pytest.approx((77 + 10 + 100 + 10) / 4)
        assert summary.high_priority_percentage == 50.0

    def test_summarize_empty(self, trained_classifier):
        summary = trained_classifier.summarize([])
        assert summary.total_events == 0
        assert summary.by_threat_type == {}
