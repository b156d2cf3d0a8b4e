"""
Severity and impact assessment for classified threats.

Severity is driven by the risk score but escalates to critical early when a
medical device or patient data is involved. Patient safety depends only on the
threat label and the clinical context of the event.
"""

from medsec.models.ml_models import FeatureVector, PatientSafety, Severity, ThreatLabel

def determine_severity(risk_score: int, features: FeatureVector) -> Severity:
    if features.is_medical_device and risk_score > 60:
        return Severity.CRITICAL
    if features.is_patient_data and risk_score > 50:
        return Severity.CRITICAL
    if risk_score >= 80:
        return Severity.CRITICAL
    if risk_score >= 60:
        return Severity.HIGH
    if risk_score >= 40:
        return Severity.MEDIUM
    return Severity.LOW

def assess_patient_safety(label: ThreatLabel, features: FeatureVector) -> PatientSafety:
    if label == ThreatLabel.MEDICAL_DEVICE_ATTACK:
        return PatientSafety.CRITICAL
    if features.is_medical_device and label != ThreatLabel.BENIGN:
        return PatientSafety.RISK
    if features.is_patient_data:
        return PatientSafety.CONCERN
    return PatientSafety.SAFE

def hipaa_impact(features: FeatureVector) -> bool:
    return features.hipaa_relevant
