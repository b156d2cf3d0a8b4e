"""
Remediation recommendations per threat label
"""

from typing import List

from medsec.models.ml_models import FeatureVector, ThreatLabel

LABEL_RECOMMENDATIONS = {
    ThreatLabel.MEDICAL_DEVICE_ATTACK: (
        "Immediately isolate affected medical device",
        "Notify biomedical engineering team",
        "Check patient safety protocols",
        "Review device firmware and security patches"
    ),
    ThreatLabel.DATA_BREACH: (
        "Activate HIPAA breach response protocol",
        "Identify and secure affected patient records",
        "Notify privacy officer and legal team",
        "Prepare breach notification documentation"
    ),
    ThreatLabel.DDOS: (
        "Activate DDoS mitigation protocols",
        "Ensure critical systems remain accessible",
        "Monitor patient care system availability"
    ),
    ThreatLabel.MALWARE: (
        "Isolate infected systems immediately",
        "Run comprehensive malware scan",
        "Check for lateral movement to medical devices"
    ),
    ThreatLabel.INTRUSION: (
        "Change all administrative passwords",
        "Review access logs for unauthorized activity",
        "Audit user permissions and access controls"
    ),
    ThreatLabel.BENIGN: ()
}

MEDICAL_DEVICE_RECOMMENDATION = "Coordinate with clinical staff for device safety"
PATIENT_DATA_RECOMMENDATION = "Document incident for HIPAA compliance"

def generate_recommendations(label: ThreatLabel, features: FeatureVector) -> List[str]:
    recommendations = list(LABEL_RECOMMENDATIONS[label])

    if features.is_medical_device:
        recommendations.append(MEDICAL_DEVICE_RECOMMENDATION)
    if features.is_patient_data:
        recommendations.append(PATIENT_DATA_RECOMMENDATION)

    return recommendations
