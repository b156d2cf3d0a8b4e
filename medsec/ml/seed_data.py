"""
Hospital baseline training samples
"""

from typing import List

from medsec.models.ml_models import FeatureVector, ThreatLabel, TrainingSample

def default_training_samples() -> List[TrainingSample]:
    return [
        # Routine medical device telemetry
        TrainingSample(
            features=FeatureVector(
                packet_size=1024, connection_duration=2.5, bytes_transferred=5000,
                packets_per_second=10, unique_ports=2, protocol_diversity=0.2,
                payload_entropy=4.2, suspicious_strings=0, time_of_day=14, day_of_week=2,
                source_reputation=0.9, destination_reputation=0.8, geographic_distance=100,
                is_encrypted=True, has_base64=False, is_medical_device=True,
                is_patient_data=False, hipaa_relevant=False
            ),
            label=ThreatLabel.BENIGN,
            confidence=0.95
        ),
        # Malware on a medical device subnet
        TrainingSample(
            features=FeatureVector(
                packet_size=2048, connection_duration=0.1, bytes_transferred=50000,
                packets_per_second=200, unique_ports=15, protocol_diversity=0.8,
                payload_entropy=7.8, suspicious_strings=5, time_of_day=3, day_of_week=6,
                source_reputation=0.2, destination_reputation=0.1, geographic_distance=5000,
                is_encrypted=False, has_base64=True, is_medical_device=True,
                is_patient_data=False, hipaa_relevant=True
            ),
            label=ThreatLabel.MEDICAL_DEVICE_ATTACK,
            confidence=0.92
        ),
        # Patient record exfiltration
        TrainingSample(
            features=FeatureVector(
                packet_size=8192, connection_duration=30, bytes_transferred=1000000,
                packets_per_second=50, unique_ports=3, protocol_diversity=0.3,
                payload_entropy=6.5, suspicious_strings=2, time_of_day=22, day_of_week=0,
                source_reputation=0.4, destination_reputation=0.3, geographic_distance=8000,
                is_encrypted=True, has_base64=False, is_medical_device=False,
                is_patient_data=True, hipaa_relevant=True
            ),
            label=ThreatLabel.DATA_BREACH,
            confidence=0.88
        ),
        # Volumetric attack on hospital systems
        TrainingSample(
            features=FeatureVector(
                packet_size=64, connection_duration=0.01, bytes_transferred=100,
                packets_per_second=10000, unique_ports=1, protocol_diversity=0.1,
                payload_entropy=2.1, suspicious_strings=0, time_of_day=15, day_of_week=3,
                source_reputation=0.1, destination_reputation=0.9, geographic_distance=12000,
                is_encrypted=False, has_base64=False, is_medical_device=False,
                is_patient_data=False, hipaa_relevant=False
            ),
            label=ThreatLabel.DDOS,
            confidence=0.96
        )
    ]
