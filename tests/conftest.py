import pytest

from medsec.core.config import Settings
from medsec.ml.model_store import ModelStore
from medsec.ml.threat_classifier import ThreatClassifier
from medsec.models.ml_models import FeatureVector, ThreatLabel, TrainingSample

NEUTRAL_FEATURES = dict(
    packet_size=512.0,
    connection_duration=0.0,
    bytes_transferred=1000.0,
    packets_per_second=10.0,
    unique_ports=1.0,
    protocol_diversity=0.0,
    payload_entropy=3.0,
    suspicious_strings=0,
    time_of_day=12,
    day_of_week=3,
    source_reputation=0.5,
    destination_reputation=0.5,
    geographic_distance=0.0,
    is_encrypted=False,
    has_base64=False,
    is_medical_device=False,
    is_patient_data=False,
    hipaa_relevant=False
)

def make_features(**overrides) -> FeatureVector:
    values = dict(NEUTRAL_FEATURES)
    values.update(overrides)
    return FeatureVector(**values)

def make_samples(count: int, label: ThreatLabel = ThreatLabel.BENIGN) -> list:
    return [
        TrainingSample(features=make_features(), label=label, confidence=0.9)
        for _ in range(count)
    ]

@pytest.fixture
def test_settings():
    return Settings(seed_training_data=False, log_to_file=False)

@pytest.fixture
def seeded_settings():
    return Settings(seed_training_data=True, log_to_file=False)

@pytest.fixture
def empty_store(test_settings):
    return ModelStore(settings=test_settings)

@pytest.fixture
def trained_store(test_settings):
    return ModelStore(training_data=make_samples(10), settings=test_settings)

@pytest.fixture
def trained_classifier(trained_store):
    return ThreatClassifier(model_store=trained_store)

@pytest.fixture
def untrained_classifier(seeded_settings):
    return ThreatClassifier(model_store=ModelStore(settings=seeded_settings))
