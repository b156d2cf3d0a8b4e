import pytest
from fastapi.testclient import TestClient

from medsec.main import create_app
from medsec.ml.model_store import ModelStore
from medsec.ml.threat_classifier import ThreatClassifier

from tests.conftest import make_features

@pytest.fixture
def client(trained_classifier, test_settings):
    app = create_app(app_settings=test_settings, classifier=trained_classifier)
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def untrained_client(seeded_settings):
    classifier = ThreatClassifier(model_store=ModelStore(settings=seeded_settings))
    app = create_app(app_settings=seeded_settings, classifier=classifier)
    with TestClient(app) as test_client:
        yield test_client

class TestSystemEndpoints:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["isModelTrained"] == True

class TestThreatEndpoints:
    def test_classify_event(self, client):
        response = client.post("/api/v1/threats/classify", json={
            "sourceIP": "10.0.0.5",
            "destinationIP": "10.0.2.50",
            "payload": "GET /status",
            "packetsPerSecond": 5000
        })

        assert response.status_code == 200
        data = response.json()
        assert data["threatType"] == "ddos"
        assert data["riskScore"] == 77
        assert data["severity"] == "high"
        assert data["patientSafety"] == "safe"
        assert data["hipaaImpact"] == False

    def test_classify_batch(self, client):
        response = client.post("/api/v1/threats/classify/batch", json=[
            {"packetsPerSecond": 5000},
            {"payload": "hello"}
        ])

        assert response.status_code == 200
        assert [r["threatType"] for r in response.json()] == ["ddos", "benign"]

    def test_summary(self, client):
        response = client.post("/api/v1/threats/summary", json=[
            {"packetsPerSecond": 5000},
            {"payload": "hello"}
        ])

        assert response.status_code == 200
        assert response.json()["totalEvents"] == 2
        assert response.json()["bySeverity"] == {"high": 1, "low": 1}

    def test_extract_features(self, client):
        response = client.post("/api/v1/threats/features", json={
            "sourceIP": "192.168.100.7",
            "payload": "mrn: 42"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["isMedicalDevice"] == True
        assert data["isPatientData"] == True
        assert data["uniquePorts"] == 1

    def test_untrained_classification_uses_fallback(self, untrained_client):
        response = untrained_client.post("/api/v1/threats/classify", json={"payload": "hello"})

        assert response.status_code == 200
        assert response.json()["fallback"] == True
        assert response.json()["confidence"] == 0.5

class TestModelEndpoints:
    def test_metrics(self, client):
        response = client.get("/api/v1/ml/metrics")

        assert response.status_code == 200
        data = response.json()
        assert data["isModelTrained"] == True
        assert data["trainingDataSize"] == 10
        assert data["numTrees"] == 100
        assert data["threatThresholds"]["medical_device_attack"] == 0.95

    def test_feature_importance(self, client):
        response = client.get("/api/v1/ml/feature-importance")
        assert list(response.json())[0] == "isPatientData"

    def test_train_with_insufficient_data(self, untrained_client):
        response = untrained_client.post("/api/v1/ml/train")
        assert response.status_code == 409

    def test_train(self, client):
        response = client.post("/api/v1/ml/train")
        assert response.status_code == 200
        assert response.json()["isModelTrained"] == True

    def test_add_sample(self, client):
        sample = {
            "features": make_features(packets_per_second=9000).model_dump(by_alias=True),
            "label": "ddos",
            "confidence": 0.9
        }

        response = client.post("/api/v1/ml/samples", json=sample)

        assert response.status_code == 201
        assert response.json() == {"trainingDataSize": 11, "retrained": False}

    def test_add_invalid_sample(self, client):
        sample = {
            "features": make_features().model_dump(by_alias=True),
            "label": "ddos",
            "confidence": 2.0
        }

        response = client.post("/api/v1/ml/samples", json=sample)
        assert response.status_code == 422

    def test_export_import_round_trip(self, client, untrained_client):
        exported = client.get("/api/v1/ml/export")
        assert exported.status_code == 200

        response = untrained_client.post("/api/v1/ml/import", json=exported.json())

        assert response.status_code == 200
        assert response.json() == client.get("/api/v1/ml/metrics").json()

    def test_import_invalid_snapshot(self, client):
        before = client.get("/api/v1/ml/metrics").json()

        document = client.get("/api/v1/ml/export").json()
        del document["model"]
        response = client.post("/api/v1/ml/import", json=document)

        assert response.status_code == 422
        assert client.get("/api/v1/ml/metrics").json() == before
