"""
API Dependencies and Dependency Injection
Common dependencies used across API endpoints
"""

from fastapi import Depends, Request

from medsec.ml.model_store import ModelStore
from medsec.ml.threat_classifier import ThreatClassifier

def get_threat_classifier(request: Request) -> ThreatClassifier:
    return request.app.state.threat_classifier

def get_model_store(
    classifier: ThreatClassifier = Depends(get_threat_classifier)
) -> ModelStore:
    return classifier.model_store
