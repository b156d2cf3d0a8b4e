"""
Threat Classification API Endpoints
Classify network events and summarize batches
"""

from fastapi import APIRouter, Depends
from typing import List

from medsec.api.dependencies import get_threat_classifier
from medsec.ml.threat_classifier import ThreatClassifier
from medsec.models.ml_models import ClassificationResult, FeatureVector, RawEvent
from medsec.models.schemas import ThreatSummary

router = APIRouter()

@router.post("/classify", response_model=ClassificationResult)
def classify_event(
    event: RawEvent,
    classifier: ThreatClassifier = Depends(get_threat_classifier)
):
    return classifier.classify(event)

@router.post("/classify/batch", response_model=List[ClassificationResult])
def classify_events(
    events: List[RawEvent],
    classifier: ThreatClassifier = Depends(get_threat_classifier)
):
    return classifier.batch_classify(events)

@router.post("/summary", response_model=ThreatSummary)
def summarize_events(
    events: List[RawEvent],
    classifier: ThreatClassifier = Depends(get_threat_classifier)
):
    results = classifier.batch_classify(events)
    return classifier.summarize(results)

@router.post("/features", response_model=FeatureVector)
def extract_event_features(
    event: RawEvent,
    classifier: ThreatClassifier = Depends(get_threat_classifier)
):
    return classifier.feature_engineer.extract_features(event)
