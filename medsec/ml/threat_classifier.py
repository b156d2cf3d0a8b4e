"""
Threat Classification Service
Classifies hospital network events by threat type, severity and clinical impact
"""

import logging
from collections import Counter
from typing import Iterable, List, Optional

from medsec.core.config import Settings
from medsec.ml.ensemble import EnsemblePredictor
from medsec.ml.feature_engineer import EventInput, FeatureEngineer
from medsec.ml.impact import assess_patient_safety, determine_severity, hipaa_impact
from medsec.ml.model_store import ModelStore
from medsec.ml.recommendations import generate_recommendations
from medsec.ml.risk_scorer import RiskScorer
from medsec.models.ml_models import ClassificationResult, PatientSafety, Severity
from medsec.models.schemas import ThreatSummary
from medsec.utils.helpers import calculate_percentage

logger = logging.getLogger(__name__)

class ThreatClassifier:
    def __init__(
        self,
        model_store: Optional[ModelStore] = None,
        settings: Optional[Settings] = None
    ):
        self.model_store = model_store or ModelStore(settings=settings)
        self.feature_engineer = FeatureEngineer()
        self.predictor = EnsemblePredictor()
        self.risk_scorer = RiskScorer()

    def classify(self, event: EventInput) -> ClassificationResult:
        features = self.feature_engineer.extract_features(event)
        state = self.model_store.state

        if not state.is_model_trained:
            logger.debug("Threat model not trained, using rule-based fallback")
            return self.model_store.fallback_classify(features)

        threat_type, confidence = self.predictor.predict(features, state.model)
        risk_score = self.risk_scorer.score(threat_type, features)

        result = ClassificationResult(
            threat_type=threat_type,
            confidence=confidence,
            severity=determine_severity(risk_score, features),
            risk_score=risk_score,
            hipaa_impact=hipaa_impact(features),
            patient_safety=assess_patient_safety(threat_type, features),
            recommendations=generate_recommendations(threat_type, features)
        )

        if result.severity in (Severity.HIGH, Severity.CRITICAL):
            logger.info(
                f"{result.severity.value.upper()} threat {threat_type.value} "
                f"(risk {risk_score}, confidence {confidence:.2f})"
            )
        return result

    def batch_classify(self, events: Iterable[EventInput]) -> List[ClassificationResult]:
        results = []

        for event in events:
            result = self.classify(event)
            results.append(result)

        return results

    def summarize(self, results: List[ClassificationResult]) -> ThreatSummary:
        if not results:
            return ThreatSummary()

        by_threat_type = Counter(result.threat_type.value for result in results)
        by_severity = Counter(result.severity.value for result in results)
        high_priority = by_severity[Severity.HIGH.value] + by_severity[Severity.CRITICAL.value]

        return ThreatSummary(
            total_events=len(results),
            by_threat_type=dict(by_threat_type),
            by_severity=dict(by_severity),
            hipaa_impacted=sum(1 for result in results if result.hipaa_impact),
            patient_safety_alerts=sum(
                1 for result in results
                if result.patient_safety in (PatientSafety.RISK, PatientSafety.CRITICAL)
            ),
            average_risk_score=round(sum(r.risk_score for r in results) / len(results), 2),
            high_priority_percentage=calculate_percentage(high_priority, len(results))
        )

def classify_threat(event: EventInput, model_store: Optional[ModelStore] = None) -> ClassificationResult:
    classifier = ThreatClassifier(model_store=model_store)
    return classifier.classify(event)
