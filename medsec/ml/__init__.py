"""
MedSec - Machine Learning Module
Feature extraction, ensemble voting and threat assessment
"""

from medsec.ml.feature_engineer import FeatureEngineer
from medsec.ml.decision_rules import DecisionRule, FixedPolicy, ConstantRule, LearnedThreshold
from medsec.ml.ensemble import EnsemblePredictor, ThreatModel
from medsec.ml.risk_scorer import RiskScorer
from medsec.ml.model_store import ModelStore
from medsec.ml.snapshot import ModelSnapshot
from medsec.ml.threat_classifier import ThreatClassifier

from medsec.ml.feature_engineer import extract_features
from medsec.ml.impact import determine_severity, assess_patient_safety
from medsec.ml.recommendations import generate_recommendations
from medsec.ml.threat_classifier import classify_threat

__all__ = [
    "FeatureEngineer",
    "DecisionRule",
    "FixedPolicy",
    "ConstantRule",
    "LearnedThreshold",
    "EnsemblePredictor",
    "ThreatModel",
    "RiskScorer",
    "ModelStore",
    "ModelSnapshot",
    "ThreatClassifier",
    "extract_features",
    "determine_severity",
    "assess_patient_safety",
    "generate_recommendations",
    "classify_threat"
]
