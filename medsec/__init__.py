"""
MedSec Threat Engine
Hospital network threat classification service
"""

__version__ = "1.0.0"
__author__ = "MedSec Team"
__description__ = "Threat classification engine for hospital network security events"

from medsec.ml.threat_classifier import ThreatClassifier
from medsec.ml.model_store import ModelStore

__all__ = [
    "ThreatClassifier",
    "ModelStore",
    "__version__"
]
