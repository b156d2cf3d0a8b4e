"""
Model Store
Holds the trained ensemble, feature weights and accumulated training samples
"""

import logging
import threading
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

from medsec.core.config import Settings, settings as default_settings
from medsec.core.exceptions import InsufficientTrainingDataError, SnapshotValidationError
from medsec.ml.ensemble import ThreatModel, build_ensemble
from medsec.ml.seed_data import default_training_samples
from medsec.ml.snapshot import ModelSnapshot, SnapshotInput, build_snapshot, parse_snapshot
from medsec.models.ml_models import (
    DEFAULT_FEATURE_WEIGHTS,
    THREAT_THRESHOLDS,
    ClassificationResult,
    FeatureVector,
    ModelMetrics,
    PatientSafety,
    Severity,
    ThreatLabel,
    TrainingSample
)
from medsec.utils.logger import log_system_event

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class StoreState:
    """Everything a classification call needs, swapped in as one reference."""

    model: ThreatModel
    feature_weights: Mapping[str, float]
    is_model_trained: bool

class ModelStore:
    def __init__(
        self,
        training_data: Optional[Sequence[TrainingSample]] = None,
        feature_weights: Optional[Mapping[str, float]] = None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or default_settings
        self._write_lock = threading.Lock()
        self._samples_lock = threading.Lock()
        self._samples_added = 0

        if training_data is None:
            training_data = default_training_samples() if self.settings.seed_training_data else []
        self._training_data: List[TrainingSample] = list(training_data)

        weights = dict(feature_weights if feature_weights is not None else DEFAULT_FEATURE_WEIGHTS)
        if set(weights) != set(DEFAULT_FEATURE_WEIGHTS):
            raise ValueError("Feature weights must cover exactly the feature vector fields")

        self._state = StoreState(
            model=ThreatModel(
                trees=(),
                tree_count=self.settings.tree_count,
                max_depth=self.settings.max_depth,
                min_leaf_samples=self.settings.min_leaf_samples
            ),
            feature_weights=MappingProxyType(weights),
            is_model_trained=False
        )

        if len(self._training_data) >= self.settings.min_training_samples:
            self.train_or_retrain()

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def is_model_trained(self) -> bool:
        return self._state.is_model_trained

    @property
    def training_data(self) -> List[TrainingSample]:
        with self._samples_lock:
            return list(self._training_data)

    @property
    def feature_weights(self) -> Dict[str, float]:
        return dict(self._state.feature_weights)

    def retrain(self) -> ThreatModel:
        """Rebuild the ensemble from the accumulated samples.

        Rule generation is pure, so retraining on the same samples always
        yields the same ensemble. Raises InsufficientTrainingDataError without
        touching the current model when too few samples are available.
        """
        with self._write_lock:
            samples = self.training_data
            required = self.settings.min_training_samples
            if len(samples) < required:
                raise InsufficientTrainingDataError(len(samples), required)

            current = self._state
            model = build_ensemble(
                samples,
                tree_count=current.model.tree_count,
                max_depth=current.model.max_depth,
                min_leaf_samples=current.model.min_leaf_samples
            )
            self._state = replace(current, model=model, is_model_trained=True)

        log_system_event(
            logger,
            "model_trained",
            f"Threat model trained with {len(samples)} samples and {model.tree_count} trees",
            extra_data={"training_samples": len(samples), "num_trees": model.tree_count}
        )
        return model

    def train_or_retrain(self) -> bool:
        try:
            self.retrain()
            return True
        except InsufficientTrainingDataError as e:
            logger.warning(f"{e}; keeping current model")
            return False

    def add_training_sample(self, sample: TrainingSample) -> bool:
        """Append a sample; every ``retrain_interval``-th append triggers a retrain.

        Returns True only when this call retrained the model.
        """
        with self._samples_lock:
            self._training_data.append(sample)
            self._samples_added += 1
            retrain_due = self._samples_added % self.settings.retrain_interval == 0

        if retrain_due:
            return self.train_or_retrain()
        return False

    def add_training_data(self, features: FeatureVector, label: ThreatLabel, confidence: float) -> bool:
        return self.add_training_sample(
            TrainingSample(features=features, label=label, confidence=confidence)
        )

    def export_snapshot(self) -> ModelSnapshot:
        with self._samples_lock:
            state = self._state
            samples = list(self._training_data)

        return build_snapshot(
            model=state.model,
            training_data=samples,
            feature_weights=state.feature_weights,
            is_model_trained=state.is_model_trained
        )

    def export_json(self) -> str:
        return self.export_snapshot().to_json()

    def import_snapshot(self, data: SnapshotInput) -> bool:
        try:
            snapshot, model = parse_snapshot(data)
        except SnapshotValidationError as e:
            logger.error(f"Failed to import model snapshot: {e}")
            return False

        new_state = StoreState(
            model=model,
            feature_weights=MappingProxyType(dict(snapshot.feature_weights)),
            is_model_trained=snapshot.is_model_trained
        )

        with self._write_lock:
            with self._samples_lock:
                self._training_data = list(snapshot.training_data)
                self._state = new_state

        log_system_event(
            logger,
            "model_imported",
            "Threat model snapshot imported",
            extra_data={
                "exported_at": snapshot.exported_at.isoformat(),
                "training_samples": len(snapshot.training_data),
                "is_model_trained": snapshot.is_model_trained
            }
        )
        return True

    def get_model_metrics(self) -> ModelMetrics:
        with self._samples_lock:
            state = self._state
            training_data_size = len(self._training_data)

        return ModelMetrics(
            is_model_trained=state.is_model_trained,
            training_data_size=training_data_size,
            num_trees=state.model.tree_count,
            feature_weights=dict(state.feature_weights),
            threat_thresholds=dict(THREAT_THRESHOLDS)
        )

    def get_feature_importance(self) -> Dict[str, float]:
        weights = self._state.feature_weights
        return {k: v for k, v in sorted(weights.items(), key=lambda x: x[1], reverse=True)}

    def fallback_classify(self, features: FeatureVector) -> ClassificationResult:
        if features.is_medical_device and features.suspicious_strings > 0:
            return ClassificationResult(
                threat_type=ThreatLabel.MEDICAL_DEVICE_ATTACK,
                confidence=0.7,
                severity=Severity.CRITICAL,
                risk_score=85,
                hipaa_impact=True,
                patient_safety=PatientSafety.CRITICAL,
                recommendations=["Isolate medical device immediately", "Notify clinical staff"],
                fallback=True
            )

        if features.is_patient_data:
            return ClassificationResult(
                threat_type=ThreatLabel.DATA_BREACH,
                confidence=0.6,
                severity=Severity.HIGH,
                risk_score=75,
                hipaa_impact=True,
                patient_safety=PatientSafety.CONCERN,
                recommendations=["Activate HIPAA breach protocol", "Secure patient data"],
                fallback=True
            )

        return ClassificationResult(
            threat_type=ThreatLabel.BENIGN,
            confidence=0.5,
            severity=Severity.LOW,
            risk_score=20,
            hipaa_impact=False,
            patient_safety=PatientSafety.SAFE,
            recommendations=["Continue monitoring"],
            fallback=True
        )
