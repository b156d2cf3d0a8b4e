"""
Versioned model snapshot documents.

A snapshot carries the full model store state: the ensemble, the training
samples, the feature weights and the trained flag. Documents are validated
as a whole before anything is applied, so a rejected document never leaves a
store half-updated.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Mapping, Tuple, Union

from pydantic import ConfigDict, StrictBool, StrictInt, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from medsec.core.exceptions import SnapshotValidationError
from medsec.ml.decision_rules import rule_from_dict
from medsec.ml.ensemble import ThreatModel
from medsec.models.ml_models import DEFAULT_FEATURE_WEIGHTS, CamelModel, TrainingSample
from medsec.utils.helpers import utc_now

SNAPSHOT_VERSION = 1

SnapshotInput = Union[str, bytes, Mapping[str, Any], "ModelSnapshot"]

class ModelDocument(CamelModel):
    trees: List[Dict[str, Any]]
    tree_count: StrictInt
    max_depth: StrictInt
    min_leaf_samples: StrictInt

    @model_validator(mode="after")
    def consistent_tree_count(self):
        if self.tree_count < 1:
            raise ValueError(f"treeCount must be at least 1, got {self.tree_count}")
        if self.trees and len(self.trees) != self.tree_count:
            raise ValueError(
                f"treeCount is {self.tree_count} but the model holds {len(self.trees)} trees"
            )
        return self

    @classmethod
    def from_threat_model(cls, model: ThreatModel) -> "ModelDocument":
        return cls(
            trees=[tree.to_dict() for tree in model.trees],
            tree_count=model.tree_count,
            max_depth=model.max_depth,
            min_leaf_samples=model.min_leaf_samples
        )

    def to_threat_model(self) -> ThreatModel:
        return ThreatModel(
            trees=tuple(rule_from_dict(tree) for tree in self.trees),
            tree_count=self.tree_count,
            max_depth=self.max_depth,
            min_leaf_samples=self.min_leaf_samples
        )

class ModelSnapshot(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    version: StrictInt = SNAPSHOT_VERSION
    model: ModelDocument
    training_data: List[TrainingSample]
    feature_weights: Dict[str, float]
    is_model_trained: StrictBool
    exported_at: datetime

    @field_validator("version")
    @classmethod
    def supported_version(cls, v):
        if v != SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported snapshot version {v}, expected {SNAPSHOT_VERSION}")
        return v

    @field_validator("feature_weights")
    @classmethod
    def complete_feature_weights(cls, v):
        expected = set(DEFAULT_FEATURE_WEIGHTS)
        if set(v) != expected:
            missing = sorted(expected - set(v))
            unknown = sorted(set(v) - expected)
            raise ValueError(f"Feature weights mismatch (missing={missing}, unknown={unknown})")
        for name, weight in v.items():
            if not 0.0 <= weight <= 1.0:
                raise ValueError(f"Feature weight for {name} must be in [0, 1], got {weight}")
        return v

    @model_validator(mode="after")
    def trained_model_has_trees(self):
        if self.is_model_trained and not self.model.trees:
            raise ValueError("Snapshot marked as trained but contains no trees")
        return self

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

def build_snapshot(
    model: ThreatModel,
    training_data: List[TrainingSample],
    feature_weights: Mapping[str, float],
    is_model_trained: bool
) -> ModelSnapshot:
    return ModelSnapshot(
        version=SNAPSHOT_VERSION,
        model=ModelDocument.from_threat_model(model),
        training_data=list(training_data),
        feature_weights=dict(feature_weights),
        is_model_trained=is_model_trained,
        exported_at=utc_now()
    )

def parse_snapshot(data: SnapshotInput) -> Tuple[ModelSnapshot, ThreatModel]:
    """Validate a snapshot document and build its ensemble.

    Raises SnapshotValidationError for undecodable JSON, schema violations and
    malformed rules alike.
    """
    if isinstance(data, ModelSnapshot):
        snapshot = data
    else:
        if isinstance(data, (str, bytes, bytearray)):
            try:
                data = json.loads(data)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise SnapshotValidationError(f"Snapshot is not valid JSON: {e}") from e

        if not isinstance(data, Mapping):
            raise SnapshotValidationError(
                f"Snapshot must be a JSON object, got {type(data).__name__}"
            )

        try:
            snapshot = ModelSnapshot.model_validate(dict(data))
        except ValidationError as e:
            raise SnapshotValidationError(f"Invalid snapshot: {e}") from e

    model = snapshot.model.to_threat_model()
    return snapshot, model
