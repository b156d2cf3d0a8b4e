"""
Decision rules used as ensemble members.

A rule is a pure function from a FeatureVector to a ThreatLabel. Rules form a
tagged variant so that the ensemble can hold hand-written policies and learned
threshold splits side by side:

    FixedPolicy                                   the hospital decision list
    ConstantRule(label)                           terminal leaf
    LearnedThreshold(feature, cutoff, left, right) binary split

Every rule serializes to a plain dict carrying a ``kind`` tag, which is the
form stored in model snapshots.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from medsec.core.exceptions import SnapshotValidationError
from medsec.models.ml_models import FEATURE_ALIASES, FEATURE_NAMES, FeatureVector, ThreatLabel


class DecisionRule(ABC):
    kind: str = ""

    @abstractmethod
    def evaluate(self, features: FeatureVector) -> ThreatLabel:
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        pass


@dataclass(frozen=True)
class FixedPolicy(DecisionRule):
    """Priority-ordered hospital decision list; the first matching clause wins."""

    kind = "fixed_policy"

    def evaluate(self, features: FeatureVector) -> ThreatLabel:
        if features.is_medical_device and features.suspicious_strings > 2:
            return ThreatLabel.MEDICAL_DEVICE_ATTACK
        if features.is_patient_data and features.bytes_transferred > 100000:
            return ThreatLabel.DATA_BREACH
        if features.packets_per_second > 1000:
            return ThreatLabel.DDOS
        if features.payload_entropy > 7.5:
            return ThreatLabel.MALWARE
        if features.suspicious_strings > 5:
            return ThreatLabel.INTRUSION
        return ThreatLabel.BENIGN

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class ConstantRule(DecisionRule):
    label: ThreatLabel

    kind = "constant"

    def evaluate(self, features: FeatureVector) -> ThreatLabel:
        return self.label

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "label": self.label.value}


@dataclass(frozen=True)
class LearnedThreshold(DecisionRule):
    """Split on one feature: ``left`` when the value is at or below ``cutoff``."""

    feature: str
    cutoff: float
    left: DecisionRule
    right: DecisionRule

    kind = "learned_threshold"

    def __post_init__(self):
        if self.feature not in FEATURE_NAMES:
            raise ValueError(f"Unknown feature for threshold rule: {self.feature}")

    def evaluate(self, features: FeatureVector) -> ThreatLabel:
        value = float(getattr(features, self.feature))
        branch = self.left if value <= self.cutoff else self.right
        return branch.evaluate(features)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "feature": self.feature,
            "cutoff": self.cutoff,
            "left": self.left.to_dict(),
            "right": self.right.to_dict()
        }


_FEATURE_BY_ALIAS = {alias: name for name, alias in FEATURE_ALIASES.items()}


def rule_from_dict(data: Mapping[str, Any]) -> DecisionRule:
    if not isinstance(data, Mapping):
        raise SnapshotValidationError(f"Rule must be an object, got {type(data).__name__}")

    kind = data.get("kind")

    if kind == FixedPolicy.kind:
        return FixedPolicy()

    if kind == ConstantRule.kind:
        try:
            return ConstantRule(ThreatLabel(data.get("label")))
        except ValueError as e:
            raise SnapshotValidationError(f"Invalid constant rule label: {data.get('label')!r}") from e

    if kind == LearnedThreshold.kind:
        feature = data.get("feature")
        feature = _FEATURE_BY_ALIAS.get(feature, feature)
        cutoff = data.get("cutoff")
        if isinstance(cutoff, bool) or not isinstance(cutoff, (int, float)):
            raise SnapshotValidationError(f"Invalid threshold cutoff: {cutoff!r}")
        if feature not in FEATURE_NAMES:
            raise SnapshotValidationError(f"Unknown feature for threshold rule: {feature!r}")
        return LearnedThreshold(
            feature=feature,
            cutoff=float(cutoff),
            left=rule_from_dict(data.get("left")),
            right=rule_from_dict(data.get("right"))
        )

    raise SnapshotValidationError(f"Unknown rule kind: {kind!r}")
