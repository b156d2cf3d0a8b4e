"""
Ensemble Predictor
Majority vote over the decision rules of a trained threat model
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

from medsec.ml.decision_rules import DecisionRule, FixedPolicy
from medsec.models.ml_models import CANONICAL_LABEL_ORDER, FeatureVector, ThreatLabel, TrainingSample

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ThreatModel:
    trees: Tuple[DecisionRule, ...] = field(default_factory=tuple)
    tree_count: int = 100
    max_depth: int = 10
    min_leaf_samples: int = 2

def build_rule(samples: Sequence[TrainingSample], max_depth: int, min_leaf_samples: int) -> DecisionRule:
    # Every member currently gets the hospital decision list. A learner that
    # fits LearnedThreshold splits on a bootstrap of ``samples`` can be dropped
    # in here without touching the predictor.
    return FixedPolicy()

def build_ensemble(
    samples: Sequence[TrainingSample],
    tree_count: int,
    max_depth: int,
    min_leaf_samples: int
) -> ThreatModel:
    if tree_count < 1:
        raise ValueError(f"An ensemble needs at least one tree, got tree_count={tree_count}")

    trees = tuple(
        build_rule(samples, max_depth, min_leaf_samples)
        for _ in range(tree_count)
    )

    return ThreatModel(
        trees=trees,
        tree_count=tree_count,
        max_depth=max_depth,
        min_leaf_samples=min_leaf_samples
    )

class EnsemblePredictor:
    def predict(self, features: FeatureVector, model: ThreatModel) -> Tuple[ThreatLabel, float]:
        if not model.trees:
            raise ValueError("Cannot predict with an empty ensemble")

        votes = Counter(tree.evaluate(features) for tree in model.trees)
        label = self._select_winner(votes)
        confidence = votes[label] / len(model.trees)

        logger.debug(f"Ensemble vote {dict(votes)} -> {label.value} ({confidence:.2f})")
        return label, confidence

    def vote_distribution(self, features: FeatureVector, model: ThreatModel) -> Dict[str, float]:
        if not model.trees:
            return {}

        votes = Counter(tree.evaluate(features) for tree in model.trees)
        return {
            label.value: votes[label] / len(model.trees)
            for label in CANONICAL_LABEL_ORDER
        }

    @staticmethod
    def _select_winner(votes: Counter) -> ThreatLabel:
        return max(
            votes,
            key=lambda label: (votes[label], -CANONICAL_LABEL_ORDER.index(label))
        )
