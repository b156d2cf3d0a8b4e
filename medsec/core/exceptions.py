"""
Threat engine error types.

These are raised inside the model store and snapshot layers. Public store
operations convert them into boolean results so that callers never see a
failure that leaves the engine in a partial state.
"""


class ThreatEngineError(Exception):
    """Base exception for all threat engine errors."""
    pass


class InsufficientTrainingDataError(ThreatEngineError):
    """Retraining was requested with fewer samples than the configured minimum."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Insufficient training data: {available} samples, {required} required"
        )


class SnapshotValidationError(ThreatEngineError):
    """A model snapshot document is malformed or uses an unsupported schema."""
    pass
