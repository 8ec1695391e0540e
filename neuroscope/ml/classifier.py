"""
Classifier collaborator boundary.

The pipeline hands its feature vector to an injected classifier handle.
Concrete models (trained or heuristic) live outside this package and
only need to satisfy the `Classifier` protocol.
"""

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from neuroscope.core.exceptions import ModelError
from neuroscope.signal_processing.feature_extraction import FeatureVector


@dataclass(frozen=True)
class Prediction:
    """Classifier output for one feature vector."""
    
    label: str
    confidence: float
    model_version: str


@runtime_checkable
class Classifier(Protocol):
    """Anything that maps a FeatureVector to a Prediction."""
    
    def predict(self, features: FeatureVector) -> Prediction:
        ...


def validate_prediction(prediction: object) -> Prediction:
    """
    Check a collaborator's prediction before it is attached to a result.
    
    Raises:
        ModelError: If the prediction is not a Prediction or its
            confidence lies outside [0, 1]
    """
    if not isinstance(prediction, Prediction):
        raise ModelError(
            f"Classifier returned {type(prediction).__name__}, expected Prediction"
        )
    
    confidence = prediction.confidence
    if not math.isfinite(confidence) or not 0.0 <= confidence <= 1.0:
        raise ModelError(f"Prediction confidence must be in [0, 1], got {confidence}")
    
    return prediction
