"""
Classifier collaborator interface.
"""

from neuroscope.ml.classifier import Classifier, Prediction, validate_prediction

__all__ = [
    'Classifier',
    'Prediction',
    'validate_prediction'
]
