"""
Fixed-length feature vector for classifier input.

Layout (128 values):
- 0-5: mean, standard deviation, variance, min, max, range
- 6-63: cosine projection at 58 frequencies spanning 0-50 Hz
- 64-127: mean of 64 equal-width time windows

Features are computed from the raw, unconditioned samples.
"""

from dataclasses import dataclass
from typing import List

import numpy as np
from numpy.typing import NDArray

from neuroscope.core.exceptions import InsufficientSamplesError, ValidationError
from neuroscope.core.logging import get_logger
from neuroscope.signal_processing.buffer import (
    SampleLike,
    as_signal,
    validate_sampling_rate,
)

logger = get_logger(__name__)

N_FEATURES = 128
N_STATISTICAL = 6
N_SPECTRAL = 58
N_TEMPORAL = 64

SPECTRAL_MAX_HZ = 50.0

# The cosine projection always assumes this rate, whatever the buffer's
# actual sampling rate. Changing it alters every spectral feature.
REFERENCE_RATE_HZ = 250.0


@dataclass(frozen=True, eq=False)
class FeatureVector:
    """Read-only 128-element feature vector."""
    
    values: NDArray[np.float64]
    
    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=np.float64)
        if values.shape != (N_FEATURES,):
            raise ValidationError(
                f"Feature vector must have shape ({N_FEATURES},), got {values.shape}"
            )
        values.setflags(write=False)
        object.__setattr__(self, "values", values)
    
    def __len__(self) -> int:
        return N_FEATURES
    
    def __getitem__(self, index):
        return self.values[index]
    
    @property
    def statistical(self) -> NDArray[np.float64]:
        return self.values[:N_STATISTICAL]
    
    @property
    def spectral(self) -> NDArray[np.float64]:
        return self.values[N_STATISTICAL:N_STATISTICAL + N_SPECTRAL]
    
    @property
    def temporal(self) -> NDArray[np.float64]:
        return self.values[N_STATISTICAL + N_SPECTRAL:]
    
    def to_list(self) -> List[float]:
        return self.values.tolist()
    
    def as_model_input(self) -> NDArray[np.float32]:
        """Single-row float32 batch of shape (1, 128)."""
        return self.values.astype(np.float32).reshape(1, N_FEATURES)


def spectral_frequencies() -> NDArray[np.float64]:
    """Frequencies (Hz) probed by the spectral features."""
    return np.arange(N_SPECTRAL) / N_SPECTRAL * SPECTRAL_MAX_HZ


def _statistical_features(data: NDArray[np.float64]) -> NDArray[np.float64]:
    mean = data.mean()
    variance = np.mean((data - mean) ** 2)
    minimum = data.min()
    maximum = data.max()
    
    return np.array([
        mean,
        np.sqrt(variance),
        variance,
        minimum,
        maximum,
        maximum - minimum
    ])


def _spectral_features(data: NDArray[np.float64]) -> NDArray[np.float64]:
    j = np.arange(data.size)
    phase = 2 * np.pi * spectral_frequencies()[:, np.newaxis] * j / REFERENCE_RATE_HZ
    return np.cos(phase) @ data / data.size


def _temporal_features(data: NDArray[np.float64]) -> NDArray[np.float64]:
    n = data.size
    width = n // N_TEMPORAL
    starts = np.floor(np.arange(N_TEMPORAL) / N_TEMPORAL * n).astype(int)
    ends = np.minimum(starts + width, n)
    
    return np.array([data[s:e].mean() for s, e in zip(starts, ends)])


def extract(samples: SampleLike, sampling_rate: float) -> FeatureVector:
    """
    Build the 128-element feature vector from raw samples.
    
    Args:
        samples: Raw (unconditioned) samples
        sampling_rate: Sampling rate in Hz; validated but not used by the
            spectral features, which assume REFERENCE_RATE_HZ
        
    Returns:
        FeatureVector
        
    Raises:
        EmptyInputError: If the buffer is empty
        InsufficientSamplesError: If there are fewer samples than time windows
    """
    data = as_signal(samples)
    validate_sampling_rate(sampling_rate)
    
    if data.size < N_TEMPORAL:
        raise InsufficientSamplesError(
            f"Need at least {N_TEMPORAL} samples for the time-window "
            f"features, got {data.size}"
        )
    
    values = np.concatenate((
        _statistical_features(data),
        _spectral_features(data),
        _temporal_features(data)
    ))
    
    logger.debug(
        "features_extracted",
        n_samples=data.size,
        sampling_rate=sampling_rate,
        n_features=values.size
    )
    
    return FeatureVector(values=values)
