"""
Immutable sample buffer for single-channel biosignals.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from neuroscope.core.exceptions import EmptyInputError, ValidationError

SampleLike = Union[Sequence[float], NDArray[np.float64]]


def as_signal(samples: SampleLike) -> NDArray[np.float64]:
    """
    Coerce samples to a read-only 1-D float64 array.
    
    The input is always copied, so callers never share memory with
    the returned array.
    
    Raises:
        ValidationError: If samples are not one-dimensional or are
            not all finite
        EmptyInputError: If there are no samples
    """
    data = np.array(samples, dtype=np.float64)
    
    if data.ndim != 1:
        raise ValidationError(
            f"Samples must be one-dimensional, got shape {data.shape}"
        )
    if data.size == 0:
        raise EmptyInputError("Sample buffer is empty")
    if not np.all(np.isfinite(data)):
        raise ValidationError("Samples must be finite (no NaN or infinity)")

    data.setflags(write=False)
    return data


def validate_sampling_rate(sampling_rate: float) -> float:
    """Return the sampling rate as float, rejecting non-positive values."""
    try:
        rate = float(sampling_rate)
    except (TypeError, ValueError):
        raise ValidationError(f"Sampling rate must be a number, got {sampling_rate!r}")
    
    if not math.isfinite(rate) or rate <= 0:
        raise ValidationError(f"Sampling rate must be positive, got {sampling_rate}")
    
    return rate


@dataclass(frozen=True, eq=False)
class SampleBuffer:
    """
    Ordered amplitude readings at a fixed sampling rate.
    
    Processing steps never mutate a buffer; they derive a new one
    with `with_samples`.
    """
    
    samples: NDArray[np.float64]
    sampling_rate: float
    channel_label: Optional[str] = field(default=None)
    
    def __post_init__(self) -> None:
        object.__setattr__(self, "samples", as_signal(self.samples))
        object.__setattr__(self, "sampling_rate", validate_sampling_rate(self.sampling_rate))
    
    def __len__(self) -> int:
        return int(self.samples.size)
    
    @property
    def duration(self) -> float:
        """Buffer length in seconds."""
        return len(self) / self.sampling_rate
    
    def with_samples(self, samples: SampleLike) -> "SampleBuffer":
        """Derive a buffer with new samples, keeping rate and label."""
        return SampleBuffer(
            samples=samples,
            sampling_rate=self.sampling_rate,
            channel_label=self.channel_label
        )
