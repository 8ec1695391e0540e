"""
Signal conditioning: DC-offset removal, smoothing and normalization.

The smoothing step is a centered moving average standing in for a
frequency-selective bandpass filter.
"""

import numpy as np
from numpy.typing import NDArray

from neuroscope.core.exceptions import DegenerateSignalError
from neuroscope.core.logging import get_logger
from neuroscope.signal_processing.buffer import (
    SampleLike,
    as_signal,
    validate_sampling_rate,
)

logger = get_logger(__name__)


def remove_dc_offset(samples: SampleLike) -> NDArray[np.float64]:
    """
    Subtract the arithmetic mean from every sample.
    
    Raises:
        EmptyInputError: If the buffer is empty
    """
    data = as_signal(samples)
    return data - data.mean()


def smoothing_window(sampling_rate: float) -> int:
    """Moving-average width in samples (about 100 ms)."""
    return int(np.floor(validate_sampling_rate(sampling_rate) / 10))


def smooth(
    samples: SampleLike,
    sampling_rate: float,
    low_cutoff: float = 1.0,
    high_cutoff: float = 50.0
) -> NDArray[np.float64]:
    """
    Apply the centered moving-average filter.
    
    Output sample i is the mean of inputs in [i - w//2, i + w//2),
    clamped to the buffer bounds, so the window shrinks at the edges.
    
    Args:
        samples: Input samples
        sampling_rate: Sampling rate in Hz
        low_cutoff: Accepted for interface compatibility, currently inert
        high_cutoff: Accepted for interface compatibility, currently inert
        
    Returns:
        Smoothed samples, same length as the input
    """
    data = as_signal(samples)
    half = smoothing_window(sampling_rate) // 2
    
    # Sub-20 Hz rates give an empty half-window: pass through unchanged
    if half == 0:
        return data.copy()
    
    n = data.size
    idx = np.arange(n)
    starts = np.maximum(0, idx - half)
    ends = np.minimum(n, idx + half)
    
    cumulative = np.concatenate(([0.0], np.cumsum(data)))
    return (cumulative[ends] - cumulative[starts]) / (ends - starts)


def normalize(samples: SampleLike) -> NDArray[np.float64]:
    """
    Scale samples by their maximum absolute value.
    
    Raises:
        DegenerateSignalError: If every sample is zero
    """
    data = as_signal(samples)
    peak = np.max(np.abs(data))
    
    if peak == 0:
        raise DegenerateSignalError(
            "Cannot normalize a constant-zero signal (max absolute value is 0)"
        )
    
    return data / peak


def condition(
    samples: SampleLike,
    sampling_rate: float,
    low_cutoff: float = 1.0,
    high_cutoff: float = 50.0
) -> NDArray[np.float64]:
    """
    Run the conditioning steps in fixed order.
    
    DC-offset removal, then moving-average smoothing, then
    normalization to [-1, 1].
    
    Args:
        samples: Raw samples
        sampling_rate: Sampling rate in Hz
        low_cutoff: Low cutoff in Hz (inert, see `smooth`)
        high_cutoff: High cutoff in Hz (inert, see `smooth`)
        
    Returns:
        New array of conditioned samples
        
    Raises:
        EmptyInputError: If the buffer is empty
        DegenerateSignalError: If the smoothed signal is all zeros
        ValidationError: If the sampling rate is not positive
    """
    validate_sampling_rate(sampling_rate)
    
    centered = remove_dc_offset(samples)
    smoothed = smooth(centered, sampling_rate, low_cutoff, high_cutoff)
    conditioned = normalize(smoothed)
    conditioned.setflags(write=False)
    
    logger.debug(
        "signal_conditioned",
        n_samples=conditioned.size,
        sampling_rate=sampling_rate,
        smoothing_window=smoothing_window(sampling_rate),
        bandpass=f"{low_cutoff}-{high_cutoff} Hz"
    )
    
    return conditioned
