"""
Short-time spectral analysis.

Computes a log-power spectrogram over Hann-windowed, overlapping frames.
The reference path evaluates the discrete Fourier transform by direct
summation; the fft path is a drop-in that agrees within floating-point
tolerance.
"""

from dataclasses import dataclass
from typing import Dict, List, Literal, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import NDArray
from scipy import fft as sp_fft
from scipy import signal

from neuroscope.core.exceptions import (
    InsufficientSamplesError,
    InvalidWindowError,
    ValidationError,
)
from neuroscope.core.logging import get_logger
from neuroscope.signal_processing.buffer import (
    SampleLike,
    as_signal,
    validate_sampling_rate,
)

logger = get_logger(__name__)

SpectralMethod = Literal["direct", "fft"]

# Added to the squared magnitude so silent bins stay finite
POWER_FLOOR = 1e-10

# Frequency bins evaluated per direct-summation block
DIRECT_BLOCK_BINS = 64


@dataclass(frozen=True, eq=False)
class Spectrogram:
    """
    Log-power over (frequency, time) bins.
    
    `power[i][j]` is the power at `frequencies[i]` for the window
    starting at `times[j]`.
    """
    
    frequencies: NDArray[np.float64]
    times: NDArray[np.float64]
    power: NDArray[np.float64]
    
    @property
    def shape(self) -> Tuple[int, int]:
        """(frequency bins, time windows)"""
        return (int(self.frequencies.size), int(self.times.size))
    
    def to_dict(self) -> Dict[str, List]:
        return {
            "frequencies": self.frequencies.tolist(),
            "times": self.times.tolist(),
            "power": self.power.tolist(),
        }


def hop_size(window_size: int, overlap: float) -> int:
    """
    Samples between consecutive window starts.
    
    Raises:
        InvalidWindowError: If the window is shorter than 2 samples or
            the hop is below 1 sample
    """
    if int(window_size) != window_size or window_size < 2:
        raise InvalidWindowError(
            f"Window size must be an integer of at least 2, got {window_size}"
        )
    
    hop = int(np.floor(window_size * (1 - overlap)))
    if hop < 1:
        raise InvalidWindowError(
            f"Hop size must be at least 1 sample, got {hop} "
            f"(window_size={window_size}, overlap={overlap})"
        )
    return hop


def hann_window(window_size: int) -> NDArray[np.float64]:
    """Symmetric Hann taper: 0.5 - 0.5*cos(2*pi*i/(N-1))."""
    return signal.windows.hann(window_size, sym=True)


def _frame(data: NDArray[np.float64], window_size: int, hop: int) -> NDArray[np.float64]:
    """Stack windows as rows of shape (n_windows, window_size)."""
    n_windows = (data.size - window_size) // hop + 1
    return sliding_window_view(data, window_size)[::hop][:n_windows]


def _direct_power(frames: NDArray[np.float64], n_bins: int) -> NDArray[np.float64]:
    """Squared DFT magnitudes by direct summation, shape (n_bins, n_windows)."""
    window_size = frames.shape[1]
    n = np.arange(window_size)[np.newaxis, :]
    power = np.empty((n_bins, frames.shape[0]))

    # Basis matrices are built per block of bins to bound memory
    for first in range(0, n_bins, DIRECT_BLOCK_BINS):
        k = np.arange(first, min(first + DIRECT_BLOCK_BINS, n_bins))[:, np.newaxis]
        angle = -2 * np.pi * k * n / window_size

        real = np.cos(angle) @ frames.T
        imag = np.sin(angle) @ frames.T
        power[first:first + k.shape[0]] = real * real + imag * imag

    return power


def _fft_power(frames: NDArray[np.float64], n_bins: int) -> NDArray[np.float64]:
    """Squared DFT magnitudes via real FFT, shape (n_bins, n_windows)."""
    coefficients = sp_fft.rfft(frames, axis=1)[:, :n_bins]
    return (coefficients.real ** 2 + coefficients.imag ** 2).T


def analyze(
    samples: SampleLike,
    sampling_rate: float,
    window_size: int = 256,
    overlap: float = 0.5,
    method: SpectralMethod = "direct"
) -> Spectrogram:
    """
    Compute the short-time log-power spectrogram.
    
    Args:
        samples: Input samples
        sampling_rate: Sampling rate in Hz
        window_size: Samples per analysis window
        overlap: Fraction of each window shared with the next
        method: "direct" summation or "fft"
        
    Returns:
        Spectrogram with window_size//2 + 1 frequency bins
        
    Raises:
        EmptyInputError: If the buffer is empty
        InvalidWindowError: If the window or hop size is unusable
        InsufficientSamplesError: If the buffer is shorter than one window
    """
    data = as_signal(samples)
    rate = validate_sampling_rate(sampling_rate)
    hop = hop_size(window_size, overlap)
    window_size = int(window_size)
    
    if data.size < window_size:
        raise InsufficientSamplesError(
            f"Need at least {window_size} samples for one window, got {data.size}"
        )
    
    n_bins = window_size // 2 + 1
    frames = _frame(data, window_size, hop) * hann_window(window_size)
    n_windows = frames.shape[0]
    
    if method == "direct":
        magnitude = _direct_power(frames, n_bins)
    elif method == "fft":
        magnitude = _fft_power(frames, n_bins)
    else:
        raise ValidationError(f"Unknown spectral method: {method}")
    
    frequencies = np.arange(n_bins) * rate / window_size
    times = np.arange(n_windows) * hop / rate
    power = np.log10(magnitude + POWER_FLOOR)
    
    for array in (frequencies, times, power):
        array.setflags(write=False)
    
    logger.debug(
        "spectrogram_computed",
        method=method,
        n_samples=data.size,
        window_size=window_size,
        hop_size=hop,
        freq_bins=n_bins,
        n_windows=n_windows
    )
    
    return Spectrogram(frequencies=frequencies, times=times, power=power)
