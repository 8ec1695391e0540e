"""
Frequency-band summaries of a spectrogram.
"""

from dataclasses import asdict, dataclass, fields
from typing import Dict, Iterator, Tuple

import numpy as np

from neuroscope.core.logging import get_logger
from neuroscope.signal_processing.spectral import Spectrogram

logger = get_logger(__name__)

# Inclusive frequency ranges (Hz)
BAND_RANGES: Dict[str, Tuple[float, float]] = {
    'delta': (0.5, 4.0),
    'theta': (4.0, 8.0),
    'alpha': (8.0, 13.0),
    'beta': (13.0, 30.0),
    'gamma': (30.0, 100.0)
}


@dataclass(frozen=True)
class BandPowers:
    """Average log-power per named band."""
    
    delta: float
    theta: float
    alpha: float
    beta: float
    gamma: float
    
    def __getitem__(self, band: str) -> float:
        if band not in BAND_RANGES:
            raise KeyError(band)
        return getattr(self, band)
    
    def __iter__(self) -> Iterator[str]:
        return (f.name for f in fields(self))
    
    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def band_power(spectrogram: Spectrogram, low_freq: float, high_freq: float) -> float:
    """
    Mean power over all time windows of bins inside [low_freq, high_freq].
    
    Returns 0.0 when no frequency bin falls in the range, which happens
    for bands above Nyquist at low sampling rates.
    """
    mask = np.logical_and(
        spectrogram.frequencies >= low_freq,
        spectrogram.frequencies <= high_freq
    )
    if not mask.any():
        return 0.0
    
    return float(np.mean(spectrogram.power[mask]))


def aggregate(spectrogram: Spectrogram) -> BandPowers:
    """
    Reduce a spectrogram to delta/theta/alpha/beta/gamma band powers.
    
    Args:
        spectrogram: Output of `analyze`
        
    Returns:
        BandPowers recomputed from this spectrogram
    """
    powers = {
        name: band_power(spectrogram, low, high)
        for name, (low, high) in BAND_RANGES.items()
    }
    
    logger.debug("band_powers_aggregated", **powers)
    
    return BandPowers(**powers)
