"""
Signal processing core: conditioning, spectral analysis, band powers
and feature extraction.
"""

from neuroscope.signal_processing.bands import BAND_RANGES, BandPowers, aggregate
from neuroscope.signal_processing.buffer import SampleBuffer
from neuroscope.signal_processing.conditioning import condition
from neuroscope.signal_processing.feature_extraction import FeatureVector, extract
from neuroscope.signal_processing.spectral import Spectrogram, analyze

__all__ = [
    "BAND_RANGES",
    "BandPowers",
    "FeatureVector",
    "SampleBuffer",
    "Spectrogram",
    "aggregate",
    "analyze",
    "condition",
    "extract",
]
