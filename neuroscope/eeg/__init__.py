"""
Synthetic signal sources.
"""

from neuroscope.eeg.simulator import SyntheticSignalGenerator

__all__ = [
    "SyntheticSignalGenerator",
]
