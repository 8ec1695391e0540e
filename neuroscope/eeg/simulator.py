"""
Synthetic single-channel EEG source for testing and demos.

Generates signals as sums of band-limited sinusoids with uniform noise:
- Generic mixture (alpha, beta and theta rhythms)
- Condition profiles with characteristic band balances
- Labelled datasets of several recordings per condition
"""

from typing import Dict, List, Literal, Optional

import numpy as np
from numpy.typing import NDArray

from neuroscope.core.exceptions import ValidationError
from neuroscope.core.logging import get_logger
from neuroscope.signal_processing.buffer import SampleBuffer

logger = get_logger(__name__)

Condition = Literal["healthy", "schizophrenia"]

# (amplitude, frequency Hz) rhythm components per profile
PROFILE_RHYTHMS: Dict[str, List[tuple]] = {
    'default': [(0.5, 10.0), (0.3, 20.0), (0.4, 6.0)],
    'healthy': [(0.6, 10.0), (0.2, 20.0), (0.1, 6.0)],
    'schizophrenia': [(0.3, 9.0), (0.4, 25.0), (0.5, 5.0), (0.3, 40.0)]
}

PROFILE_NOISE: Dict[str, float] = {
    'default': 0.1,
    'healthy': 0.05,
    'schizophrenia': 0.15
}

LABEL_PREFIX: Dict[str, str] = {
    'healthy': 'HC',
    'schizophrenia': 'SZ'
}

ARTIFACT_PROBABILITY = 0.02
ARTIFACT_AMPLITUDE = 0.5


class SyntheticSignalGenerator:
    """
    Generates synthetic EEG-like sample buffers.
    
    All randomness comes from one numpy RandomState, so a fixed seed
    reproduces the same buffers.
    """
    
    def __init__(
        self,
        sampling_rate: float = 250,
        seed: Optional[int] = None
    ) -> None:
        """
        Initialize signal generator.
        
        Args:
            sampling_rate: Sampling rate in Hz (default: 250)
            seed: Random seed for reproducibility
        """
        self.sampling_rate = sampling_rate
        self.rng = np.random.RandomState(seed)
        
        logger.info(
            "signal_generator_initialized",
            sampling_rate=sampling_rate,
            seeded=seed is not None
        )
    
    def generate(self, duration: float = 10, channel_label: str = "Fz") -> SampleBuffer:
        """
        Generate a generic alpha/beta/theta mixture.
        
        Args:
            duration: Duration in seconds
            channel_label: Channel name for the buffer
            
        Returns:
            SampleBuffer
        """
        return self._render('default', duration, channel_label)
    
    def generate_profile(
        self,
        condition: Condition = "healthy",
        duration: float = 10,
        channel_label: str = "Fz"
    ) -> SampleBuffer:
        """
        Generate a signal with a condition's band characteristics.
        
        Healthy: strong alpha, moderate beta, low theta, low noise.
        Schizophrenia: reduced alpha, raised beta, theta and gamma,
        higher noise and occasional artifacts.
        """
        if condition not in LABEL_PREFIX:
            raise ValidationError(f"Unknown condition: {condition}")
        return self._render(condition, duration, channel_label)
    
    def generate_test_dataset(self, per_condition: int = 5) -> Dict[str, List[SampleBuffer]]:
        """
        Generate labelled recordings for every condition.
        
        Returns:
            Mapping of condition to buffers labelled HC001, HC002, ...
        """
        dataset = {
            condition: [
                self.generate_profile(condition, 10, f"{prefix}{i + 1:03d}")
                for i in range(per_condition)
            ]
            for condition, prefix in LABEL_PREFIX.items()
        }
        
        logger.info(
            "test_dataset_generated",
            per_condition=per_condition,
            conditions=list(dataset)
        )
        return dataset
    
    def _render(self, profile: str, duration: float, channel_label: str) -> SampleBuffer:
        n_samples = int(duration * self.sampling_rate)
        t = np.arange(n_samples) / self.sampling_rate
        
        data = np.zeros(n_samples)
        for amplitude, freq in PROFILE_RHYTHMS[profile]:
            data += amplitude * np.sin(2 * np.pi * freq * t)
        
        data += PROFILE_NOISE[profile] * (self.rng.random_sample(n_samples) - 0.5)
        
        if profile == 'schizophrenia':
            data += self._artifacts(n_samples)
        
        return SampleBuffer(
            samples=data,
            sampling_rate=self.sampling_rate,
            channel_label=channel_label
        )
    
    def _artifacts(self, n_samples: int) -> NDArray[np.float64]:
        """Sparse uniform spikes on about 2% of samples."""
        hits = self.rng.random_sample(n_samples) < ARTIFACT_PROBABILITY
        spikes = ARTIFACT_AMPLITUDE * (self.rng.random_sample(n_samples) - 0.5)
        return np.where(hits, spikes, 0.0)
