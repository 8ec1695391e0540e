"""
Unit tests for frequency-band aggregation.
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from neuroscope.signal_processing.bands import BAND_RANGES, BandPowers, aggregate, band_power
from neuroscope.signal_processing.spectral import Spectrogram, analyze


def make_spectrogram(frequencies, power):
    """Build a spectrogram with unit-spaced time axis."""
    power = np.asarray(power, dtype=float)
    return Spectrogram(
        frequencies=np.asarray(frequencies, dtype=float),
        times=np.arange(power.shape[1], dtype=float),
        power=power
    )


class TestAggregate:
    """Test band power aggregation."""
    
    @pytest.fixture
    def alpha_sine(self):
        """10 Hz sine at 250 Hz, 10 seconds."""
        t = np.arange(2500) / 250
        return np.sin(2 * np.pi * 10 * t)
    
    def test_alpha_dominates_for_10hz(self, alpha_sine):
        """Test a 10 Hz sine has more alpha than delta or theta power."""
        band_powers = aggregate(analyze(alpha_sine, 250))
        
        assert band_powers.alpha > band_powers.delta
        assert band_powers.alpha > band_powers.theta
    
    def test_averages_rows_and_windows(self):
        """Test bins are averaged across every time window."""
        spectrogram = make_spectrogram(
            [0.0, 2.0, 3.0, 6.0, 10.0, 20.0, 40.0],
            [
                [99.0, 99.0],  # 0 Hz, below delta
                [1.0, 3.0],
                [5.0, 7.0],
                [-2.0, -4.0],
                [8.0, 8.0],
                [0.5, 1.5],
                [6.0, 2.0],
            ]
        )
        
        band_powers = aggregate(spectrogram)
        
        assert_allclose(band_powers.delta, 4.0)
        assert_allclose(band_powers.theta, -3.0)
        assert_allclose(band_powers.alpha, 8.0)
        assert_allclose(band_powers.beta, 1.0)
        assert_allclose(band_powers.gamma, 4.0)
    
    def test_boundaries_inclusive(self):
        """Test a bin on a shared edge counts toward both bands."""
        spectrogram = make_spectrogram([4.0, 8.0], [[1.0], [3.0]])
        
        band_powers = aggregate(spectrogram)
        
        assert band_powers.delta == 1.0
        assert band_powers.theta == 2.0
        assert band_powers.alpha == 3.0
    
    def test_empty_band_is_zero(self):
        """Test bands above Nyquist yield zero instead of failing."""
        t = np.arange(1000) / 50
        data = np.sin(2 * np.pi * 10 * t)
        
        spectrogram = analyze(data, 50, window_size=64)
        band_powers = aggregate(spectrogram)
        
        assert spectrogram.frequencies.max() == 25.0
        assert band_powers.gamma == 0.0
        assert band_powers.alpha != 0.0
    
    def test_recomputed_per_input(self, alpha_sine):
        """Test different inputs give different band powers."""
        t = np.arange(2500) / 250
        beta_sine = np.sin(2 * np.pi * 20 * t)
        
        alpha_powers = aggregate(analyze(alpha_sine, 250))
        beta_powers = aggregate(analyze(beta_sine, 250))
        
        assert alpha_powers != beta_powers
        assert beta_powers.beta > alpha_powers.beta
    
    def test_band_power_helper(self):
        """Test single-band power over an arbitrary range."""
        spectrogram = make_spectrogram([1.0, 2.0, 3.0], [[1.0], [2.0], [6.0]])
        
        assert band_power(spectrogram, 1.5, 3.0) == 4.0
        assert band_power(spectrogram, 10.0, 20.0) == 0.0


class TestBandPowers:
    """Test the BandPowers value type."""
    
    @pytest.fixture
    def band_powers(self):
        return BandPowers(delta=1.0, theta=2.0, alpha=3.0, beta=4.0, gamma=5.0)
    
    def test_item_access(self, band_powers):
        """Test lookup by band name."""
        assert band_powers['alpha'] == 3.0
        
        with pytest.raises(KeyError):
            band_powers['mu']
    
    def test_band_order(self, band_powers):
        """Test iteration follows the band table."""
        assert list(band_powers) == list(BAND_RANGES)
        assert list(band_powers.as_dict()) == list(BAND_RANGES)
    
    def test_immutable(self, band_powers):
        """Test band powers cannot be reassigned."""
        with pytest.raises(AttributeError):
            band_powers.alpha = 0.0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
