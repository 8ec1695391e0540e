"""
Tests for configuration, exceptions and the sample buffer type.
"""

import dataclasses

import pytest
import numpy as np

from neuroscope.core.config import Settings, get_settings, settings
from neuroscope.core.exceptions import (
    DegenerateSignalError,
    EmptyInputError,
    InsufficientSamplesError,
    InvalidWindowError,
    ModelError,
    NeuroscopeError,
    ValidationError,
)
from neuroscope.core.logging import get_logger
from neuroscope.signal_processing import SampleBuffer


class TestSettings:
    """Test settings loading."""
    
    def test_defaults(self):
        """Test processing defaults."""
        config = Settings()
        
        assert config.stft_window_size == 256
        assert config.stft_overlap == 0.5
        assert config.bandpass_low == 1.0
        assert config.bandpass_high == 50.0
        assert config.spectral_method == "direct"
    
    def test_environment_override(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("STFT_WINDOW_SIZE", "128")
        monkeypatch.setenv("SPECTRAL_METHOD", "fft")
        
        config = Settings()
        
        assert config.stft_window_size == 128
        assert config.spectral_method == "fft"
    
    def test_environment_flags(self):
        """Test environment helpers."""
        assert Settings(env="production").is_production
        assert not Settings(env="production").is_development
    
    def test_no_debug_flag(self):
        """Test settings only carry options the service reads."""
        assert "debug" not in Settings.model_fields

    def test_get_settings(self):
        """Test accessor returns the shared instance."""
        assert get_settings() is settings


class TestExceptions:
    """Test error hierarchy."""
    
    @pytest.mark.parametrize("error_class,code", [
        (EmptyInputError, "EMPTY_INPUT"),
        (DegenerateSignalError, "DEGENERATE_SIGNAL"),
        (InvalidWindowError, "INVALID_WINDOW"),
        (InsufficientSamplesError, "INSUFFICIENT_SAMPLES"),
        (ValidationError, "VALIDATION_ERROR"),
        (ModelError, "MODEL_ERROR"),
    ])
    def test_codes(self, error_class, code):
        """Test each error carries its code and base class."""
        error = error_class("bad input")
        
        assert isinstance(error, NeuroscopeError)
        assert error.code == code
        assert error.message == "bad input"
        assert str(error) == "bad input"


class TestSampleBuffer:
    """Test the sample buffer value type."""
    
    def test_construction(self):
        """Test samples are stored as float64."""
        buffer = SampleBuffer([1, 2, 3], 250, "Fz")
        
        assert buffer.samples.dtype == np.float64
        assert len(buffer) == 3
        assert buffer.sampling_rate == 250.0
        assert buffer.channel_label == "Fz"
    
    def test_empty_rejected(self):
        """Test buffers must be non-empty."""
        with pytest.raises(EmptyInputError):
            SampleBuffer([], 250)
    
    @pytest.mark.parametrize("rate", [0, -1, float("nan"), float("inf"), "fast"])
    def test_bad_sampling_rate(self, rate):
        """Test sampling rate must be positive and finite."""
        with pytest.raises(ValidationError):
            SampleBuffer([1.0, 2.0], rate)
    
    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, bad):
        """Test NaN and infinite samples are rejected."""
        with pytest.raises(ValidationError):
            SampleBuffer([1.0, bad, 2.0], 250)

    def test_multichannel_rejected(self):
        """Test buffers are one-dimensional."""
        with pytest.raises(ValidationError):
            SampleBuffer(np.ones((10, 2)), 250)
    
    def test_immutable(self):
        """Test neither fields nor samples can change."""
        buffer = SampleBuffer([1.0, 2.0], 250)
        
        with pytest.raises(dataclasses.FrozenInstanceError):
            buffer.sampling_rate = 500
        with pytest.raises(ValueError):
            buffer.samples[0] = 9.0
    
    def test_copies_input(self):
        """Test the buffer does not alias the caller's array."""
        source = np.array([1.0, 2.0, 3.0])
        buffer = SampleBuffer(source, 250)
        source[0] = 100.0
        
        assert buffer.samples[0] == 1.0
    
    def test_with_samples(self):
        """Test derived buffers keep rate and label."""
        buffer = SampleBuffer([1.0, 2.0], 250, "O1")
        derived = buffer.with_samples([3.0, 4.0, 5.0])
        
        assert derived is not buffer
        assert len(derived) == 3
        assert derived.sampling_rate == 250
        assert derived.channel_label == "O1"
        assert buffer.samples.tolist() == [1.0, 2.0]
    
    def test_duration(self):
        """Test duration in seconds."""
        assert SampleBuffer(np.zeros(500), 250).duration == 2.0


class TestLogging:
    """Test logger factory."""
    
    def test_get_logger(self):
        """Test loggers accept structured events."""
        logger = get_logger("neuroscope.tests")
        logger.debug("test_event", value=1)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
