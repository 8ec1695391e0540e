"""
Pipeline self-checks.

Quick sanity checks of conditioning, spectral analysis and (when a
classifier is injected) inference on a given buffer. Each check
returns a report with a `passed` flag rather than raising on a failed
criterion; core errors still propagate.
"""

import time
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from neuroscope.core.logging import get_logger
from neuroscope.ml.classifier import Classifier, Prediction, validate_prediction
from neuroscope.signal_processing import SampleBuffer, analyze, condition, extract

logger = get_logger(__name__)

# Inference slower than this fails the check
MAX_INFERENCE_SECONDS = 5.0


@dataclass(frozen=True)
class SignalSummary:
    mean: float
    std: float
    range: float
    
    @classmethod
    def of(cls, data: NDArray[np.float64]) -> "SignalSummary":
        return cls(
            mean=float(np.mean(data)),
            std=float(np.std(data)),
            range=float(np.max(data) - np.min(data))
        )


@dataclass(frozen=True)
class ConditioningCheck:
    original: SignalSummary
    processed: SignalSummary
    passed: bool


@dataclass(frozen=True)
class SpectrogramCheck:
    n_frequencies: int
    n_times: int
    n_cells: int
    frequency_range: Tuple[float, float]
    passed: bool


@dataclass(frozen=True)
class InferenceCheck:
    prediction: Prediction
    response_time: float  # seconds
    passed: bool


@dataclass(frozen=True)
class SelfCheckReport:
    conditioning: ConditioningCheck
    spectrogram: SpectrogramCheck
    inference: Optional[InferenceCheck]
    
    @property
    def overall_passed(self) -> bool:
        checks = [self.conditioning, self.spectrogram, self.inference]
        return all(check.passed for check in checks if check is not None)


def check_conditioning(buffer: SampleBuffer) -> ConditioningCheck:
    """Conditioned output should be centered, bounded and non-flat."""
    processed = SignalSummary.of(condition(buffer.samples, buffer.sampling_rate))
    
    passed = (
        abs(processed.mean) < 0.1
        and processed.range <= 2.0
        and processed.std > 0
    )
    
    return ConditioningCheck(
        original=SignalSummary.of(buffer.samples),
        processed=processed,
        passed=passed
    )


def check_spectrogram(
    buffer: SampleBuffer,
    window_size: int = 256,
    overlap: float = 0.5
) -> SpectrogramCheck:
    """Spectrogram should be non-empty with frequencies in [0, Nyquist]."""
    spectrogram = analyze(buffer.samples, buffer.sampling_rate, window_size, overlap)
    n_frequencies, n_times = spectrogram.shape
    low = float(spectrogram.frequencies.min())
    high = float(spectrogram.frequencies.max())
    
    passed = (
        n_frequencies > 0
        and n_times > 0
        and low >= 0
        and high <= buffer.sampling_rate / 2
    )
    
    return SpectrogramCheck(
        n_frequencies=n_frequencies,
        n_times=n_times,
        n_cells=int(spectrogram.power.size),
        frequency_range=(low, high),
        passed=passed
    )


def check_inference(buffer: SampleBuffer, classifier: Classifier) -> InferenceCheck:
    """Classifier should answer with a valid prediction in time."""
    start = time.perf_counter()
    prediction = validate_prediction(
        classifier.predict(extract(buffer.samples, buffer.sampling_rate))
    )
    response_time = time.perf_counter() - start
    
    return InferenceCheck(
        prediction=prediction,
        response_time=response_time,
        passed=response_time < MAX_INFERENCE_SECONDS
    )


def run_self_checks(
    buffer: SampleBuffer,
    classifier: Optional[Classifier] = None
) -> SelfCheckReport:
    """Run every applicable check and log a summary."""
    report = SelfCheckReport(
        conditioning=check_conditioning(buffer),
        spectrogram=check_spectrogram(buffer),
        inference=check_inference(buffer, classifier) if classifier is not None else None
    )
    
    logger.info(
        "self_checks_complete",
        channel=buffer.channel_label,
        conditioning=report.conditioning.passed,
        spectrogram=report.spectrogram.passed,
        inference=report.inference.passed if report.inference is not None else None,
        overall=report.overall_passed
    )
    
    return report
