"""
Analysis pipeline.

Composes the signal processing core in a fixed order:
raw buffer → conditioning → spectrogram → band powers
raw buffer → feature vector → (optional) classifier

The spectrogram is computed from the conditioned samples while the
feature vector is computed from the raw samples.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from neuroscope.core.config import settings
from neuroscope.core.logging import get_logger
from neuroscope.ml.classifier import Classifier, Prediction, validate_prediction
from neuroscope.signal_processing import (
    BandPowers,
    FeatureVector,
    SampleBuffer,
    Spectrogram,
    aggregate,
    analyze,
    condition,
    extract,
)
from neuroscope.signal_processing.buffer import SampleLike
from neuroscope.signal_processing.spectral import SpectralMethod

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class AnalysisResult:
    """Everything derived from one raw buffer."""
    
    raw: SampleBuffer
    conditioned: SampleBuffer
    spectrogram: Spectrogram
    band_powers: BandPowers
    features: FeatureVector
    prediction: Optional[Prediction] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "channel_label": self.raw.channel_label,
            "sampling_rate": self.raw.sampling_rate,
            "n_samples": len(self.raw),
            "conditioned": self.conditioned.samples.tolist(),
            "spectrogram": self.spectrogram.to_dict(),
            "band_powers": self.band_powers.as_dict(),
            "features": self.features.to_list(),
            "prediction": None if self.prediction is None else {
                "label": self.prediction.label,
                "confidence": self.prediction.confidence,
                "model_version": self.prediction.model_version
            }
        }


class AnalysisPipeline:
    """
    Stateless orchestrator for the signal processing core.
    
    Parameters left as None are read from settings. A classifier handle
    may be injected; the pipeline never creates one itself.
    """
    
    def __init__(
        self,
        window_size: Optional[int] = None,
        overlap: Optional[float] = None,
        low_cutoff: Optional[float] = None,
        high_cutoff: Optional[float] = None,
        method: Optional[SpectralMethod] = None,
        classifier: Optional[Classifier] = None
    ):
        """
        Initialize analysis pipeline.
        
        Args:
            window_size: STFT window size in samples
            overlap: STFT window overlap fraction
            low_cutoff: Conditioning low cutoff in Hz
            high_cutoff: Conditioning high cutoff in Hz
            method: Spectral method ("direct" or "fft")
            classifier: Optional classifier receiving the feature vector
        """
        self.window_size = window_size if window_size is not None else settings.stft_window_size
        self.overlap = overlap if overlap is not None else settings.stft_overlap
        self.low_cutoff = low_cutoff if low_cutoff is not None else settings.bandpass_low
        self.high_cutoff = high_cutoff if high_cutoff is not None else settings.bandpass_high
        self.method = method if method is not None else settings.spectral_method
        self.classifier = classifier
        
        logger.info(
            "analysis_pipeline_initialized",
            window_size=self.window_size,
            overlap=self.overlap,
            bandpass=f"{self.low_cutoff}-{self.high_cutoff} Hz",
            method=self.method,
            classifier=type(classifier).__name__ if classifier is not None else None
        )
    
    def condition(self, buffer: SampleBuffer) -> SampleBuffer:
        """Conditioned copy of a buffer."""
        return buffer.with_samples(
            condition(
                buffer.samples,
                buffer.sampling_rate,
                self.low_cutoff,
                self.high_cutoff
            )
        )
    
    def spectrogram(self, buffer: SampleBuffer) -> Spectrogram:
        """Spectrogram of a buffer, as given (no conditioning)."""
        return analyze(
            buffer.samples,
            buffer.sampling_rate,
            window_size=self.window_size,
            overlap=self.overlap,
            method=self.method
        )
    
    def features(self, buffer: SampleBuffer) -> FeatureVector:
        """Feature vector of a buffer, as given (no conditioning)."""
        return extract(buffer.samples, buffer.sampling_rate)
    
    def classify(self, features: FeatureVector) -> Optional[Prediction]:
        """Hand features to the injected classifier, if any."""
        if self.classifier is None:
            return None
        return validate_prediction(self.classifier.predict(features))
    
    def run(self, buffer: SampleBuffer) -> AnalysisResult:
        """
        Run the full pipeline on one buffer.
        
        Args:
            buffer: Raw sample buffer
            
        Returns:
            AnalysisResult
            
        Raises:
            NeuroscopeError: Any core error, before partial results are returned
        """
        conditioned = self.condition(buffer)
        spectrogram = self.spectrogram(conditioned)
        band_powers = aggregate(spectrogram)
        
        features = self.features(buffer)
        prediction = self.classify(features)
        
        logger.info(
            "analysis_complete",
            channel=buffer.channel_label,
            n_samples=len(buffer),
            sampling_rate=buffer.sampling_rate,
            spectrogram_shape=spectrogram.shape,
            prediction=prediction.label if prediction is not None else None
        )
        
        return AnalysisResult(
            raw=buffer,
            conditioned=conditioned,
            spectrogram=spectrogram,
            band_powers=band_powers,
            features=features,
            prediction=prediction
        )
    
    def run_samples(
        self,
        samples: SampleLike,
        sampling_rate: float,
        channel_label: Optional[str] = None
    ) -> AnalysisResult:
        """Build a SampleBuffer and run the pipeline on it."""
        return self.run(
            SampleBuffer(
                samples=samples,
                sampling_rate=sampling_rate,
                channel_label=channel_label
            )
        )
