"""
Signal analysis API endpoints.

Thin HTTP wrappers over the signal processing core. Core errors
propagate to the application's NeuroscopeError handler.
"""

from typing import Dict, List, Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from neuroscope.core.config import settings
from neuroscope.core.logging import get_logger
from neuroscope.pipeline import AnalysisPipeline
from neuroscope.signal_processing import aggregate, analyze, condition, extract

logger = get_logger(__name__)

router = APIRouter()

# Largest STFT window accepted over HTTP
MAX_WINDOW_SIZE = 8192


# Request/Response models
class SignalRequest(BaseModel):
    """Single-channel signal."""
    samples: List[float] = Field(..., description="Amplitude samples")
    sampling_rate: float = Field(
        default_factory=lambda: settings.default_sampling_rate,
        description="Sampling rate in Hz"
    )
    channel_label: Optional[str] = Field(None, description="Channel name")
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "samples": [0.12, 0.31, -0.05, -0.27],
                "sampling_rate": 250,
                "channel_label": "Fz"
            }
        }
    )


class ConditionRequest(SignalRequest):
    """Signal plus conditioning cutoffs."""
    low_cutoff: float = Field(
        default_factory=lambda: settings.bandpass_low,
        description="Low cutoff in Hz"
    )
    high_cutoff: float = Field(
        default_factory=lambda: settings.bandpass_high,
        description="High cutoff in Hz"
    )


class STFTRequest(SignalRequest):
    """Signal plus STFT parameters."""
    window_size: int = Field(
        default_factory=lambda: settings.stft_window_size,
        le=MAX_WINDOW_SIZE,
        description="Samples per window"
    )
    overlap: float = Field(
        default_factory=lambda: settings.stft_overlap,
        description="Window overlap fraction"
    )
    method: Literal["direct", "fft"] = Field(
        default_factory=lambda: settings.spectral_method,
        description="Spectral method"
    )


class SpectrogramRequest(STFTRequest):
    """STFT request with optional conditioning."""
    condition_first: bool = Field(
        True,
        description="Condition the signal before analysis"
    )


class AnalyzeRequest(STFTRequest, ConditionRequest):
    """Full pipeline request: the spectrogram branch is always conditioned."""


class ConditionResponse(BaseModel):
    channel_label: Optional[str]
    samples: List[float]


class SpectrogramResponse(BaseModel):
    frequencies: List[float]
    times: List[float]
    power: List[List[float]]


class BandPowersResponse(BaseModel):
    band_powers: Dict[str, float]


class FeaturesResponse(BaseModel):
    channel_label: Optional[str]
    features: List[float]


def _spectrogram(request: SpectrogramRequest):
    logger.info(
        "spectrogram_requested",
        channel=request.channel_label,
        n_samples=len(request.samples),
        condition_first=request.condition_first,
        method=request.method
    )

    samples = request.samples
    if request.condition_first:
        samples = condition(samples, request.sampling_rate)
    return analyze(
        samples,
        request.sampling_rate,
        window_size=request.window_size,
        overlap=request.overlap,
        method=request.method
    )


@router.post("/condition", response_model=ConditionResponse)
def condition_signal(request: ConditionRequest):
    """
    Remove DC offset, smooth and normalize a signal.
    
    Returns:
        Conditioned samples
    """
    logger.info(
        "condition_requested",
        channel=request.channel_label,
        n_samples=len(request.samples),
        sampling_rate=request.sampling_rate
    )

    conditioned = condition(
        request.samples,
        request.sampling_rate,
        request.low_cutoff,
        request.high_cutoff
    )
    return {
        "channel_label": request.channel_label,
        "samples": conditioned.tolist()
    }


@router.post("/spectrogram", response_model=SpectrogramResponse)
def compute_spectrogram(request: SpectrogramRequest):
    """
    Compute the log-power spectrogram.
    
    Returns:
        Frequency axis, time axis and power[frequency][time]
    """
    return _spectrogram(request).to_dict()


@router.post("/bands", response_model=BandPowersResponse)
def compute_band_powers(request: SpectrogramRequest):
    """
    Compute delta/theta/alpha/beta/gamma band powers.
    
    Returns:
        Average log-power per band
    """
    return {"band_powers": aggregate(_spectrogram(request)).as_dict()}


@router.post("/features", response_model=FeaturesResponse)
def compute_features(request: SignalRequest):
    """
    Extract the 128-element feature vector from the raw signal.
    
    Returns:
        Feature vector
    """
    logger.info(
        "features_requested",
        channel=request.channel_label,
        n_samples=len(request.samples),
        sampling_rate=request.sampling_rate
    )

    features = extract(request.samples, request.sampling_rate)
    return {
        "channel_label": request.channel_label,
        "features": features.to_list()
    }


@router.post("/analyze")
def analyze_signal(request: AnalyzeRequest):
    """
    Run the full analysis pipeline.

    The spectrogram and band powers come from the conditioned signal,
    the features from the raw signal.

    Returns:
        Conditioned samples, spectrogram, band powers and features
    """
    logger.info(
        "analysis_requested",
        channel=request.channel_label,
        n_samples=len(request.samples),
        sampling_rate=request.sampling_rate
    )

    pipeline = AnalysisPipeline(
        window_size=request.window_size,
        overlap=request.overlap,
        low_cutoff=request.low_cutoff,
        high_cutoff=request.high_cutoff,
        method=request.method
    )
    result = pipeline.run_samples(
        request.samples,
        request.sampling_rate,
        request.channel_label
    )
    return result.to_dict()
