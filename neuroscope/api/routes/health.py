"""
Health check endpoints.
"""

from fastapi import APIRouter

from neuroscope.core.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    System health check endpoint.
    
    Returns service status and the active processing defaults.
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.env,
        "defaults": {
            "sampling_rate": settings.default_sampling_rate,
            "bandpass": [settings.bandpass_low, settings.bandpass_high],
            "stft_window_size": settings.stft_window_size,
            "stft_overlap": settings.stft_overlap,
            "spectral_method": settings.spectral_method
        }
    }
