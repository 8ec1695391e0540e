"""
Configuration management for the Neuroscope signal pipeline.
Loads settings from environment variables.
"""

from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    app_name: str = "neuroscope"
    app_version: str = "0.1.0"
    env: Literal["development", "staging", "production"] = "development"
    
    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_allow_origins: List[str] = ["*"]
    cors_allow_credentials: bool = False
    
    # Signal conditioning
    default_sampling_rate: float = 250.0  # Hz
    bandpass_low: float = 1.0  # Hz
    bandpass_high: float = 50.0  # Hz
    
    # Spectral analysis
    stft_window_size: int = 256  # samples
    stft_overlap: float = 0.5  # 50% overlap
    spectral_method: Literal["direct", "fft"] = "direct"
    
    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env == "development"
    
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.env == "production"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """
    Get settings instance.
    Useful for dependency injection in FastAPI.
    """
    return settings
