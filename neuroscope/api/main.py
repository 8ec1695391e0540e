"""
Main FastAPI application for the Neuroscope signal pipeline.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from neuroscope.api.routes import analysis, health
from neuroscope.core.config import settings
from neuroscope.core.exceptions import NeuroscopeError
from neuroscope.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.
    Runs on startup and shutdown.
    """
    # Startup
    logger.info(
        "application_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        env=settings.env
    )
    
    yield
    
    # Shutdown
    logger.info("application_shutting_down")


# Create FastAPI application
app = FastAPI(
    title="Neuroscope API",
    description="Biosignal conditioning, spectral analysis and feature extraction",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(NeuroscopeError)
async def neuroscope_error_handler(request, exc: NeuroscopeError) -> JSONResponse:
    """Handle processing errors caused by malformed input."""
    logger.error(
        "neuroscope_error",
        error_code=exc.code,
        message=exc.message,
        path=request.url.path
    )
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": exc.code,
                "message": exc.message
            }
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors."""
    logger.exception(
        "unexpected_error",
        error_type=type(exc).__name__,
        path=request.url.path
    )
    
    if settings.is_development:
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": str(exc),
                    "type": type(exc).__name__
                }
            }
        )
    else:
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred"
                }
            }
        )


# Include routers
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(analysis.router, prefix="/api/v1/signal", tags=["signal"])


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "environment": settings.env,
        "docs": "/docs",
        "api": {
            "health": "/api/v1/health",
            "condition": "/api/v1/signal/condition",
            "spectrogram": "/api/v1/signal/spectrogram",
            "bands": "/api/v1/signal/bands",
            "features": "/api/v1/signal/features",
            "analyze": "/api/v1/signal/analyze"
        }
    }


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "neuroscope.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower()
    )
