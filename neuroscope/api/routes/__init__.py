"""
API route modules.
"""

from neuroscope.api.routes import analysis, health

__all__ = ["analysis", "health"]
