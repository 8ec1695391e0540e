"""
Pipeline orchestration and self-checks.
"""

from neuroscope.pipeline.analysis_pipeline import AnalysisPipeline, AnalysisResult
from neuroscope.pipeline.self_check import SelfCheckReport, run_self_checks

__all__ = [
    "AnalysisPipeline",
    "AnalysisResult",
    "SelfCheckReport",
    "run_self_checks",
]
