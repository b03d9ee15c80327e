"""Requirements analysis."""

from .optimizer import OptimizationResult, merge_analysis, optimize_analysis
from .requirements import analyze_requirements

__all__ = [
    "OptimizationResult",
    "analyze_requirements",
    "merge_analysis",
    "optimize_analysis",
]
