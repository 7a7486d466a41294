"""Analysis pipeline wiring.

This package sits between the data sources (synthesized sinusoids or a CSV
column) and presentation by running pad, transform and spectrum mapping in
one call.
"""

from .pipeline import (
    AnalysisResult,
    analyze_components,
    analyze_samples,
    spectrum_limits,
    time_domain_limits,
)

__all__ = [
    "AnalysisResult",
    "analyze_components",
    "analyze_samples",
    "spectrum_limits",
    "time_domain_limits",
]
