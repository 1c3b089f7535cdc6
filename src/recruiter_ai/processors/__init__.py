"""Resume analysis processors."""

from recruiter_ai.processors.analyzer import (
    FitAnalyzer,
    create_analyzer,
    parse_analysis_response,
)

__all__ = ["FitAnalyzer", "create_analyzer", "parse_analysis_response"]
