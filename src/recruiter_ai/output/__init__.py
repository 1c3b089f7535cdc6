"""Report formatting, error diagnostics and export."""

from recruiter_ai.output.error_details import ErrorDetails, describe_error
from recruiter_ai.output.report import (
    ScoreBand,
    format_analysis_report,
    save_markdown,
    score_band,
)

__all__ = [
    "ErrorDetails",
    "ScoreBand",
    "describe_error",
    "format_analysis_report",
    "save_markdown",
    "score_band",
]
