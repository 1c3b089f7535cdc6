"""Data models for RecruiterAI."""

from recruiter_ai.models.analysis import ANALYSIS_RESPONSE_SCHEMA, AnalysisResult, Improvement
from recruiter_ai.models.document import PDF_MIME_TYPE, ResumeDocument
from recruiter_ai.models.job_description import JobDescriptionInput, JobDescriptionMode
from recruiter_ai.models.state import (
    AnalyzingState,
    InputState,
    Phase,
    ResultsState,
    WizardState,
)

__all__ = [
    "ANALYSIS_RESPONSE_SCHEMA",
    "AnalysisResult",
    "Improvement",
    "PDF_MIME_TYPE",
    "ResumeDocument",
    "JobDescriptionInput",
    "JobDescriptionMode",
    "AnalyzingState",
    "InputState",
    "Phase",
    "ResultsState",
    "WizardState",
]
