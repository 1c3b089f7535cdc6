"""Input -> analyzing -> results wizard."""

from recruiter_ai.wizard.machine import (
    GENERIC_ANALYSIS_ERROR,
    MISSING_JOB_DESCRIPTION_ERROR,
    MISSING_RESUME_ERROR,
    Wizard,
)

__all__ = [
    "GENERIC_ANALYSIS_ERROR",
    "MISSING_JOB_DESCRIPTION_ERROR",
    "MISSING_RESUME_ERROR",
    "Wizard",
]
