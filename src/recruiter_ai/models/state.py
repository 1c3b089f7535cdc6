"""Wizard state models.

The wizard moves through three phases. Each phase is its own model carrying
only the data valid in that phase, so a result can never be present while
collecting input and an analysis can never start without a document.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from recruiter_ai.models.analysis import AnalysisResult
from recruiter_ai.models.document import ResumeDocument
from recruiter_ai.models.job_description import JobDescriptionInput


class Phase(str, Enum):
    """Wizard phase."""

    INPUT = "input"
    ANALYZING = "analyzing"
    RESULTS = "results"


class InputState(BaseModel):
    """Collecting the resume and job description."""

    model_config = ConfigDict(frozen=True)

    phase: Literal[Phase.INPUT] = Phase.INPUT
    document: ResumeDocument | None = None
    job_description: JobDescriptionInput = Field(default_factory=JobDescriptionInput)
    error: str | None = None  # Submit or analysis failure
    document_error: str | None = None  # Shown next to the uploader


class AnalyzingState(BaseModel):
    """Waiting on the provider call."""

    model_config = ConfigDict(frozen=True)

    phase: Literal[Phase.ANALYZING] = Phase.ANALYZING
    document: ResumeDocument
    job_description: JobDescriptionInput


class ResultsState(BaseModel):
    """Showing a completed analysis."""

    model_config = ConfigDict(frozen=True)

    phase: Literal[Phase.RESULTS] = Phase.RESULTS
    document: ResumeDocument
    job_description: JobDescriptionInput
    result: AnalysisResult


WizardState = Annotated[
    Union[InputState, AnalyzingState, ResultsState],
    Field(discriminator="phase"),
]
