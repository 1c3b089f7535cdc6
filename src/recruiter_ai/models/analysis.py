"""Fit analysis result models and the response schema requested from the provider."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

logger = logging.getLogger(__name__)

MIN_MATCH_SCORE = 0
MAX_MATCH_SCORE = 100


class Improvement(BaseModel):
    """A suggested rewrite of one part of the resume."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    section: str = Field(description="Resume section, e.g. Experience, Skills, Summary")
    original_concept: str = Field(alias="originalConcept")
    improved_rewrite: str = Field(alias="improvedRewrite")
    why_it_works: str = Field(alias="whyItWorks")


class AnalysisResult(BaseModel):
    """Structured fit analysis returned by the provider.

    Field aliases are the camelCase names used on the wire, so
    ``model_dump(by_alias=True)`` reproduces the provider's JSON.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    match_score: StrictInt = Field(alias="matchScore")
    summary: str
    missing_keywords: list[str] = Field(alias="missingKeywords")
    cultural_fit_analysis: str = Field(alias="culturalFitAnalysis")
    improvements: list[Improvement]

    @field_validator("match_score")
    @classmethod
    def clamp_match_score(cls, v: int) -> int:
        """Clamp scores outside 0-100 instead of rejecting the whole analysis."""
        if v < MIN_MATCH_SCORE or v > MAX_MATCH_SCORE:
            clamped = max(MIN_MATCH_SCORE, min(MAX_MATCH_SCORE, v))
            logger.warning(f"matchScore {v} out of range, clamped to {clamped}")
            return clamped
        return v


# Declared output schema sent with the request. Descriptions double as
# instructions to the model.
ANALYSIS_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "matchScore": {
            "type": "integer",
            "description": (
                "A score from 0 to 100 indicating how well the resume matches "
                "the job description."
            ),
        },
        "summary": {
            "type": "string",
            "description": (
                "A concise executive summary of the candidate's fit for this specific "
                "role, acting as a recruiter."
            ),
        },
        "missingKeywords": {
            "type": "array",
            "items": {"type": "string"},
            "description": (
                "List of critical keywords or skills found in the JD but missing or "
                "weak in the resume."
            ),
        },
        "culturalFitAnalysis": {
            "type": "string",
            "description": (
                "Analysis of how well the candidate's tone and experience align with "
                "the company culture implied in the JD."
            ),
        },
        "improvements": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "section": {
                        "type": "string",
                        "description": "The section of the resume (e.g., Experience, Skills, Summary).",
                    },
                    "originalConcept": {
                        "type": "string",
                        "description": "A brief description of the current content or a specific weak phrase.",
                    },
                    "improvedRewrite": {
                        "type": "string",
                        "description": "A rewritten, impactful version using action verbs and metrics.",
                    },
                    "whyItWorks": {
                        "type": "string",
                        "description": "Explanation of why this change improves the candidate's chances.",
                    },
                },
                "required": ["section", "originalConcept", "improvedRewrite", "whyItWorks"],
            },
            "description": "A list of specific, actionable suggestions to tailor the resume.",
        },
    },
    "required": ["matchScore", "summary", "missingKeywords", "improvements", "culturalFitAnalysis"],
}
