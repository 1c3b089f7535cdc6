"""Pytest configuration and fixtures."""

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

from recruiter_ai.intake.document import load_document
from recruiter_ai.llm.base import LLMProvider
from recruiter_ai.models.analysis import AnalysisResult
from recruiter_ai.models.document import PDF_MIME_TYPE, ResumeDocument
from recruiter_ai.models.job_description import JobDescriptionInput
from recruiter_ai.processors.analyzer import FitAnalyzer

SAMPLE_JOB_TEXT = "Senior backend engineer, 5 years Go, Kubernetes"


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """A minimal PDF padded to roughly 10 KB."""
    header = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n"
    trailer = b"\ntrailer\n<< /Root 1 0 R >>\n%%EOF\n"
    padding = b"%" + b"x" * (10 * 1024 - len(header) - len(trailer) - 2) + b"\n"
    return header + padding + trailer


@pytest.fixture
def sample_document(sample_pdf_bytes: bytes) -> ResumeDocument:
    """A validated resume document."""
    return load_document("resume.pdf", sample_pdf_bytes, PDF_MIME_TYPE)


@pytest.fixture
def sample_job_description() -> JobDescriptionInput:
    """A pasted job description."""
    return JobDescriptionInput(mode="text", text=SAMPLE_JOB_TEXT)


@pytest.fixture
def sample_analysis_payload() -> dict[str, Any]:
    """Provider answer for the Kubernetes example scenario."""
    return {
        "matchScore": 72,
        "summary": "Strong backend alignment",
        "missingKeywords": ["Kubernetes"],
        "culturalFitAnalysis": "Good fit",
        "improvements": [
            {
                "section": "Skills",
                "originalConcept": "lists Go",
                "improvedRewrite": "Led migration of 12 microservices to Go, reducing latency 30%",
                "whyItWorks": "adds quantifiable impact",
            }
        ],
    }


@pytest.fixture
def sample_analysis_json(sample_analysis_payload: dict[str, Any]) -> str:
    """The example scenario answer as the provider's raw text."""
    return json.dumps(sample_analysis_payload)


@pytest.fixture
def sample_result(sample_analysis_payload: dict[str, Any]) -> AnalysisResult:
    """A validated analysis result."""
    return AnalysisResult.model_validate(sample_analysis_payload)


def _make_provider(content: Any = "", error: Exception | None = None) -> MagicMock:
    model = MagicMock()
    if error is not None:
        model.invoke.side_effect = error
        model.ainvoke = AsyncMock(side_effect=error)
    else:
        model.invoke.return_value = AIMessage(content=content)
        model.ainvoke = AsyncMock(return_value=AIMessage(content=content))

    provider = MagicMock(spec=LLMProvider)
    provider.get_json_model.return_value = model
    return provider


@pytest.fixture
def make_provider():
    """Factory for mock LLM providers whose JSON model answers with ``content`` or raises ``error``."""
    return _make_provider


@pytest.fixture
def mock_provider(sample_analysis_json: str) -> MagicMock:
    """Provider answering with the example scenario JSON."""
    return _make_provider(sample_analysis_json)


@pytest.fixture
def analyzer(mock_provider: MagicMock) -> FitAnalyzer:
    """Analyzer backed by the mock provider."""
    return FitAnalyzer(mock_provider, timeout=5.0)
