"""Tests for the exception hierarchy and user-facing messages."""

import pytest

from recruiter_ai.exceptions import (
    AnalysisError,
    AnalysisTimeoutError,
    DocumentNotFoundError,
    DocumentTooLargeError,
    DocumentValidationError,
    EmptyDocumentError,
    EmptyResponseError,
    InvalidTransitionError,
    ProviderError,
    RecruiterAIError,
    ResponseParseError,
    UnsupportedDocumentTypeError,
)


class TestHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "error",
        [
            UnsupportedDocumentTypeError("image/png"),
            DocumentTooLargeError(10, 5),
            EmptyDocumentError(),
            DocumentNotFoundError("cv.pdf"),
        ],
    )
    def test_document_errors(self, error: Exception) -> None:
        """Test that intake errors are validation errors."""
        assert isinstance(error, DocumentValidationError)
        assert isinstance(error, RecruiterAIError)
        assert not isinstance(error, AnalysisError)

    @pytest.mark.parametrize(
        "error",
        [
            ProviderError("boom"),
            AnalysisTimeoutError(30),
            EmptyResponseError(),
            ResponseParseError("bad"),
        ],
    )
    def test_analysis_errors(self, error: Exception) -> None:
        """Test that call and parse errors are analysis errors."""
        assert isinstance(error, AnalysisError)
        assert isinstance(error, RecruiterAIError)

    def test_transition_error(self) -> None:
        """Test that transition errors are neither validation nor analysis errors."""
        error = InvalidTransitionError("reset", "analyzing")
        assert isinstance(error, RecruiterAIError)
        assert not isinstance(error, (DocumentValidationError, AnalysisError))


class TestMessages:
    """Tests for user-facing messages."""

    def test_size_message_uses_megabytes(self) -> None:
        """Test that the limit is shown in MB."""
        assert str(DocumentTooLargeError(6_000_000, 5 * 1024 * 1024)) == (
            "File size exceeds 5MB limit."
        )

    def test_empty_response_message(self) -> None:
        """Test the no-response message."""
        assert str(EmptyResponseError()) == "No response from AI"

    def test_timeout_message(self) -> None:
        """Test the timeout message with and without a bound."""
        assert str(AnalysisTimeoutError(120.0)) == "Analysis request timed out after 120s."
        assert str(AnalysisTimeoutError(None)) == "Analysis request timed out."

    def test_parse_error_keeps_raw_text(self) -> None:
        """Test that the raw provider text is kept for debugging."""
        error = ResponseParseError("invalid JSON", raw_text="{oops")
        assert str(error) == "Failed to parse analysis response: invalid JSON"
        assert error.raw_text == "{oops"

    def test_transition_message(self) -> None:
        """Test the transition error message."""
        error = InvalidTransitionError("start an analysis", "results")
        assert str(error) == "Cannot start an analysis while in the results phase"
        assert error.operation == "start an analysis"
        assert error.phase == "results"
