"""Tests for the three-step wizard."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from recruiter_ai.config import DEFAULT_MAX_DOCUMENT_BYTES
from recruiter_ai.exceptions import InvalidTransitionError, ProviderError
from recruiter_ai.models.analysis import AnalysisResult
from recruiter_ai.models.document import PDF_MIME_TYPE, ResumeDocument
from recruiter_ai.models.job_description import JobDescriptionInput
from recruiter_ai.models.state import AnalyzingState, InputState, Phase, ResultsState
from recruiter_ai.output.report import ScoreBand, score_band
from recruiter_ai.processors.analyzer import FitAnalyzer
from recruiter_ai.wizard.machine import (
    GENERIC_ANALYSIS_ERROR,
    MISSING_JOB_DESCRIPTION_ERROR,
    MISSING_RESUME_ERROR,
    Wizard,
)


@pytest.fixture
def ready_wizard(
    sample_document: ResumeDocument, sample_job_description: JobDescriptionInput
) -> Wizard:
    """Wizard with both inputs filled in."""
    wizard = Wizard()
    wizard.attach_document(sample_document)
    wizard.set_job_text(sample_job_description.text)
    return wizard


class TestDocumentSelection:
    """Tests for selecting the resume."""

    def test_select_pdf(self, sample_pdf_bytes: bytes) -> None:
        """Test that a valid PDF is stored with its file name."""
        wizard = Wizard()

        document = wizard.select_document("cv.pdf", sample_pdf_bytes, PDF_MIME_TYPE)

        assert document is not None
        assert wizard.state.document == document
        assert wizard.state.document.filename == "cv.pdf"
        assert wizard.state.document.data

    def test_wrong_type_stores_nothing(self) -> None:
        """Test that a non-PDF is rejected with a message and no payload."""
        wizard = Wizard()

        document = wizard.select_document("photo.png", b"\x89PNG....", "image/png")

        assert document is None
        assert wizard.state.document is None
        assert wizard.state.document_error == "Please upload a PDF file."

    def test_oversized_rejected(self) -> None:
        """Test that a file over 5 MiB is rejected."""
        wizard = Wizard()
        content = b"%PDF" + b"0" * DEFAULT_MAX_DOCUMENT_BYTES

        assert wizard.select_document("big.pdf", content, PDF_MIME_TYPE) is None
        assert wizard.state.document is None
        assert wizard.state.document_error == "File size exceeds 5MB limit."

    def test_second_selection_replaces_first(self, sample_pdf_bytes: bytes) -> None:
        """Test that only the latest selection is kept."""
        wizard = Wizard()
        wizard.select_document("old.pdf", sample_pdf_bytes, PDF_MIME_TYPE)
        wizard.select_document("new.pdf", sample_pdf_bytes + b"\n", PDF_MIME_TYPE)

        assert wizard.state.document.filename == "new.pdf"

    def test_rejected_selection_keeps_previous(self, sample_pdf_bytes: bytes) -> None:
        """Test that a rejected file does not discard the stored resume."""
        wizard = Wizard()
        wizard.select_document("cv.pdf", sample_pdf_bytes, PDF_MIME_TYPE)

        wizard.select_document("notes.txt", b"hello", "text/plain")

        assert wizard.state.document.filename == "cv.pdf"
        assert wizard.state.document_error == "Please upload a PDF file."

    def test_valid_selection_clears_errors(self, sample_pdf_bytes: bytes) -> None:
        """Test that a good file clears the upload and submit errors."""
        wizard = Wizard()
        wizard.begin_analysis()
        wizard.select_document("notes.txt", b"hello", "text/plain")

        wizard.select_document("cv.pdf", sample_pdf_bytes, PDF_MIME_TYPE)

        assert wizard.state.document_error is None
        assert wizard.state.error is None

    def test_custom_size_limit(self, sample_pdf_bytes: bytes) -> None:
        """Test that the wizard honours its configured ceiling."""
        wizard = Wizard(max_document_bytes=1024)
        assert wizard.select_document("cv.pdf", sample_pdf_bytes, PDF_MIME_TYPE) is None

    def test_clear_document(self, ready_wizard: Wizard) -> None:
        """Test that clearing removes the resume."""
        ready_wizard.clear_document()
        assert ready_wizard.state.document is None
        assert not ready_wizard.can_submit


class TestJobDescription:
    """Tests for editing the job description."""

    def test_toggle_preserves_both_fields(self) -> None:
        """Test set text, switch to url, switch back keeps the text."""
        wizard = Wizard()
        wizard.set_job_text("Senior Go engineer")
        wizard.toggle_job_mode()
        wizard.set_job_url("https://jobs.example.com/go")
        wizard.toggle_job_mode()

        jd = wizard.state.job_description
        assert jd.mode == "text"
        assert jd.text == "Senior Go engineer"
        assert jd.url == "https://jobs.example.com/go"

    def test_set_mode(self) -> None:
        """Test explicit mode selection."""
        wizard = Wizard()
        wizard.set_job_mode("url")
        assert wizard.state.job_description.mode == "url"

    def test_can_submit(self, sample_document: ResumeDocument) -> None:
        """Test that submit is enabled only with both inputs present."""
        wizard = Wizard()
        assert not wizard.can_submit

        wizard.set_job_text("Backend role")
        assert not wizard.can_submit

        wizard.attach_document(sample_document)
        assert wizard.can_submit

        wizard.set_job_mode("url")
        assert not wizard.can_submit


class TestSubmitGuards:
    """Tests for the INPUT -> ANALYZING preconditions."""

    @pytest.mark.parametrize("job_text", ["", "Backend role"])
    def test_no_document(self, job_text: str) -> None:
        """Test that a missing resume keeps INPUT whatever the job description."""
        wizard = Wizard()
        wizard.set_job_text(job_text)
        analyzer = MagicMock(spec=FitAnalyzer)

        state = wizard.submit(analyzer)

        assert state.phase == Phase.INPUT
        assert state.error == MISSING_RESUME_ERROR
        analyzer.analyze.assert_not_called()

    @pytest.mark.parametrize(("mode", "text", "url"), [
        ("text", "", ""),
        ("text", "   \n", "https://jobs.example.com"),
        ("url", "Backend role", ""),
        ("url", "", "  "),
    ])
    def test_blank_job_description(
        self, sample_document: ResumeDocument, mode: str, text: str, url: str
    ) -> None:
        """Test that blank active content keeps INPUT with the job description error."""
        wizard = Wizard()
        wizard.attach_document(sample_document)
        wizard.set_job_text(text)
        wizard.set_job_url(url)
        wizard.set_job_mode(mode)  # type: ignore[arg-type]
        analyzer = MagicMock(spec=FitAnalyzer)

        state = wizard.submit(analyzer)

        assert state.phase == Phase.INPUT
        assert state.error == MISSING_JOB_DESCRIPTION_ERROR
        assert state.document == sample_document
        analyzer.analyze.assert_not_called()

    def test_begin_clears_error(self, ready_wizard: Wizard) -> None:
        """Test that entering ANALYZING drops the previous error."""
        ready_wizard.clear_document()
        ready_wizard.begin_analysis()
        assert ready_wizard.state.error == MISSING_RESUME_ERROR

        ready_wizard.select_document(
            "cv.pdf", b"%PDF-1.4 minimal", PDF_MIME_TYPE
        )
        analyzing = ready_wizard.begin_analysis()

        assert isinstance(analyzing, AnalyzingState)
        assert not hasattr(analyzing, "error")


class TestAnalysisOutcome:
    """Tests for ANALYZING -> RESULTS and ANALYZING -> INPUT."""

    def test_success_exposes_fields_unchanged(
        self,
        ready_wizard: Wizard,
        analyzer: FitAnalyzer,
        sample_analysis_payload: dict[str, Any],
    ) -> None:
        """Test that a well-formed answer reaches RESULTS verbatim."""
        state = ready_wizard.submit(analyzer)

        assert isinstance(state, ResultsState)
        assert state.result.model_dump(by_alias=True) == sample_analysis_payload

    def test_empty_response_returns_to_input(
        self,
        ready_wizard: Wizard,
        make_provider,
        sample_document: ResumeDocument,
        sample_job_description: JobDescriptionInput,
    ) -> None:
        """Test that an empty answer returns to INPUT keeping all inputs."""
        state = ready_wizard.submit(FitAnalyzer(make_provider("")))

        assert isinstance(state, InputState)
        assert state.error == "No response from AI"
        assert state.document == sample_document
        assert state.job_description.text == sample_job_description.text

    def test_malformed_json_returns_to_input(
        self, ready_wizard: Wizard, make_provider
    ) -> None:
        """Test that malformed JSON returns to INPUT with a parse error."""
        state = ready_wizard.submit(FitAnalyzer(make_provider('{"matchScore": 7')))

        assert isinstance(state, InputState)
        assert state.error.startswith("Failed to parse analysis response")
        assert state.document is not None

    def test_provider_failure_message(self, ready_wizard: Wizard, make_provider) -> None:
        """Test that the provider's message reaches the error slot."""
        provider = make_provider(error=RuntimeError("429 Resource exhausted"))

        state = ready_wizard.submit(FitAnalyzer(provider))

        assert state.phase == Phase.INPUT
        assert state.error == "429 Resource exhausted"

    def test_unexpected_exception_caught(self, ready_wizard: Wizard) -> None:
        """Test that any analyzer exception is reduced to a message."""
        analyzer = MagicMock(spec=FitAnalyzer)
        analyzer.analyze.side_effect = KeyError("boom")

        state = ready_wizard.submit(analyzer)

        assert state.phase == Phase.INPUT
        assert "boom" in state.error

    def test_fail_without_message_uses_fallback(self, ready_wizard: Wizard) -> None:
        """Test the generic message when the failure has no text."""
        ready_wizard.begin_analysis()
        state = ready_wizard.fail_analysis(ProviderError(""))
        assert state.error == GENERIC_ANALYSIS_ERROR

    def test_retry_after_failure(
        self, ready_wizard: Wizard, make_provider, analyzer: FitAnalyzer
    ) -> None:
        """Test that the user can retry right away without re-entering input."""
        ready_wizard.submit(FitAnalyzer(make_provider("")))

        state = ready_wizard.submit(analyzer)

        assert isinstance(state, ResultsState)

    def test_run_requires_analyzing(self, ready_wizard: Wizard, analyzer: FitAnalyzer) -> None:
        """Test that run is only valid after begin_analysis."""
        with pytest.raises(InvalidTransitionError):
            ready_wizard.run(analyzer)

    def test_two_phase_run(self, ready_wizard: Wizard, analyzer: FitAnalyzer) -> None:
        """Test begin_analysis then run, as the web UI does across reruns."""
        ready_wizard.begin_analysis()
        assert ready_wizard.phase == Phase.ANALYZING

        state = ready_wizard.run(analyzer)

        assert state.phase == Phase.RESULTS

    async def test_asubmit(
        self,
        ready_wizard: Wizard,
        analyzer: FitAnalyzer,
        sample_result: AnalysisResult,
    ) -> None:
        """Test the async submit path."""
        state = await ready_wizard.asubmit(analyzer)

        assert isinstance(state, ResultsState)
        assert state.result == sample_result

    async def test_asubmit_failure(self, ready_wizard: Wizard, make_provider) -> None:
        """Test that async failures also return to INPUT."""
        state = await ready_wizard.asubmit(FitAnalyzer(make_provider("not json")))

        assert state.phase == Phase.INPUT
        assert state.document is not None


class TestSingleFlight:
    """Tests that operations are limited to their phase."""

    def test_no_submit_while_analyzing(self, ready_wizard: Wizard) -> None:
        """Test that a second analysis cannot start."""
        ready_wizard.begin_analysis()
        assert not ready_wizard.can_submit
        with pytest.raises(InvalidTransitionError):
            ready_wizard.begin_analysis()

    def test_no_edits_while_analyzing(self, ready_wizard: Wizard) -> None:
        """Test that inputs are frozen during the call."""
        ready_wizard.begin_analysis()
        with pytest.raises(InvalidTransitionError):
            ready_wizard.set_job_text("changed")
        with pytest.raises(InvalidTransitionError):
            ready_wizard.clear_document()

    def test_no_reset_while_analyzing(self, ready_wizard: Wizard) -> None:
        """Test that reset is refused mid-call."""
        ready_wizard.begin_analysis()
        with pytest.raises(InvalidTransitionError):
            ready_wizard.reset()

    def test_complete_requires_analyzing(
        self, ready_wizard: Wizard, sample_result: AnalysisResult
    ) -> None:
        """Test that a result cannot be stored outside ANALYZING."""
        with pytest.raises(InvalidTransitionError):
            ready_wizard.complete_analysis(sample_result)
        with pytest.raises(InvalidTransitionError):
            ready_wizard.fail_analysis("late failure")


class TestReset:
    """Tests for RESULTS -> INPUT."""

    def test_reset_equals_fresh_session(self, ready_wizard: Wizard, analyzer: FitAnalyzer) -> None:
        """Test that reset clears everything."""
        ready_wizard.submit(analyzer)

        state = ready_wizard.reset()

        assert state == InputState()
        assert ready_wizard.state == Wizard().state
        assert ready_wizard.phase == Phase.INPUT

    def test_reset_from_input(self, ready_wizard: Wizard) -> None:
        """Test that reset also works before any analysis."""
        ready_wizard.reset()
        assert ready_wizard.state == InputState()


class TestExampleScenario:
    """The 10 KB PDF + Kubernetes job description walkthrough."""

    def test_kubernetes_scenario(
        self,
        sample_pdf_bytes: bytes,
        analyzer: FitAnalyzer,
    ) -> None:
        """Test the full INPUT -> ANALYZING -> RESULTS flow."""
        assert len(sample_pdf_bytes) == 10 * 1024

        wizard = Wizard()
        wizard.select_document("resume.pdf", sample_pdf_bytes, PDF_MIME_TYPE)
        wizard.set_job_mode("text")
        wizard.set_job_text("Senior backend engineer, 5 years Go, Kubernetes")

        state = wizard.submit(analyzer)

        assert state.phase == Phase.RESULTS
        assert score_band(state.result.match_score) == ScoreBand.STRONG
        assert state.result.missing_keywords == ["Kubernetes"]
        assert len(state.result.improvements) == 1
        improvement = state.result.improvements[0]
        assert improvement.section == "Skills"
        assert improvement.original_concept == "lists Go"
        assert improvement.improved_rewrite == (
            "Led migration of 12 microservices to Go, reducing latency 30%"
        )
        assert improvement.why_it_works == "adds quantifiable impact"
