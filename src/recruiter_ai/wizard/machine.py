"""Three-step wizard driving input collection, analysis and results."""

import logging
from collections.abc import Callable

from recruiter_ai.config import DEFAULT_MAX_DOCUMENT_BYTES
from recruiter_ai.exceptions import DocumentValidationError, InvalidTransitionError
from recruiter_ai.intake.document import load_document
from recruiter_ai.models.analysis import AnalysisResult
from recruiter_ai.models.document import ResumeDocument
from recruiter_ai.models.job_description import JobDescriptionInput, JobDescriptionMode
from recruiter_ai.models.state import (
    AnalyzingState,
    InputState,
    Phase,
    ResultsState,
    WizardState,
)
from recruiter_ai.processors.analyzer import FitAnalyzer

logger = logging.getLogger(__name__)

MISSING_RESUME_ERROR = "Please upload your resume."
MISSING_JOB_DESCRIPTION_ERROR = "Please provide a job description or URL."
GENERIC_ANALYSIS_ERROR = "Something went wrong during analysis. Please try again."


class Wizard:
    """Owns the wizard state and applies the allowed transitions.

    INPUT -> ANALYZING when a resume and job description are present.
    ANALYZING -> RESULTS on success, back to INPUT (inputs kept) on failure.
    RESULTS -> INPUT on reset, clearing everything.
    """

    def __init__(
        self,
        state: WizardState | None = None,
        max_document_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES,
    ):
        self.state: WizardState = state if state is not None else InputState()
        self.max_document_bytes = max_document_bytes

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def can_submit(self) -> bool:
        """Whether the submit action should be enabled."""
        state = self.state
        return (
            isinstance(state, InputState)
            and state.document is not None
            and bool(state.job_description.active_content)
        )

    def _require_input(self, operation: str) -> InputState:
        if not isinstance(self.state, InputState):
            raise InvalidTransitionError(operation, self.state.phase.value)
        return self.state

    def _set(self, state: WizardState) -> WizardState:
        if state.phase != self.state.phase:
            logger.debug(f"Wizard {self.state.phase.value} -> {state.phase.value}")
        self.state = state
        return state

    # --- Input phase ---

    def select_document(
        self,
        filename: str,
        content: bytes,
        mime_type: str | None,
    ) -> ResumeDocument | None:
        """Validate and store a resume, replacing any previous one.

        Returns:
            The stored document, or None if the file was rejected. A rejected
            file leaves the previous selection in place.
        """
        state = self._require_input("select a document")
        try:
            document = load_document(filename, content, mime_type, self.max_document_bytes)
        except DocumentValidationError as e:
            logger.info(f"Rejected resume {filename!r}: {e}")
            self._set(state.model_copy(update={"document_error": str(e)}))
            return None

        return self.attach_document(document)

    def attach_document(self, document: ResumeDocument) -> ResumeDocument:
        """Store an already validated resume, replacing any previous one."""
        state = self._require_input("attach a document")
        self._set(
            state.model_copy(update={"document": document, "error": None, "document_error": None})
        )
        return document

    def clear_document(self) -> None:
        state = self._require_input("clear the document")
        self._set(state.model_copy(update={"document": None, "document_error": None}))

    def _update_job_description(
        self,
        operation: str,
        change: Callable[[JobDescriptionInput], JobDescriptionInput],
    ) -> None:
        state = self._require_input(operation)
        self._set(state.model_copy(update={"job_description": change(state.job_description)}))

    def set_job_text(self, text: str) -> None:
        self._update_job_description("edit the job description", lambda jd: jd.with_text(text))

    def set_job_url(self, url: str) -> None:
        self._update_job_description("edit the job URL", lambda jd: jd.with_url(url))

    def set_job_mode(self, mode: JobDescriptionMode) -> None:
        self._update_job_description("switch job description mode", lambda jd: jd.with_mode(mode))

    def toggle_job_mode(self) -> None:
        self._update_job_description("switch job description mode", lambda jd: jd.toggle_mode())

    # --- Analysis ---

    def begin_analysis(self) -> AnalyzingState | None:
        """Move to ANALYZING if both inputs are present.

        Returns:
            The analyzing state, or None if a precondition failed (the error
            is stored on the input state).
        """
        state = self._require_input("start an analysis")

        if state.document is None:
            self._set(state.model_copy(update={"error": MISSING_RESUME_ERROR}))
            return None
        if state.job_description.is_blank:
            self._set(state.model_copy(update={"error": MISSING_JOB_DESCRIPTION_ERROR}))
            return None

        analyzing = AnalyzingState(document=state.document, job_description=state.job_description)
        self._set(analyzing)
        return analyzing

    def complete_analysis(self, result: AnalysisResult) -> ResultsState:
        state = self.state
        if not isinstance(state, AnalyzingState):
            raise InvalidTransitionError("complete an analysis", state.phase.value)
        return self._set(
            ResultsState(
                document=state.document,
                job_description=state.job_description,
                result=result,
            )
        )

    def fail_analysis(self, error: BaseException | str | None) -> InputState:
        """Return to INPUT with the failure message, keeping the entered data."""
        state = self.state
        if not isinstance(state, AnalyzingState):
            raise InvalidTransitionError("fail an analysis", state.phase.value)
        message = str(error) if error else ""
        return self._set(
            InputState(
                document=state.document,
                job_description=state.job_description,
                error=message or GENERIC_ANALYSIS_ERROR,
            )
        )

    def run(self, analyzer: FitAnalyzer) -> WizardState:
        """Run the pending analysis and record the outcome.

        Any failure returns the wizard to INPUT with an error message; nothing
        is raised to the caller.
        """
        state = self.state
        if not isinstance(state, AnalyzingState):
            raise InvalidTransitionError("run an analysis", state.phase.value)
        try:
            result = analyzer.analyze(state.document, state.job_description)
        except Exception as e:
            logger.warning(f"Analysis failed: {e}")
            return self.fail_analysis(e)
        return self.complete_analysis(result)

    async def arun(self, analyzer: FitAnalyzer) -> WizardState:
        """Async variant of :meth:`run`."""
        state = self.state
        if not isinstance(state, AnalyzingState):
            raise InvalidTransitionError("run an analysis", state.phase.value)
        try:
            result = await analyzer.aanalyze(state.document, state.job_description)
        except Exception as e:
            logger.warning(f"Analysis failed: {e}")
            return self.fail_analysis(e)
        return self.complete_analysis(result)

    def submit(self, analyzer: FitAnalyzer) -> WizardState:
        """Validate inputs, run one analysis and record the outcome."""
        if self.begin_analysis() is None:
            return self.state
        return self.run(analyzer)

    async def asubmit(self, analyzer: FitAnalyzer) -> WizardState:
        """Async variant of :meth:`submit`."""
        if self.begin_analysis() is None:
            return self.state
        return await self.arun(analyzer)

    # --- Reset ---

    def reset(self) -> InputState:
        """Clear document, job description, result and error."""
        if isinstance(self.state, AnalyzingState):
            raise InvalidTransitionError("reset", self.state.phase.value)
        return self._set(InputState())
