"""Exceptions raised by RecruiterAI.

Validation errors are local and are reported next to the control that caused
them. Analysis errors come from the provider call and are reduced to a message
string by the wizard. Every message is written to be shown to the user as-is.
"""


class RecruiterAIError(Exception):
    """Base class for all RecruiterAI errors."""


# --- Document intake ---


class DocumentValidationError(RecruiterAIError):
    """A candidate resume file was rejected before any provider call."""


class UnsupportedDocumentTypeError(DocumentValidationError):
    """The file's declared MIME type is not the accepted document type."""

    def __init__(self, mime_type: str | None):
        self.mime_type = mime_type
        super().__init__("Please upload a PDF file.")


class DocumentTooLargeError(DocumentValidationError):
    """The file exceeds the size ceiling."""

    def __init__(self, size: int, max_bytes: int):
        self.size = size
        self.max_bytes = max_bytes
        limit_mb = max_bytes / (1024 * 1024)
        super().__init__(f"File size exceeds {limit_mb:g}MB limit.")


class EmptyDocumentError(DocumentValidationError):
    """The file has no content."""

    def __init__(self) -> None:
        super().__init__("The uploaded file is empty.")


class DocumentNotFoundError(DocumentValidationError):
    """A resume path given on the command line does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


# --- Analysis call ---


class AnalysisError(RecruiterAIError):
    """The analysis call failed or returned an unusable response."""


class ProviderError(AnalysisError):
    """The provider call raised (network, auth, quota, server error)."""


class AnalysisTimeoutError(AnalysisError):
    """The provider did not answer within the client timeout."""

    def __init__(self, timeout: float | None):
        self.timeout = timeout
        if timeout is None:
            super().__init__("Analysis request timed out.")
        else:
            super().__init__(f"Analysis request timed out after {timeout:g}s.")


class EmptyResponseError(AnalysisError):
    """The provider returned no text."""

    def __init__(self) -> None:
        super().__init__("No response from AI")


class ResponseParseError(AnalysisError):
    """The provider's text is not valid JSON or does not match the result shape."""

    def __init__(self, detail: str, raw_text: str | None = None):
        self.detail = detail
        self.raw_text = raw_text
        super().__init__(f"Failed to parse analysis response: {detail}")


# --- Wizard ---


class InvalidTransitionError(RecruiterAIError):
    """An operation was requested in a phase that does not allow it."""

    def __init__(self, operation: str, phase: str):
        self.operation = operation
        self.phase = phase
        super().__init__(f"Cannot {operation} while in the {phase} phase")
