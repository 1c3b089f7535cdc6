"""Resume-to-job fit analysis through a single structured-generation call."""

import asyncio
import json
import logging
from typing import Any

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import ValidationError

from recruiter_ai.config import Settings, get_settings
from recruiter_ai.exceptions import (
    AnalysisError,
    AnalysisTimeoutError,
    EmptyResponseError,
    ProviderError,
    ResponseParseError,
)
from recruiter_ai.llm.base import LLMProvider, get_llm_provider
from recruiter_ai.models.analysis import ANALYSIS_RESPONSE_SCHEMA, AnalysisResult
from recruiter_ai.models.document import ResumeDocument
from recruiter_ai.models.job_description import JobDescriptionInput
from recruiter_ai.prompts.analysis import JOB_DESCRIPTION_PROMPT, JOB_URL_PROMPT, SYSTEM_PROMPT

logger = logging.getLogger(__name__)

_TIMEOUT_MARKERS = ("timeout", "timed out", "deadline exceeded", "deadline_exceeded")


def _is_timeout(exc: BaseException) -> bool:
    """Best-effort detection of timeouts raised by the provider's HTTP stack."""
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return True
    if "timeout" in type(exc).__name__.lower():
        return True
    message = str(exc).lower()
    return any(marker in message for marker in _TIMEOUT_MARKERS)


def _response_text(content: Any) -> str | None:
    """Flatten a chat message's content into plain text.

    Content is either a string or a list of blocks (strings or dicts with a
    ``text`` key) depending on the provider integration version.
    """
    if content is None:
        return None
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type", "text") == "text":
                parts.append(block.get("text") or "")
        return "".join(parts)
    return str(content)


def _describe_validation_error(error: ValidationError) -> str:
    """Summarize a pydantic error as 'field: problem' pairs using wire names."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "response"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def parse_analysis_response(text: str | None) -> AnalysisResult:
    """Parse and validate the provider's JSON text.

    Args:
        text: Raw text returned by the provider.

    Returns:
        AnalysisResult: The validated analysis.

    Raises:
        EmptyResponseError: If no text was returned.
        ResponseParseError: If the text is not JSON or does not match the result shape.
    """
    if text is None or not text.strip():
        raise EmptyResponseError()

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"invalid JSON ({e.msg})", raw_text=text) from e

    if not isinstance(payload, dict):
        raise ResponseParseError(
            f"expected a JSON object, got {type(payload).__name__}", raw_text=text
        )

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        raise ResponseParseError(_describe_validation_error(e), raw_text=text) from e


class FitAnalyzer:
    """Analyze how well a resume fits a job description.

    Each call builds one request (resume PDF, job description framing, system
    instruction, declared JSON schema), makes exactly one provider call and
    validates the answer. Nothing is retried or cached.
    """

    def __init__(self, llm_provider: LLMProvider, timeout: float | None = None):
        """Initialize the analyzer.

        Args:
            llm_provider: Provider supplying the JSON-mode chat model.
            timeout: Client-side bound for ``aanalyze`` in seconds. None disables it.
        """
        self.llm_provider = llm_provider
        self.timeout = timeout

    def build_messages(
        self,
        document: ResumeDocument,
        job_description: JobDescriptionInput,
    ) -> list[BaseMessage]:
        """Build the request messages for one analysis call."""
        if job_description.is_url:
            instruction = JOB_URL_PROMPT.format(job_url=job_description.url)
        else:
            instruction = JOB_DESCRIPTION_PROMPT.format(job_description=job_description.text)

        return [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(
                content=[
                    {
                        "type": "file",
                        "source_type": "base64",
                        "mime_type": document.mime_type,
                        "data": document.data,
                    },
                    {"type": "text", "text": instruction},
                ]
            ),
        ]

    def analyze(
        self,
        document: ResumeDocument,
        job_description: JobDescriptionInput,
    ) -> AnalysisResult:
        """Run the analysis and return the validated result.

        Raises:
            AnalysisError: On provider failure, timeout, empty or malformed response.
        """
        messages = self._prepare(document, job_description)

        try:
            model = self.llm_provider.get_json_model(ANALYSIS_RESPONSE_SCHEMA)
            response = model.invoke(messages)
        except AnalysisError:
            raise
        except Exception as e:
            raise self._wrap_provider_error(e) from e

        return self._parse(response)

    async def aanalyze(
        self,
        document: ResumeDocument,
        job_description: JobDescriptionInput,
    ) -> AnalysisResult:
        """Async variant of :meth:`analyze`, bounded by ``self.timeout``."""
        messages = self._prepare(document, job_description)

        try:
            model = self.llm_provider.get_json_model(ANALYSIS_RESPONSE_SCHEMA)
            response = await asyncio.wait_for(model.ainvoke(messages), timeout=self.timeout)
        except AnalysisError:
            raise
        except Exception as e:
            raise self._wrap_provider_error(e) from e

        return self._parse(response)

    def _prepare(
        self,
        document: ResumeDocument,
        job_description: JobDescriptionInput,
    ) -> list[BaseMessage]:
        logger.info(
            f"Analyzing {document.filename} ({document.size} bytes) against "
            f"{len(job_description.active_content)} chars of job {job_description.mode}"
        )
        return self.build_messages(document, job_description)

    def _wrap_provider_error(self, error: Exception) -> AnalysisError:
        if _is_timeout(error):
            logger.warning(f"Analysis timed out: {error}")
            return AnalysisTimeoutError(self.timeout)
        logger.warning(f"Analysis provider call failed: {error}")
        return ProviderError(str(error) or type(error).__name__)

    def _parse(self, response: Any) -> AnalysisResult:
        text = _response_text(getattr(response, "content", None))
        try:
            return parse_analysis_response(text)
        except AnalysisError as e:
            logger.warning(f"Analysis response rejected: {e}")
            raise


def create_analyzer(settings: Settings | None = None, api_key: str | None = None) -> FitAnalyzer:
    """Build an analyzer backed by the configured Gemini model.

    Args:
        settings: Application settings. Defaults to the cached environment settings.
        api_key: Overrides the configured API key (e.g. one entered in the UI).
    """
    settings = settings or get_settings()
    provider = get_llm_provider(
        "google",
        model=settings.model,
        api_key=api_key or settings.google_api_key,
        timeout=settings.request_timeout,
        temperature=settings.temperature,
    )
    return FitAnalyzer(provider, timeout=settings.request_timeout)
