"""Google Gemini LLM provider."""

import os
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from recruiter_ai.llm.base import LLMProvider

# Default timeout in seconds for API requests
DEFAULT_TIMEOUT = 120.0  # 2 minutes per request
DEFAULT_MAX_RETRIES = 1  # Single attempt, failures go straight back to the user


class GoogleProvider(LLMProvider):
    """Google Gemini provider using langchain-google-genai."""

    def __init__(
        self,
        model: str = "gemini-2.5-flash",
        api_key: str | None = None,
        temperature: float = 0.3,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        """Initialize the Google provider.

        Args:
            model: Model name (default: gemini-2.5-flash).
            api_key: Google API key. If not provided, uses GOOGLE_API_KEY or API_KEY env var.
            temperature: Default temperature for generation.
            timeout: Request timeout in seconds.
            max_retries: Maximum number of attempts per call.
        """
        self.model = model
        self.api_key = api_key or os.getenv("GOOGLE_API_KEY") or os.getenv("API_KEY")
        self.default_temperature = temperature
        self.timeout = timeout
        self.max_retries = max_retries
        self._json_models = None

    def _create_json_model(self, response_schema: dict[str, Any]) -> BaseChatModel:
        """Create a Gemini model constrained to JSON output matching the schema."""
        return ChatGoogleGenerativeAI(
            model=self.model,
            temperature=self.default_temperature,
            google_api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
            response_mime_type="application/json",
            response_schema=response_schema,
        )
