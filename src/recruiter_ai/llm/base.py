"""Base LLM provider abstraction."""

import json
from abc import ABC, abstractmethod
from typing import Any, Literal

from langchain_core.language_models import BaseChatModel


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Implements model caching to avoid repeated instantiation overhead.
    Models are cached on first access and reused for subsequent calls.
    """

    _json_models: dict[str, BaseChatModel] | None = None

    def get_json_model(self, response_schema: dict[str, Any]) -> BaseChatModel:
        """Get a cached chat model that answers with JSON conforming to ``response_schema``."""
        if self._json_models is None:
            self._json_models = {}
        key = json.dumps(response_schema, sort_keys=True)
        if key not in self._json_models:
            self._json_models[key] = self._create_json_model(response_schema)
        return self._json_models[key]

    @abstractmethod
    def _create_json_model(self, response_schema: dict[str, Any]) -> BaseChatModel:
        """Create a new JSON-mode chat model instance. Override in subclasses."""
        pass


def get_llm_provider(
    provider: Literal["google"] = "google",
    model: str | None = None,
    api_key: str | None = None,
    timeout: float | None = None,
    temperature: float = 0.3,
) -> LLMProvider:
    """Factory function to get an LLM provider instance."""
    if provider == "google":
        from recruiter_ai.llm.google import DEFAULT_TIMEOUT, GoogleProvider

        return GoogleProvider(
            model=model or "gemini-2.5-flash",
            api_key=api_key,
            timeout=timeout or DEFAULT_TIMEOUT,
            temperature=temperature,
        )
    else:
        raise ValueError(f"Unknown provider: {provider}")
