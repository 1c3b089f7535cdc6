"""LLM provider abstraction."""

from recruiter_ai.llm.base import LLMProvider, get_llm_provider

__all__ = ["LLMProvider", "get_llm_provider"]
