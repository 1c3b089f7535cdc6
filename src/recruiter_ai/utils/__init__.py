"""Utility functions for RecruiterAI."""

from recruiter_ai.utils.logging import setup_logging

__all__ = ["setup_logging"]
