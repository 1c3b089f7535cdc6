"""Prompt templates for RecruiterAI."""
