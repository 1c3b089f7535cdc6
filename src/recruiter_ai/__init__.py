"""RecruiterAI - AI-powered resume fit analysis for job applications."""

__version__ = "0.1.0"
