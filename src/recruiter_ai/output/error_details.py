"""Turn analysis error messages into user-facing diagnostics."""

import re
from typing import TypedDict

AUTH_STATUS = re.compile(r"\b40[13]\b")
RATE_LIMIT_STATUS = re.compile(r"\b429\b")
SERVER_STATUS = re.compile(r"\b50[0234]\b")


class ErrorDetails(TypedDict):
    """Diagnostic information for a failed analysis."""

    category: str  # connection, auth, rate_limit, timeout, model, empty, parsing, server, unknown
    title: str
    explanation: str
    cause: str
    solution: list[str]
    technical: str


def describe_error(error_message: str, model: str = "gemini-2.5-flash") -> ErrorDetails:
    """Classify an error message and explain it.

    Args:
        error_message: Message stored by the wizard after a failed analysis.
        model: Model name, used in model-related explanations.

    Returns:
        ErrorDetails with category, title, explanation, cause, solution steps
        and the original message as technical detail.
    """
    error_lower = error_message.lower()

    # Timeouts (check before connection errors, which also mention timeouts)
    if any(x in error_lower for x in ["timed out", "timeout", "deadline exceeded"]):
        return {
            "category": "timeout",
            "title": "Analysis Timed Out",
            "explanation": "The AI recruiter did not answer in time.",
            "cause": "The Gemini API is slow or overloaded, or the resume is very large.",
            "solution": [
                "Try again - API response times vary",
                "Try a smaller or simpler PDF",
                "Increase RECRUITER_AI_REQUEST_TIMEOUT in .env.local",
            ],
            "technical": error_message,
        }

    # Connection errors
    if any(x in error_lower for x in ["connection", "connect", "network", "unreachable"]):
        return {
            "category": "connection",
            "title": "Connection Failed",
            "explanation": "Could not connect to the Google Gemini API servers.",
            "cause": "Network issues, firewall blocking, or the API service is down.",
            "solution": [
                "Check your internet connection",
                "Try again in a few moments",
                "Check the Google AI Studio status page for outages",
                "If using VPN/proxy, try disabling it",
            ],
            "technical": error_message,
        }

    # Authentication errors (missing key surfaces here at analysis time)
    if any(
        x in error_lower
        for x in [
            "api key",
            "api_key",
            "unauthorized",
            "permission denied",
            "authentication",
        ]
    ) or AUTH_STATUS.search(error_lower):
        return {
            "category": "auth",
            "title": "Authentication Failed",
            "explanation": "Your Google API key is missing or was rejected.",
            "cause": "GOOGLE_API_KEY is not set, invalid, expired, or lacks Gemini access.",
            "solution": [
                "Set GOOGLE_API_KEY in .env.local or enter it in the sidebar",
                "Verify the key in Google AI Studio",
                "Generate a new API key if needed",
            ],
            "technical": error_message,
        }

    # Rate limit errors
    if any(
        x in error_lower
        for x in ["rate limit", "rate_limit", "too many requests", "quota", "resource exhausted"]
    ) or RATE_LIMIT_STATUS.search(error_lower):
        return {
            "category": "rate_limit",
            "title": "Rate Limit Exceeded",
            "explanation": "Too many requests to the Gemini API.",
            "cause": "You've exceeded the API rate limit or your usage quota.",
            "solution": [
                "Wait a few minutes before trying again",
                "Check your API usage dashboard",
                "Consider upgrading your API plan",
            ],
            "technical": error_message,
        }

    # Model errors
    if any(
        x in error_lower
        for x in ["model not found", "invalid model", "model_not_found", "is not found for api version"]
    ):
        return {
            "category": "model",
            "title": "Model Not Available",
            "explanation": f"The model '{model}' is not available.",
            "cause": "The model name is incorrect or not accessible with your API key.",
            "solution": [
                "Set RECRUITER_AI_MODEL to a supported Gemini model",
                "Verify your API plan includes access to this model",
            ],
            "technical": error_message,
        }

    # Empty response
    if "no response from ai" in error_lower:
        return {
            "category": "empty",
            "title": "Empty Response",
            "explanation": "The AI recruiter returned no analysis.",
            "cause": "The response was blocked or cut off by the provider.",
            "solution": [
                "Try again",
                "Check that the PDF contains readable text",
            ],
            "technical": error_message,
        }

    # Parsing errors
    if any(x in error_lower for x in ["failed to parse", "invalid json", "parse error"]):
        return {
            "category": "parsing",
            "title": "Unreadable Analysis",
            "explanation": "The AI recruiter's answer did not have the expected structure.",
            "cause": "The model returned malformed or incomplete JSON.",
            "solution": [
                "Try again - the model output varies between runs",
                "Shorten the job description if it is very long",
            ],
            "technical": error_message,
        }

    # Server errors
    if any(
        x in error_lower for x in ["server error", "internal error", "unavailable"]
    ) or SERVER_STATUS.search(error_lower):
        return {
            "category": "server",
            "title": "API Server Error",
            "explanation": "The Gemini API server encountered an error.",
            "cause": "Temporary server-side issue.",
            "solution": [
                "Wait a moment and try again",
                "Check the Google AI Studio status page",
            ],
            "technical": error_message,
        }

    # Default/unknown errors
    return {
        "category": "unknown",
        "title": "Analysis Error",
        "explanation": "An unexpected error occurred during the analysis.",
        "cause": "Unknown - see technical details below.",
        "solution": [
            "Try again",
            "Check your inputs are valid",
            "Report this issue if it persists",
        ],
        "technical": error_message,
    }
