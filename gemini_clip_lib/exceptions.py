"""
Custom exception hierarchy for the gemini-clip library.

All public exceptions inherit from :class:`GeminiClipError`, allowing callers
to catch a single base class for any failure while still being able to
differentiate specific error conditions when needed.  Every exception carries
an :class:`ErrorCategory` so the action layer can turn it into a typed
result without inspecting message text.
"""

from enum import Enum


class ErrorCategory(str, Enum):
    MISSING_INPUT = "missing_input"
    MISSING_CREDENTIAL = "missing_credential"
    GENERATION_BLOCKED = "generation_blocked"
    EMPTY_OUTPUT = "empty_output"
    TRANSPORT = "transport"


class GeminiClipError(Exception):
    """Base exception for all gemini-clip specific errors."""

    category = ErrorCategory.TRANSPORT


class MissingInputError(GeminiClipError):
    """Raised when an action receives no text to work on."""

    category = ErrorCategory.MISSING_INPUT


class MissingCredentialError(GeminiClipError):
    """Raised when the API key is empty after trimming."""

    category = ErrorCategory.MISSING_CREDENTIAL


class GenerationBlockedError(GeminiClipError):
    """Raised when the response has no candidates (e.g. a safety block)."""

    category = ErrorCategory.GENERATION_BLOCKED


class EmptyResponseError(GeminiClipError):
    """Raised when the first candidate carries no text."""

    category = ErrorCategory.EMPTY_OUTPUT


class TransportError(GeminiClipError):
    """Raised on network failures, timeouts, non-2xx statuses or bad bodies."""

    category = ErrorCategory.TRANSPORT


class AuthenticationError(TransportError):
    """Raised when the server returns HTTP 401/403 – invalid API key."""

    pass


class RateLimitError(TransportError):
    """Raised when the server returns HTTP 429 – quota exhausted."""

    pass
