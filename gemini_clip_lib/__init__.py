from gemini_clip_lib.client import GeminiClient
from gemini_clip_lib.actions import ACTIONS, ImproveWritingAction, TranslateAction
from gemini_clip_lib.exceptions import (
    GeminiClipError,
    AuthenticationError,
    RateLimitError,
    TransportError,
    GenerationBlockedError,
    EmptyResponseError,
    MissingInputError,
    MissingCredentialError,
)

__all__ = [
    "ACTIONS",
    "GeminiClient",
    "ImproveWritingAction",
    "TranslateAction",
    "GeminiClipError",
    "AuthenticationError",
    "RateLimitError",
    "TransportError",
    "GenerationBlockedError",
    "EmptyResponseError",
    "MissingInputError",
    "MissingCredentialError",
]
