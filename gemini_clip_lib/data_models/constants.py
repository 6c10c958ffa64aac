"""
Constants and defaults for gemini-clip.

Library-level settings are read from environment variables prefixed with
``GEMINI_CLIP_`` once, at import time.  Host options (API key, model, prompt,
target language) are *not* read here; they arrive with every call.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "GEMINI_CLIP_"


# Base URL of the Generative Language REST API
API_BASE_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}API_BASE_URL",
    "https://generativelanguage.googleapis.com/v1beta",
).strip()

# Timeout (seconds) of a single generateContent call
DEFAULT_TIMEOUT = float(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", "30").strip()
)

# Default logging level
LOG_LEVEL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO"
).strip()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Name of the variable the CLI reads the API key from
API_KEY_ENV = f"{_DontChangeMe.MAIN_ENV_PREFIX}API_KEY"

# Endpoint path, relative to API_BASE_URL
GENERATE_CONTENT_ENDPOINT = "/models/{model}:generateContent"

# =============================================================================
# MODELS
# =============================================================================
DEFAULT_MODEL = "gemini-2.0-flash-lite"

AVAILABLE_MODELS = [
    "gemini-2.0-flash-lite",
    "gemini-2.0-flash",
    "gemini-2.5-flash-lite",
    "gemini-2.5-flash",
]

# =============================================================================
# LANGUAGES
# =============================================================================
TARGET_LANGUAGES = [
    "English",
    "Chinese",
    "Russian",
    "French",
    "Português",
    "Spanish",
]

DEFAULT_TARGET_LANGUAGE = TARGET_LANGUAGES[0]

# =============================================================================
# PROMPTS
# =============================================================================
INPUT_PLACEHOLDER = "{input}"
LANG_PLACEHOLDER = "{lang}"

DEFAULT_IMPROVE_WRITING_PROMPT = (
    "I will give you text content, you will rewrite it and output a better "
    "version of my text. Correct spelling, grammar, and punctuation errors in "
    "the given text. Keep the meaning the same. Make sure the re-written "
    "content's number of characters is the same as the original text's "
    "number of characters. Do not alter the original structure and formatting "
    "outlined in any way. Only give me the output and nothing else. Now, using "
    "the concepts above, re-write the following text. Respond in the same "
    "language variety or dialect of the following text: {input}"
)

DEFAULT_TRANSLATE_PROMPT = (
    "I will give you text content, you will rewrite it and translate the text "
    "into {lang} language. Keep the meaning the same. Do not alter the original "
    "structure and formatting outlined in any way. Only give me the output and "
    "nothing else.Now, using the concepts above, translate the following "
    "text:{input}"
)

# =============================================================================
# SAFETY
# =============================================================================
DEFAULT_SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_ONLY_HIGH"},
]

# =============================================================================
# ERROR MESSAGES
# =============================================================================
ERROR_NO_INPUT = "Error: no input text."
ERROR_NO_API_KEY = "Error: missing API key. Please set it in the extension options."
ERROR_GENERATION_PREFIX = "Error generating content: "
NO_CANDIDATES_REASON = "No candidates returned."
EMPTY_RESPONSE_MESSAGE = "Empty response from model."
