"""
Typed outcome of an action.

Internally an action produces an :class:`ActionResult`; only the host
boundary flattens it to the single string that gets pasted.
"""

from typing import Optional

from pydantic import BaseModel

from gemini_clip_lib.data_models.constants import (
    ERROR_GENERATION_PREFIX,
    ERROR_NO_API_KEY,
    ERROR_NO_INPUT,
)
from gemini_clip_lib.exceptions import ErrorCategory, GeminiClipError


class ActionError(BaseModel):
    category: ErrorCategory
    detail: str = ""

    def display(self) -> str:
        if self.category == ErrorCategory.MISSING_INPUT:
            return ERROR_NO_INPUT
        if self.category == ErrorCategory.MISSING_CREDENTIAL:
            return ERROR_NO_API_KEY
        return ERROR_GENERATION_PREFIX + self.detail


class ActionResult(BaseModel):
    text: str = ""
    error: Optional[ActionError] = None

    @property
    def is_error(self) -> bool:
        """True if the action failed."""
        return self.error is not None

    @classmethod
    def success(cls, text: str) -> "ActionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, exc: GeminiClipError) -> "ActionResult":
        return cls(error=ActionError(category=exc.category, detail=str(exc)))

    def display(self) -> str:
        """The string handed back to the host for pasting."""
        if self.error is not None:
            return self.error.display()
        return self.text
