"""
Wrapper for the ``models/{model}:generateContent`` endpoint.
"""

from urllib.parse import quote

from gemini_clip_lib.data_models.constants import (
    EMPTY_RESPONSE_MESSAGE,
    GENERATE_CONTENT_ENDPOINT,
    NO_CANDIDATES_REASON,
)
from gemini_clip_lib.data_models.generation import (
    GenerateContentRequest,
    GenerateContentResponse,
)
from gemini_clip_lib.exceptions import EmptyResponseError, GenerationBlockedError
from gemini_clip_lib.services.service_interface import BaseServiceInterface


def extract_text(response: GenerateContentResponse) -> str:
    """
    Return the text of the first candidate.

    Raises
    ------
    GenerationBlockedError
        When there is no candidate; the message carries the block reason.
    EmptyResponseError
        When the first candidate has no text.
    """
    candidate = response.first_candidate
    if candidate is None:
        reason = response.block_reason or NO_CANDIDATES_REASON
        raise GenerationBlockedError(f"Generation failed: {reason}")

    text = candidate.text()
    if not text:
        raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE)
    return text


class GenerateContentService(BaseServiceInterface):
    """
    Service for the text-generation endpoint.

    The model identifier is URL-encoded into the path; the API key travels as
    a query parameter added by :class:`HttpRequester`.
    """

    endpoint = GENERATE_CONTENT_ENDPOINT
    response_cls = GenerateContentResponse

    def generate(self, model: str, request: GenerateContentRequest) -> str:
        response = self.call(request.to_payload(), model=quote(model, safe=""))
        return extract_text(response)
