"""
Request and response envelopes of the ``generateContent`` endpoint.

Only the subset of the schema the actions rely on is modelled: text parts,
generation parameters, safety thresholds, candidates and prompt feedback.
"""

from typing import List, Optional

from pydantic import Field

from gemini_clip_lib.data_models.base_model import ApiModel
from gemini_clip_lib.data_models.constants import DEFAULT_SAFETY_SETTINGS


class Part(ApiModel):
    text: Optional[str] = None


class Content(ApiModel):
    """
    One conversation turn.

    Attributes
    ----------
    role : Optional[str]
        ``"user"`` for prompts, ``"model"`` in responses.
    parts : Optional[List[Part]]
        Ordered content parts of the turn; the API omits it for empty turns.
    """

    role: Optional[str] = None
    parts: Optional[List[Part]] = None


class SafetySetting(ApiModel):
    category: str
    threshold: str


class GenerationConfig(ApiModel):
    """
    Sampling parameters sent as ``generationConfig``.

    Attributes
    ----------
    temperature : float
        Sampling temperature – lower values are more deterministic.
    max_output_tokens : int
        Cap on generated tokens (``maxOutputTokens``).
    top_p : float
        Nucleus sampling threshold (``topP``).
    top_k : int
        Sampling pool size (``topK``).
    stop_sequences : Optional[List[str]]
        Sequences that end generation (``stopSequences``); omitted when
        ``None``.
    """

    temperature: float
    max_output_tokens: int = Field(alias="maxOutputTokens")
    top_p: float = Field(alias="topP")
    top_k: int = Field(alias="topK")
    stop_sequences: Optional[List[str]] = Field(default=None, alias="stopSequences")


class GenerateContentRequest(ApiModel):
    contents: List[Content]
    safety_settings: List[SafetySetting] = Field(
        default_factory=lambda: [SafetySetting(**s) for s in DEFAULT_SAFETY_SETTINGS],
        alias="safetySettings",
    )
    generation_config: GenerationConfig = Field(alias="generationConfig")

    @classmethod
    def from_prompt(
        cls, prompt: str, generation_config: GenerationConfig
    ) -> "GenerateContentRequest":
        """Wrap ``prompt`` as a single user turn with one text part."""
        return cls(
            contents=[Content(role="user", parts=[Part(text=prompt)])],
            generation_config=generation_config,
        )


class Candidate(ApiModel):
    content: Optional[Content] = None
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")

    def text(self) -> str:
        """Concatenate the non-empty text parts with newlines and trim."""
        if self.content is None:
            return ""
        texts = [p.text for p in self.content.parts or [] if p.text]
        return "\n".join(texts).strip()


class PromptFeedback(ApiModel):
    block_reason: Optional[str] = Field(default=None, alias="blockReason")


class GenerateContentResponse(ApiModel):
    candidates: Optional[List[Candidate]] = None
    prompt_feedback: Optional[PromptFeedback] = Field(
        default=None, alias="promptFeedback"
    )

    @property
    def first_candidate(self) -> Optional[Candidate]:
        return self.candidates[0] if self.candidates else None

    @property
    def block_reason(self) -> Optional[str]:
        if self.prompt_feedback is None:
            return None
        return self.prompt_feedback.block_reason
