"""
Models for what the host hands to an action on every invocation.

``ExtensionOptions`` mirrors the host's option identifiers verbatim
(``apikey``, ``model``, ``prompt``, ``tolang``) and accepts the loose shapes a
host can produce (``None``, lists from multi-select fields).  The
configuration resolver turns it into a :class:`ResolvedConfig`, which is the
only configuration value the rest of the library sees.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from gemini_clip_lib.data_models.constants import DEFAULT_TIMEOUT


class ActionInput(BaseModel):
    """
    Selected text supplied by the host.

    Attributes
    ----------
    text : str
        The text to rewrite or translate; may be empty, in which case the
        action reports a missing-input error instead of calling the API.
    """

    text: str = ""


class ExtensionOptions(BaseModel):
    """
    Raw host options.

    Attributes
    ----------
    apikey : Optional[str]
        API key for the Generative Language API.
    model : Union[str, List[str], None]
        Model identifier; multi-select host fields may deliver a list.
    prompt : Optional[str]
        Prompt template containing ``{input}`` (and ``{lang}`` for
        translation).
    tolang : Union[str, List[str], None]
        Target language name, translation only.
    timeout : Optional[float]
        Per-call timeout override in seconds.
    """

    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    apikey: Optional[Any] = None
    model: Union[str, List[str], None] = None
    prompt: Optional[str] = None
    tolang: Union[str, List[str], None] = None
    timeout: Optional[float] = None


class ResolvedConfig(BaseModel):
    """Validated configuration of a single invocation."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    api_key: str
    model: str
    prompt_template: str
    target_language: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
