"""
Configuration resolution for a single action invocation.

Host options are loosely typed: a multi-select field may arrive as a list,
free-text fields may be missing or padded with whitespace.  The helpers in
this module normalise every option, apply the named defaults from
:mod:`gemini_clip_lib.data_models.constants` and raise the appropriate
library exception when an invocation cannot proceed.  Nothing here touches
the network.
"""

from typing import Any, Dict, Optional, Union

from gemini_clip_lib.data_models.constants import (
    DEFAULT_MODEL,
    DEFAULT_TARGET_LANGUAGE,
    DEFAULT_TIMEOUT,
)
from gemini_clip_lib.data_models.options import (
    ActionInput,
    ExtensionOptions,
    ResolvedConfig,
)
from gemini_clip_lib.exceptions import MissingCredentialError, MissingInputError


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def resolve_text(raw: Union[ActionInput, Dict[str, Any], str, None]) -> str:
    """
    Coerce host input to a string.

    Accepts an :class:`ActionInput`, a mapping with a ``text`` key, or any
    other value (stringified).  Raises :class:`MissingInputError` when the
    result is empty.
    """
    if isinstance(raw, ActionInput):
        text = raw.text
    elif isinstance(raw, dict):
        text = raw.get("text")
    else:
        text = raw
    text = "" if text is None else str(text)
    if not text:
        raise MissingInputError("no input text")
    return text


def resolve_api_key(value: Any) -> str:
    api_key = "" if value is None else str(value).strip()
    if not api_key:
        raise MissingCredentialError("missing API key")
    return api_key


def resolve_model(value: Union[str, list, None]) -> str:
    model = _first(value)
    if not model or not str(model).strip():
        return DEFAULT_MODEL
    return str(model).strip()


def resolve_template(value: Optional[str], default: str) -> str:
    if value is None or not str(value).strip():
        return default
    return str(value)


def resolve_language(value: Union[str, list, None]) -> str:
    language = _first(value)
    if not language or not str(language).strip():
        return DEFAULT_TARGET_LANGUAGE
    return str(language).strip()


def resolve_config(
    options: Union[ExtensionOptions, Dict[str, Any], None],
    default_prompt: str,
    with_language: bool = False,
) -> ResolvedConfig:
    """
    Build the :class:`ResolvedConfig` of one invocation.

    Parameters
    ----------
    options : Union[ExtensionOptions, Dict[str, Any], None]
        Host options; dictionaries are validated into
        :class:`ExtensionOptions` first.
    default_prompt : str
        Template used when the configured one is empty.
    with_language : bool, default ``False``
        Whether to resolve the target language (translation flow).

    Raises
    ------
    MissingCredentialError
        When the API key is empty after trimming.
    """
    if options is None:
        options = ExtensionOptions()
    elif not isinstance(options, ExtensionOptions):
        options = ExtensionOptions.model_validate(options)

    return ResolvedConfig(
        api_key=resolve_api_key(options.apikey),
        model=resolve_model(options.model),
        prompt_template=resolve_template(options.prompt, default_prompt),
        target_language=resolve_language(options.tolang) if with_language else None,
        timeout=options.timeout or DEFAULT_TIMEOUT,
    )
