"""
Top-level definitions for the action architecture.

This module defines the abstract :class:`ActionInterface` every clipboard
action inherits from.  An action owns its host metadata (title, icon, option
descriptors), its default prompt and its generation parameters; the
interface supplies the shared request flow:

    validate -> build prompt -> build request -> call -> extract -> return

Two entry points are exposed.  :py:meth:`run` returns a typed
:class:`ActionResult`; :py:meth:`apply` is the host contract and always
returns a string, never raising, so the host can paste *something*.
"""

import abc
import logging
from typing import Any, Dict, List, Optional, Union

from gemini_clip_lib.client import GeminiClient
from gemini_clip_lib.core.prompt import build_prompt
from gemini_clip_lib.core.resolver import resolve_config, resolve_text
from gemini_clip_lib.data_models.constants import API_BASE_URL, AVAILABLE_MODELS
from gemini_clip_lib.data_models.generation import GenerationConfig
from gemini_clip_lib.data_models.options import (
    ActionInput,
    ExtensionOptions,
    ResolvedConfig,
)
from gemini_clip_lib.data_models.result import ActionResult
from gemini_clip_lib.exceptions import GeminiClipError, TransportError


class ActionInterface(abc.ABC):
    """
    Abstract base class for all actions.

    Sub-classes set the class attributes below and implement
    :py:meth:`generation_config`.

    Attributes
    ----------
    name : str
        Registry identifier (e.g. ``"translate"``).
    title : str
        Human-readable title shown by the host.
    icon : str
        Host icon reference.
    default_prompt : str
        Template used when the ``prompt`` option is empty.
    with_language : bool
        Whether the action substitutes ``{lang}``.

    Parameters
    ----------
    logger: Optional[logging.Logger]
        Logger used for diagnostics; defaults to the module logger.
    api: str
        Base URL of the API.
    """

    name: str = None
    title: str = None
    icon: str = None
    after: str = "paste-result"
    entitlements: List[str] = ["network"]
    default_prompt: str = ""
    prompt_label: str = "Prompt"
    prompt_description: str = (
        "Enter the prompt template using {input} as a placeholder for the text"
    )
    with_language: bool = False

    client_cls = GeminiClient

    def __init__(
        self, logger: Optional[logging.Logger] = None, api: str = API_BASE_URL
    ):
        self._logger = logger or logging.getLogger(__name__)
        self._api = api

    @abc.abstractmethod
    def generation_config(self) -> GenerationConfig:
        """Sampling parameters sent with every request of this action."""
        pass

    # ------------------------------------------------------------------ #
    def option_descriptors(self) -> List[Dict[str, Any]]:
        return [
            {
                "identifier": "apikey",
                "label": "API Key",
                "type": "string",
                "description": "Obtain API key from Google Cloud Console",
            },
            {
                "identifier": "model",
                "label": "model",
                "type": "multiple",
                "values": list(AVAILABLE_MODELS),
            },
            {
                "identifier": "prompt",
                "label": self.prompt_label,
                "type": "string",
                "defaultValue": self.default_prompt,
                "description": self.prompt_description,
            },
        ]

    def manifest(self) -> Dict[str, Any]:
        """Host-facing description of the action and its options."""
        return {
            "name": self.title,
            "icon": self.icon,
            "entitlements": list(self.entitlements),
            "options": self.option_descriptors(),
            "actions": [{"title": self.title, "after": self.after}],
        }

    # ------------------------------------------------------------------ #
    def resolve(
        self, options: Union[ExtensionOptions, Dict[str, Any], None]
    ) -> ResolvedConfig:
        return resolve_config(
            options,
            default_prompt=self.default_prompt,
            with_language=self.with_language,
        )

    def prompt(self, text: str, config: ResolvedConfig) -> str:
        return build_prompt(config.prompt_template, text, config.target_language)

    def run(
        self,
        input: Union[ActionInput, Dict[str, Any], str, None],
        options: Union[ExtensionOptions, Dict[str, Any], None] = None,
    ) -> ActionResult:
        """
        Execute the action and return a typed result.

        Library errors become :py:meth:`ActionResult.failure`; any other
        exception is reported as a transport error so nothing escapes.
        """
        try:
            text = resolve_text(input)
            config = self.resolve(options)
            self._logger.debug(
                "%s: model=%s timeout=%s", self.name, config.model, config.timeout
            )
            with self.client_cls(
                api_key=config.api_key,
                api=self._api,
                timeout=config.timeout,
                logger=self._logger,
            ) as client:
                generated = client.generate_text(
                    config.model, self.prompt(text, config), self.generation_config()
                )
        except GeminiClipError as exc:
            self._logger.error("Error generating content: %s", exc)
            return ActionResult.failure(exc)
        except Exception as exc:
            self._logger.exception("Unexpected error in action %s", self.name)
            return ActionResult.failure(TransportError(str(exc) or repr(exc)))
        self._logger.info("%s: generated %d characters", self.name, len(generated))
        return ActionResult.success(generated)

    def apply(
        self,
        input: Union[ActionInput, Dict[str, Any], str, None],
        options: Union[ExtensionOptions, Dict[str, Any], None] = None,
    ) -> str:
        """Host entry point: the string to paste in place of the selection."""
        return self.run(input, options).display()
