from typing import Any, Dict, List

from gemini_clip_lib.actions.action_interface import ActionInterface
from gemini_clip_lib.data_models.constants import (
    DEFAULT_TRANSLATE_PROMPT,
    TARGET_LANGUAGES,
)
from gemini_clip_lib.data_models.generation import GenerationConfig


class TranslateAction(ActionInterface):
    """
    Translate the selection into the language chosen in the ``tolang`` option.
    """

    name = "translate"
    title = "Gemini Translate"
    icon = "iconify:mdi:alpha-e-circle"
    default_prompt = DEFAULT_TRANSLATE_PROMPT
    prompt_label = "Translate Prompt"
    prompt_description = (
        "Enter the prompt template using {input} {lang} as a placeholder for the text"
    )
    with_language = True

    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            temperature=1.0,
            max_output_tokens=8192,
            top_p=0.95,
            top_k=64,
            stop_sequences=["Title"],
        )

    def option_descriptors(self) -> List[Dict[str, Any]]:
        return super().option_descriptors() + [
            {
                "identifier": "tolang",
                "label": "Language",
                "type": "multiple",
                "values": list(TARGET_LANGUAGES),
                "description": "The language to be translated",
            }
        ]
