from gemini_clip_lib.actions.action_interface import ActionInterface
from gemini_clip_lib.data_models.constants import DEFAULT_IMPROVE_WRITING_PROMPT
from gemini_clip_lib.data_models.generation import GenerationConfig


class ImproveWritingAction(ActionInterface):
    """
    Rewrite the selection with corrected spelling, grammar and punctuation.

    A low temperature keeps the rewrite close to the original.
    """

    name = "improve-writing"
    title = "Gemini Improve Writing"
    icon = "iconify:tabler:file-text-ai"
    default_prompt = DEFAULT_IMPROVE_WRITING_PROMPT
    prompt_label = "Improve Writing Prompt"

    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            temperature=0.3,
            max_output_tokens=1024,
            top_p=0.95,
            top_k=40,
        )
