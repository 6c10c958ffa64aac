"""Prompt templating."""

from typing import Optional

from gemini_clip_lib.data_models.constants import INPUT_PLACEHOLDER, LANG_PLACEHOLDER


def build_prompt(template: str, text: str, language: Optional[str] = None) -> str:
    """
    Substitute the placeholders of ``template``.

    Every ``{input}`` is replaced with ``text`` and, when ``language`` is
    given, every ``{lang}`` with ``language``.  This is a plain string
    replacement: other braces are left untouched and nothing is escaped.
    ``{lang}`` is substituted first so a ``{lang}`` token inside the user
    text survives verbatim.
    """
    prompt = template
    if language is not None:
        prompt = prompt.replace(LANG_PLACEHOLDER, language)
    return prompt.replace(INPUT_PLACEHOLDER, text)
