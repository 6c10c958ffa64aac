import logging
from typing import Optional

from gemini_clip_lib.utils.http import HttpRequester
from gemini_clip_lib.data_models.constants import API_BASE_URL, DEFAULT_TIMEOUT
from gemini_clip_lib.data_models.generation import (
    GenerateContentRequest,
    GenerationConfig,
)
from gemini_clip_lib.services.generation import GenerateContentService


class GeminiClient:

    def __init__(
        self,
        api_key: str,
        api: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = 0,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = api.rstrip("/")
        self.timeout = timeout
        self.retries = retries
        self.logger = logger or logging.getLogger(__name__)
        self.http = HttpRequester(
            base_url=self.base_url,
            api_key=api_key,
            timeout=self.timeout,
            retries=self.retries,
            logger=self.logger,
        )

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "GeminiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    def generate_content(
        self,
        model: str,
        payload: GenerateContentRequest,
    ) -> str:
        return GenerateContentService(self.http, self.logger).generate(
            model, payload
        )

    # ------------------------------------------------------------------ #
    def generate_text(
        self,
        model: str,
        prompt: str,
        generation_config: GenerationConfig,
    ) -> str:
        payload = GenerateContentRequest.from_prompt(prompt, generation_config)
        return self.generate_content(model, payload)
