"""Client for a Hugging Face text-generation inference endpoint.

The endpoint takes a single text input, so the prompt's messages are
flattened with :attr:`Prompt.contents` before sending.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..errors import MissingCredentialsError
from ..prompt import Prompt
from ..response import AiResponse, Generation
from ..settings import HuggingFaceSettings
from .base import AiClient


class HuggingFaceClient(AiClient):
    provider = "huggingface"

    def __init__(
        self,
        api_key: str | None,
        url: str | None,
        model: str | None = None,
        max_new_tokens: int = HuggingFaceSettings.max_new_tokens,
        temperature: float = 0.7,
        timeout: float = 60,
    ):
        if not api_key:
            raise MissingCredentialsError("Missing HUGGINGFACE_API_KEY env variable or parameter")
        if not url:
            raise MissingCredentialsError("Missing Hugging Face inference endpoint URL (set SPRING_AI_HUGGINGFACE_URL)")
        super().__init__(model=model or url, temperature=temperature, timeout=timeout)
        self.api_key = api_key
        self.url = url
        self.max_new_tokens = max_new_tokens

    @classmethod
    def from_settings(cls, settings: HuggingFaceSettings) -> "HuggingFaceClient":
        return cls(
            api_key=settings.api_key,
            url=settings.url,
            model=settings.model,
            max_new_tokens=settings.max_new_tokens,
            temperature=settings.temperature,
        )

    def generate(self, prompt: Prompt) -> AiResponse:
        payload = {
            "inputs": prompt.contents,
            "parameters": {
                "max_new_tokens": self.max_new_tokens,
                "temperature": self.temperature,
                "return_full_text": False,
                "details": True,
            },
        }
        headers = {"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"}
        data = self._post_json(self.url, payload, headers=headers)
        return self._to_ai_response(data, self._to_response)

    def _to_response(self, data: Any) -> AiResponse:
        items: List[Dict[str, Any]] = data if isinstance(data, list) else [data]
        generations = [
            Generation(text=item.get("generated_text"), info=item.get("details") or {})
            for item in items
            if isinstance(item, dict)
        ]
        return AiResponse(generations=generations, provider_output={"endpoint": self.url})

    def list_models(self) -> List[str]:
        return [self.model]
