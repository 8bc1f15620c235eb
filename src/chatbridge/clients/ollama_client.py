"""Client for a local Ollama runtime. No credentials are needed."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import requests

from ..prompt import MessageType, Prompt
from ..response import AiResponse, Generation
from ..settings import OllamaSettings
from .base import AiClient

logger = logging.getLogger(__name__)


class OllamaClient(AiClient):
    provider = "ollama"

    def __init__(
        self,
        model: str = OllamaSettings.model,
        base_url: str = OllamaSettings.base_url,
        temperature: float = 0.7,
        timeout: float = 120,
    ):
        super().__init__(model=model, temperature=temperature, timeout=timeout)
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: OllamaSettings) -> "OllamaClient":
        return cls(model=settings.model, base_url=settings.base_url, temperature=settings.temperature)

    def _role(self, message_type: MessageType) -> str:
        # Ollama calls function results "tool"
        if message_type is MessageType.FUNCTION:
            return "tool"
        return message_type.value

    def generate(self, prompt: Prompt) -> AiResponse:
        payload = {
            "model": self.model,
            "messages": self._chat_messages(prompt),
            "stream": False,
            "options": {"temperature": self.temperature},
        }
        data = self._post_json(f"{self.base_url}/api/chat", payload)
        return self._to_ai_response(data, self._to_response)

    @staticmethod
    def _to_response(data: Dict[str, Any]) -> AiResponse:
        message = data.get("message") or {}
        generation = Generation(
            text=message.get("content"),
            info={"done": data.get("done"), "done_reason": data.get("done_reason")},
        )
        provider_output = {k: v for k, v in data.items() if k not in {"message", "done", "done_reason"}}
        return AiResponse(generations=[generation], provider_output=provider_output)

    def list_models(self) -> List[str]:
        try:
            payload = self._get_json(f"{self.base_url}/api/tags")
            return [m["name"] for m in payload.get("models") or []]
        except (requests.RequestException, LookupError, TypeError, AttributeError) as exc:
            logger.error("Ollama list_models failed: %s", exc)
            return []
