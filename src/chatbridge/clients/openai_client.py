from __future__ import annotations

import logging
from typing import Any, Dict, List

import requests

from ..errors import MissingCredentialsError
from ..prompt import Prompt
from ..response import AiResponse, Generation
from ..settings import OpenAISettings
from .base import AiClient

logger = logging.getLogger(__name__)

_PROVIDER_OUTPUT_KEYS = ("id", "object", "created", "model", "usage")


class OpenAIClient(AiClient):
    """Client for the OpenAI-compatible Chat Completion endpoint.

    Talks plain REST through ``requests``. Any endpoint that speaks the
    OpenAI chat-completions format works by passing a different
    ``base_url`` and ``api_key``.
    """

    provider = "openai"

    def __init__(
        self,
        api_key: str | None,
        model: str = OpenAISettings.model,
        base_url: str = OpenAISettings.base_url,
        temperature: float = 0.7,
        timeout: float = 60,
    ):
        super().__init__(model=model, temperature=temperature, timeout=timeout)
        if not api_key:
            raise MissingCredentialsError(
                "Missing API key for OpenAI-compatible endpoint (set SPRING_AI_OPENAI_API_KEY)"
            )
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: OpenAISettings) -> "OpenAIClient":
        return cls(
            api_key=settings.api_key,
            model=settings.model,
            base_url=settings.base_url,
            temperature=settings.temperature,
        )

    # ------------------------------------------------------------------
    def _url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _params(self) -> Dict[str, str] | None:
        return None

    def _payload(self, prompt: Prompt) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": self._chat_messages(prompt),
            "temperature": self.temperature,
        }

    # ------------------------------------------------------------------
    def generate(self, prompt: Prompt) -> AiResponse:
        data = self._post_json(self._url(), self._payload(prompt), headers=self._headers(), params=self._params())
        return self._to_ai_response(data, self._to_response)

    @staticmethod
    def _to_response(data: Dict[str, Any]) -> AiResponse:
        generations = []
        for choice in data.get("choices") or []:
            message = choice.get("message") or {}
            generations.append(
                Generation(
                    text=message.get("content"),
                    info={
                        "finish_reason": choice.get("finish_reason"),
                        "index": choice.get("index"),
                        "role": message.get("role"),
                    },
                )
            )
        provider_output = {k: data[k] for k in _PROVIDER_OUTPUT_KEYS if k in data}
        return AiResponse(generations=generations, provider_output=provider_output)

    def list_models(self) -> List[str]:
        url = f"{self.base_url}/models"
        try:
            payload = self._get_json(url, headers={"Authorization": f"Bearer {self.api_key}"})
            return [m["id"] for m in payload.get("data") or []]
        except (LookupError, TypeError, AttributeError) as exc:
            logger.error("OpenAI /models returned an unexpected body: %s", exc)
            return []
        except requests.RequestException as exc:
            if getattr(exc, "response", None) is not None:
                logger.error("OpenAI /models failed %s: %s", exc.response.status_code, exc.response.text)
            else:
                logger.error("OpenAI /models failed: %s", exc)
            return []
