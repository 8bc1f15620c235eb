"""Common interface for all AI provider clients.

Every backend turns a :class:`~chatbridge.prompt.Prompt` into an
:class:`~chatbridge.response.AiResponse`. Callers only ever talk to
:class:`AiClient`, so swapping OpenAI for Azure, Hugging Face or a local
Ollama runtime is a configuration change.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List

import requests

from ..errors import EmptyResponseError, ProviderRequestError
from ..prompt import MessageType, Prompt
from ..response import AiResponse

logger = logging.getLogger(__name__)


class AiClient(ABC):
    """Abstract base class for chat model clients."""

    provider = "base"

    def __init__(self, model: str | None, temperature: float = 0.7, timeout: float = 60):
        self.model = model
        self.temperature = temperature
        self.timeout = timeout

    def generate_text(self, message: str) -> str:
        """Send a single user message and return the first generation's text."""
        response = self.generate(Prompt.from_text(message))
        generation = response.generation
        if generation is None:
            raise EmptyResponseError(f"{self.provider} returned no generations")
        return generation.text

    @abstractmethod
    def generate(self, prompt: Prompt) -> AiResponse:  # noqa: D401
        """Send the prompt to the provider and return its candidates."""
        ...

    def list_models(self) -> List[str]:  # noqa: D401
        """Return list of available model names (best effort)."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers shared by the HTTP backends
    # ------------------------------------------------------------------
    def _role(self, message_type: MessageType) -> str:
        return message_type.value

    def _chat_messages(self, prompt: Prompt) -> List[Dict[str, Any]]:
        """Role/content dicts in prompt order."""
        out = []
        for msg in prompt.messages:
            entry: Dict[str, Any] = {"role": self._role(msg.message_type), "content": msg.content}
            if msg.properties.get("name"):
                entry["name"] = msg.properties["name"]
            out.append(entry)
        return out

    def _post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Dict[str, str] | None = None,
        params: Dict[str, str] | None = None,
    ) -> Any:
        logger.debug("[%s] POST %s model=%s", self.provider, url, self.model)
        try:
            resp = requests.post(url, json=payload, headers=headers, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            body = exc.response.text if exc.response is not None else str(exc)
            logger.error("[%s] POST %s failed %s: %s", self.provider, url, status, body)
            raise ProviderRequestError(self.provider, body, status_code=status) from exc
        except requests.RequestException as exc:
            logger.error("[%s] POST %s failed: %s", self.provider, url, exc)
            raise ProviderRequestError(self.provider, str(exc)) from exc
        except ValueError as exc:
            logger.error("[%s] POST %s returned a non-JSON body", self.provider, url)
            raise ProviderRequestError(self.provider, f"invalid JSON body: {exc}") from exc
        logger.debug("[%s] response=%s", self.provider, data)
        return data

    def _to_ai_response(self, data: Any, mapper: Callable[[Any], AiResponse]) -> AiResponse:
        """Map a decoded body; a body of the wrong shape is a provider failure."""
        try:
            return mapper(data)
        except (TypeError, AttributeError, LookupError, ValueError) as exc:
            logger.error("[%s] unexpected response shape: %s", self.provider, exc)
            raise ProviderRequestError(self.provider, f"unexpected response shape: {exc}") from exc

    def _get_json(self, url: str, headers: Dict[str, str] | None = None, params: Dict[str, str] | None = None) -> Any:
        resp = requests.get(url, headers=headers, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()
