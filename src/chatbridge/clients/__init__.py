"""Factory helpers for AI clients."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from ..settings import AzureOpenAISettings, HuggingFaceSettings, OllamaSettings, OpenAISettings
from .azure_openai_client import AzureOpenAIClient
from .base import AiClient
from .huggingface_client import HuggingFaceClient
from .ollama_client import OllamaClient
from .openai_client import OpenAIClient

__all__ = [
    "get_ai_client",
    "AiClient",
    "OpenAIClient",
    "AzureOpenAIClient",
    "HuggingFaceClient",
    "OllamaClient",
]

logger = logging.getLogger(__name__)

_BACKENDS = {
    "openai": (OpenAISettings, OpenAIClient),
    "azure-openai": (AzureOpenAISettings, AzureOpenAIClient),
    "huggingface": (HuggingFaceSettings, HuggingFaceClient),
    "ollama": (OllamaSettings, OllamaClient),
}

_ALIASES = {
    "azure": "azure-openai",
    "azure_openai": "azure-openai",
    "hf": "huggingface",
    "hugging-face": "huggingface",
}


def normalize_provider(provider: str) -> str:
    provider = provider.strip().lower()
    return _ALIASES.get(provider, provider)


def get_ai_client(provider: str | None = None, **overrides: Any) -> AiClient:
    """Return an instantiated client for the given provider.

    Settings come from the environment; keyword ``overrides`` (``model``,
    ``temperature``, ``api_key``...) replace individual fields. ``None``
    values are ignored so callers can pass optional selections straight
    through.
    """

    provider = normalize_provider(provider or os.getenv("AI_PROVIDER", "openai"))
    if provider not in _BACKENDS:
        raise ValueError(f"Unknown AI provider: {provider}")

    settings_cls, client_cls = _BACKENDS[provider]
    settings = settings_cls.from_env()
    changes = {k: v for k, v in overrides.items() if v is not None}
    if changes:
        settings = dataclasses.replace(settings, **changes)
    logger.info("[client] provider=%s model=%s", provider, getattr(settings, "model", None))
    return client_cls.from_settings(settings)
