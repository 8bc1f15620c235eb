"""Backend configuration.

Each backend has a dataclass of its settings plus ``from_env`` reading the
environment variables that select and authenticate it. Entry points load a
``.env`` file first (``python-dotenv``) so these see its values.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class OpenAISettings:
    api_key: str | None = None
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.7

    @classmethod
    def from_env(cls) -> "OpenAISettings":
        return cls(
            api_key=os.getenv("SPRING_AI_OPENAI_API_KEY"),
            base_url=os.getenv("SPRING_AI_OPENAI_BASE_URL") or cls.base_url,
            model=os.getenv("SPRING_AI_OPENAI_MODEL") or cls.model,
            temperature=_env_float("SPRING_AI_OPENAI_TEMPERATURE", cls.temperature),
        )


@dataclass
class AzureOpenAISettings:
    api_key: str | None = None
    endpoint: str | None = None
    model: str = "gpt-35-turbo"  # deployment name
    api_version: str = "2023-05-15"
    temperature: float = 0.7

    @classmethod
    def from_env(cls) -> "AzureOpenAISettings":
        return cls(
            api_key=os.getenv("SPRING_AI_AZURE_OPENAI_API_KEY"),
            endpoint=os.getenv("SPRING_AI_AZURE_OPENAI_ENDPOINT"),
            model=os.getenv("SPRING_AI_AZURE_OPENAI_MODEL") or cls.model,
            api_version=os.getenv("SPRING_AI_AZURE_OPENAI_API_VERSION") or cls.api_version,
            temperature=_env_float("SPRING_AI_AZURE_OPENAI_TEMPERATURE", cls.temperature),
        )


@dataclass
class HuggingFaceSettings:
    api_key: str | None = None
    url: str | None = None
    model: str | None = None  # label only; the endpoint decides the model
    max_new_tokens: int = 1000
    temperature: float = 0.7

    @classmethod
    def from_env(cls) -> "HuggingFaceSettings":
        return cls(
            api_key=os.getenv("HUGGINGFACE_API_KEY"),
            url=os.getenv("SPRING_AI_HUGGINGFACE_URL"),
            max_new_tokens=_env_int("SPRING_AI_HUGGINGFACE_MAX_NEW_TOKENS", cls.max_new_tokens),
        )


@dataclass
class OllamaSettings:
    base_url: str = "http://localhost:11434"
    model: str = "llama2"
    temperature: float = 0.7

    @classmethod
    def from_env(cls) -> "OllamaSettings":
        return cls(
            base_url=os.getenv("SPRING_AI_OLLAMA_BASE_URL") or cls.base_url,
            model=os.getenv("SPRING_AI_OLLAMA_MODEL") or cls.model,
        )


@dataclass
class RuntimeSettings:
    """Mutable runtime selection controlled through the HTTP API."""

    provider: str = "openai"
    model: str | None = None  # None keeps the backend's configured model
    temperature: float | None = None

    @classmethod
    def from_env(cls) -> "RuntimeSettings":
        return cls(provider=os.getenv("AI_PROVIDER", "openai").lower())

    def to_dict(self):
        return asdict(self)
