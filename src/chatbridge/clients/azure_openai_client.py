"""Azure OpenAI client – same chat format as OpenAI, different addressing.

Azure routes by deployment name instead of model id, authenticates with an
``api-key`` header and pins the API version as a query parameter.
"""

from __future__ import annotations

from typing import Dict, List

from ..errors import MissingCredentialsError
from ..settings import AzureOpenAISettings
from .openai_client import OpenAIClient


class AzureOpenAIClient(OpenAIClient):
    provider = "azure-openai"

    def __init__(
        self,
        api_key: str | None,
        endpoint: str | None,
        deployment_name: str = AzureOpenAISettings.model,
        api_version: str = AzureOpenAISettings.api_version,
        temperature: float = 0.7,
        timeout: float = 60,
    ):
        if not api_key:
            raise MissingCredentialsError("Missing SPRING_AI_AZURE_OPENAI_API_KEY env variable or parameter")
        if not endpoint:
            raise MissingCredentialsError("Missing SPRING_AI_AZURE_OPENAI_ENDPOINT env variable or parameter")
        super().__init__(
            api_key=api_key,
            model=deployment_name,
            base_url=endpoint,
            temperature=temperature,
            timeout=timeout,
        )
        self.api_version = api_version

    @classmethod
    def from_settings(cls, settings: AzureOpenAISettings) -> "AzureOpenAIClient":
        return cls(
            api_key=settings.api_key,
            endpoint=settings.endpoint,
            deployment_name=settings.model,
            api_version=settings.api_version,
            temperature=settings.temperature,
        )

    @property
    def deployment_name(self) -> str:
        return self.model

    def _url(self) -> str:
        return f"{self.base_url}/openai/deployments/{self.deployment_name}/chat/completions"

    def _headers(self) -> Dict[str, str]:
        return {"api-key": self.api_key, "Content-Type": "application/json"}

    def _params(self) -> Dict[str, str]:
        return {"api-version": self.api_version}

    def list_models(self) -> List[str]:
        # A client is bound to one deployment
        return [self.deployment_name]
