"""Provider-agnostic chat clients for OpenAI, Azure OpenAI, Hugging Face and Ollama."""

from .clients import (
    AiClient,
    AzureOpenAIClient,
    HuggingFaceClient,
    OllamaClient,
    OpenAIClient,
    get_ai_client,
)
from .errors import AiClientError, EmptyResponseError, MissingCredentialsError, ProviderRequestError
from .prompt import (
    AssistantMessage,
    FunctionMessage,
    Message,
    MessageType,
    Prompt,
    SystemMessage,
    UserMessage,
)
from .response import AiResponse, Generation

__version__ = "0.1.0"

__all__ = [
    "AiClient",
    "AiClientError",
    "AiResponse",
    "AssistantMessage",
    "AzureOpenAIClient",
    "EmptyResponseError",
    "FunctionMessage",
    "Generation",
    "HuggingFaceClient",
    "Message",
    "MessageType",
    "MissingCredentialsError",
    "OllamaClient",
    "OpenAIClient",
    "Prompt",
    "ProviderRequestError",
    "SystemMessage",
    "UserMessage",
    "get_ai_client",
]
