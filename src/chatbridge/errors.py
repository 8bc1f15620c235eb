from __future__ import annotations


class AiClientError(RuntimeError):
    """Base error for anything raised by a chat client."""


class MissingCredentialsError(AiClientError):
    pass


class ProviderRequestError(AiClientError):
    """The provider call failed: transport error, non-2xx status or bad body."""

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.status_code = status_code
        label = f"{provider} request failed"
        if status_code is not None:
            label += f" ({status_code})"
        super().__init__(f"{label}: {message}")


class EmptyResponseError(AiClientError):
    pass
