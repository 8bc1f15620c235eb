import pytest
import requests

from chatbridge.clients import AzureOpenAIClient, OpenAIClient
from chatbridge.errors import MissingCredentialsError, ProviderRequestError
from chatbridge.prompt import AssistantMessage, Prompt, SystemMessage, UserMessage

from conftest import FakeResponse

COMPLETION = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-3.5-turbo-0613",
    "choices": [
        {"index": 0, "message": {"role": "assistant", "content": "Paris"}, "finish_reason": "stop"},
        {"index": 1, "message": {"role": "assistant", "content": "Paris, France"}, "finish_reason": "length"},
    ],
    "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
}


def test_openai_requires_api_key():
    with pytest.raises(MissingCredentialsError):
        OpenAIClient(api_key=None)


def test_openai_request_shape(fake_post):
    fake_post.response = FakeResponse(COMPLETION)
    client = OpenAIClient(api_key="sk-test", model="gpt-4", base_url="https://proxy.example/v1/", temperature=0.2)
    prompt = Prompt.of(SystemMessage("terse"), UserMessage("capital of France?"), AssistantMessage("Paris"), UserMessage("sure?"))

    client.generate(prompt)

    call = fake_post.last
    assert call["url"] == "https://proxy.example/v1/chat/completions"
    assert call["headers"]["Authorization"] == "Bearer sk-test"
    assert call["params"] is None
    assert call["json"]["model"] == "gpt-4"
    assert call["json"]["temperature"] == 0.2
    assert [(m["role"], m["content"]) for m in call["json"]["messages"]] == [
        ("system", "terse"),
        ("user", "capital of France?"),
        ("assistant", "Paris"),
        ("user", "sure?"),
    ]


def test_openai_response_mapping(fake_post):
    fake_post.response = FakeResponse(COMPLETION)
    client = OpenAIClient(api_key="sk-test")

    response = client.generate(Prompt.from_text("capital of France?"))

    assert [g.text for g in response.generations] == ["Paris", "Paris, France"]
    assert response.generations[1].info == {"finish_reason": "length", "index": 1, "role": "assistant"}
    assert response.provider_output["id"] == "chatcmpl-123"
    assert response.provider_output["usage"]["total_tokens"] == 12
    assert "choices" not in response.provider_output


def test_openai_generate_text(fake_post):
    fake_post.response = FakeResponse(COMPLETION)
    assert OpenAIClient(api_key="sk-test").generate_text("capital of France?") == "Paris"


def test_openai_http_error_surfaces_status(fake_post):
    fake_post.response = FakeResponse({}, status_code=401, text="invalid api key")
    with pytest.raises(ProviderRequestError) as info:
        OpenAIClient(api_key="sk-bad").generate_text("hi")
    assert info.value.status_code == 401


def test_openai_list_models(fake_get):
    fake_get.response = FakeResponse({"data": [{"id": "gpt-4"}, {"id": "gpt-3.5-turbo"}]})
    client = OpenAIClient(api_key="sk-test")
    assert client.list_models() == ["gpt-4", "gpt-3.5-turbo"]
    assert fake_get.last["url"] == "https://api.openai.com/v1/models"


def test_openai_list_models_failure_is_empty(fake_get):
    fake_get.response = requests.ConnectionError("offline")
    assert OpenAIClient(api_key="sk-test").list_models() == []


def test_azure_requires_key_and_endpoint():
    with pytest.raises(MissingCredentialsError, match="API_KEY"):
        AzureOpenAIClient(api_key=None, endpoint="https://res.openai.azure.com")
    with pytest.raises(MissingCredentialsError, match="ENDPOINT"):
        AzureOpenAIClient(api_key="az-key", endpoint=None)


def test_azure_addresses_deployment(fake_post):
    fake_post.response = FakeResponse(COMPLETION)
    client = AzureOpenAIClient(
        api_key="az-key",
        endpoint="https://res.openai.azure.com/",
        deployment_name="chat-prod",
        api_version="2024-02-01",
    )

    response = client.generate(Prompt.of(SystemMessage("terse"), UserMessage("hi")))

    call = fake_post.last
    assert call["url"] == "https://res.openai.azure.com/openai/deployments/chat-prod/chat/completions"
    assert call["params"] == {"api-version": "2024-02-01"}
    assert call["headers"]["api-key"] == "az-key"
    assert "Authorization" not in call["headers"]
    assert [m["role"] for m in call["json"]["messages"]] == ["system", "user"]
    assert response.generation.text == "Paris"
    assert client.list_models() == ["chat-prod"]


def test_openai_unexpected_content_shape_is_provider_error(fake_post):
    body = dict(COMPLETION, choices=[{"index": 0, "message": {"role": "assistant", "content": [{"type": "text", "text": "hi"}]}}])
    fake_post.response = FakeResponse(body)
    with pytest.raises(ProviderRequestError, match="unexpected response shape"):
        OpenAIClient(api_key="sk-test").generate_text("hi")


def test_openai_non_object_body_is_provider_error(fake_post):
    fake_post.response = FakeResponse(["not", "a", "completion"])
    with pytest.raises(ProviderRequestError):
        OpenAIClient(api_key="sk-test").generate(Prompt.from_text("hi"))


def test_openai_list_models_uses_client_timeout(fake_get):
    fake_get.response = FakeResponse({"data": [{"id": "gpt-4"}]})
    client = OpenAIClient(api_key="sk-test", timeout=3)
    client.list_models()
    assert fake_get.last["timeout"] == 3


def test_openai_list_models_odd_bodies_are_empty(fake_get):
    client = OpenAIClient(api_key="sk-test")
    fake_get.response = FakeResponse({"data": None})
    assert client.list_models() == []
    fake_get.response = FakeResponse({"data": [{"name": "no-id"}]})
    assert client.list_models() == []
