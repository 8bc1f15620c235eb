import os

import pytest
import requests

_ENV_PREFIXES = ("SPRING_AI_",)
_ENV_NAMES = {"HUGGINGFACE_API_KEY", "AI_PROVIDER"}


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=""):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class Recorder:
    """Stands in for requests.post / requests.get and remembers every call."""

    def __init__(self, response=None):
        self.calls = []
        self.response = response if response is not None else FakeResponse({})

    def __call__(self, url, json=None, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "params": params, "timeout": timeout})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIXES) or name in _ENV_NAMES:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_post(monkeypatch):
    recorder = Recorder()
    monkeypatch.setattr(requests, "post", recorder)
    return recorder


@pytest.fixture
def fake_get(monkeypatch):
    recorder = Recorder()
    monkeypatch.setattr(requests, "get", recorder)
    return recorder
