"""Shared fixtures: fake chat clients and schema files."""

import json
from typing import Any, Dict, List, Union

import pytest

SENTIMENT_SCHEMA = '''
from typing_extensions import Literal, TypedDict


class ResponseShape(TypedDict):
    sentiment: Literal["positive", "negative", "neutral"]
    hasTheWordGoose: bool


class Other(TypedDict):
    label: str
'''


class FakeClient:
    """Stands in for a chat client; replays canned replies in order."""

    def __init__(self, replies: List[Union[str, Dict[str, Any], Exception]]):
        self.replies = list(replies)
        self.calls: List[List[Dict[str, Any]]] = []

    def describe(self) -> str:
        return "Fake backend"

    def complete(self, messages, temperature: float = 0.0) -> str:
        self.calls.append(messages)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            return json.dumps(reply)
        return reply


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "sentiment_schema.py"
    path.write_text(SENTIMENT_SCHEMA)
    return path


@pytest.fixture
def fake_backend(monkeypatch):
    """Install a FakeClient as the CLI's backend. Call with the replies to use."""

    def install(*replies):
        client = FakeClient(list(replies))
        monkeypatch.setattr(
            "typechat_cli.cli.create_client", lambda env, model=None: client
        )
        return client

    return install


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test in an empty directory so no stray .env is loaded."""
    monkeypatch.chdir(tmp_path)


BACKEND_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_ENDPOINT",
    "OPENAI_ORGANIZATION",
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_ENDPOINT",
    "OLLAMA_ENDPOINT",
    "OLLAMA_MODEL",
)


@pytest.fixture
def clean_backend_env(monkeypatch):
    """Clear backend variables; anything a .env sets during the test is undone after."""
    for var in BACKEND_VARS:
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)


class FakeHttpResponse:
    def __init__(self, payload):
        self.payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self.payload


@pytest.fixture
def ollama_replies(monkeypatch):
    """Answer Ollama chat requests with the given payload; returns the posted URLs."""

    def install(payload):
        urls = []

        def fake_post(url, json=None, **kwargs):
            urls.append(url)
            return FakeHttpResponse(payload)

        monkeypatch.setattr("requests.post", fake_post)
        return urls

    return install
