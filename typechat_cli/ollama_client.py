"""Ollama API client: native chat API in JSON mode."""

from typing import Any, Dict, List

import requests
from requests.exceptions import RequestException

from typechat_cli.constants import DEFAULT_TEMPERATURE

_CHAT_PATH = "/api/chat"


class OllamaClient:
    """
    Client for Ollama's native API.

    Requests use `format: "json"` so the model is constrained to emit JSON;
    shaping it to the schema is left to the translator.
    """

    def __init__(self, base_url: str, model: str):
        url = base_url.rstrip("/")
        if url.endswith(_CHAT_PATH):
            url = url[: -len(_CHAT_PATH)]
        self.base_url = url
        self.model = model

    def describe(self) -> str:
        return f"Ollama ({self.base_url}) · model {self.model}"

    def complete(
        self,
        messages: List[Dict[str, Any]],
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        """
        Send a non-streaming chat request and return the message text.

        Raises:
            RuntimeError: On empty response or API error
        """
        payload = {
            "model": self.model,
            "messages": messages,
            "stream": False,
            "format": "json",
            "options": {"temperature": temperature},
        }
        try:
            resp = requests.post(f"{self.base_url}{_CHAT_PATH}", json=payload)
            resp.raise_for_status()
            data = resp.json()
        except (RequestException, ValueError) as e:
            raise RuntimeError(f"Inference error: {e}") from e
        message = data.get("message") if isinstance(data, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str) or not content:
            raise RuntimeError("Empty response from model")
        return content
