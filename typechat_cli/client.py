"""OpenAI-compatible chat clients: OpenAI, LM Studio and Azure OpenAI."""

import re
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

import requests
from requests.exceptions import RequestException
from openai import OpenAI

from typechat_cli.constants import DEFAULT_TEMPERATURE, OPENAI_BASE_URL

_CHAT_COMPLETIONS_SUFFIX = "/chat/completions"
_DEPLOYMENT_RE = re.compile(r"/deployments/([^/]+)")


def to_sdk_base_url(endpoint: Optional[str]) -> str:
    """
    Reduce an endpoint to the base URL the openai SDK expects.

    OPENAI_ENDPOINT is usually given as the full chat completions URL
    (https://api.openai.com/v1/chat/completions); the SDK appends that path itself.
    """
    if not endpoint:
        return OPENAI_BASE_URL
    url = endpoint.rstrip("/")
    if url.endswith(_CHAT_COMPLETIONS_SUFFIX):
        url = url[: -len(_CHAT_COMPLETIONS_SUFFIX)]
    return url


def deployment_name(endpoint: str) -> str:
    """The Azure deployment named in the endpoint path; it fixes the model."""
    match = _DEPLOYMENT_RE.search(urlsplit(endpoint).path)
    return match.group(1) if match else "(unknown)"


class OpenAIClient:
    """
    Client for the OpenAI chat completions API.

    Any OpenAI-compatible server (LM Studio, vLLM, ...) works via base_url.
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        api_key: str,
        organization: Optional[str] = None,
    ):
        self.base_url = to_sdk_base_url(base_url)
        self.model = model
        self._client = OpenAI(
            base_url=self.base_url,
            api_key=api_key,
            organization=organization,
            max_retries=0,
        )

    def describe(self) -> str:
        return f"OpenAI ({self.base_url}) · model {self.model}"

    def complete(
        self,
        messages: List[Dict[str, Any]],
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        """
        Send a chat completion and return the raw message text.

        Raises:
            RuntimeError: On empty response or API error
        """
        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
            )
        except Exception as e:
            raise RuntimeError(f"Inference error: {e}") from e
        content = resp.choices[0].message.content if resp.choices else None
        if not content:
            raise RuntimeError("Empty response from model")
        return content


class AzureOpenAIClient:
    """
    Client for an Azure OpenAI deployment.

    The endpoint is the full deployment URL, including the api-version query, e.g.
    https://<resource>.openai.azure.com/openai/deployments/<name>/chat/completions?api-version=2023-05-15
    """

    def __init__(self, endpoint: str, api_key: str):
        self.endpoint = endpoint
        self.api_key = api_key
        self.deployment = deployment_name(endpoint)

    def describe(self) -> str:
        base = urlsplit(self.endpoint)
        return f"Azure OpenAI ({base.scheme}://{base.netloc}) · deployment {self.deployment}"

    def complete(
        self,
        messages: List[Dict[str, Any]],
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        """Send a chat completion to the deployment and return the message text."""
        payload = {
            "messages": messages,
            "temperature": temperature,
            "n": 1,
        }
        try:
            resp = requests.post(
                self.endpoint,
                json=payload,
                headers={"api-key": self.api_key},
            )
            resp.raise_for_status()
            data = resp.json()
        except (RequestException, ValueError) as e:
            raise RuntimeError(f"Inference error: {e}") from e
        choices = data.get("choices") if isinstance(data, dict) else None
        first = choices[0] if isinstance(choices, list) and choices else None
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str) or not content:
            raise RuntimeError("Empty response from model")
        return content
