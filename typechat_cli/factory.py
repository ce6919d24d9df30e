"""Client factory: backend selection from environment variables."""

from typing import Mapping, Optional, Union

from typechat_cli.client import AzureOpenAIClient, OpenAIClient
from typechat_cli.constants import (
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_OPENAI_MODEL,
    ENV_AZURE_API_KEY,
    ENV_AZURE_ENDPOINT,
    ENV_OLLAMA_ENDPOINT,
    ENV_OLLAMA_MODEL,
    ENV_OPENAI_API_KEY,
    ENV_OPENAI_ENDPOINT,
    ENV_OPENAI_MODEL,
    ENV_OPENAI_ORGANIZATION,
)
from typechat_cli.ollama_client import OllamaClient

LLMClient = Union[OpenAIClient, AzureOpenAIClient, OllamaClient]


def uses_ollama(env: Mapping[str, str]) -> bool:
    return bool(env.get(ENV_OLLAMA_ENDPOINT))


def resolve_model(env: Mapping[str, str], requested: Optional[str] = None) -> str:
    """
    Pick the model name.

    An explicit -m/--model wins, then OLLAMA_MODEL or OPENAI_MODEL (whichever
    matches the selected backend), then the backend default.
    """
    if requested:
        return requested
    if uses_ollama(env):
        return env.get(ENV_OLLAMA_MODEL) or DEFAULT_OLLAMA_MODEL
    return env.get(ENV_OPENAI_MODEL) or DEFAULT_OPENAI_MODEL


def create_client(env: Mapping[str, str], model: Optional[str] = None) -> LLMClient:
    """
    Create a chat client for whichever backend the environment configures.

    Order: OLLAMA_ENDPOINT, then OPENAI_API_KEY, then
    AZURE_OPENAI_API_KEY + AZURE_OPENAI_ENDPOINT.

    Raises:
        RuntimeError: If no backend is configured
    """
    model_name = resolve_model(env, model)

    if uses_ollama(env):
        return OllamaClient(base_url=env[ENV_OLLAMA_ENDPOINT], model=model_name)

    api_key = env.get(ENV_OPENAI_API_KEY)
    if api_key:
        return OpenAIClient(
            base_url=env.get(ENV_OPENAI_ENDPOINT),
            model=model_name,
            api_key=api_key,
            organization=env.get(ENV_OPENAI_ORGANIZATION) or None,
        )

    azure_key = env.get(ENV_AZURE_API_KEY)
    azure_endpoint = env.get(ENV_AZURE_ENDPOINT)
    if azure_key and azure_endpoint:
        return AzureOpenAIClient(endpoint=azure_endpoint, api_key=azure_key)

    raise RuntimeError(
        "No language model configured. Set "
        f"{ENV_OPENAI_API_KEY}, {ENV_OLLAMA_ENDPOINT}, or "
        f"{ENV_AZURE_API_KEY} and {ENV_AZURE_ENDPOINT} (a .env file works too)."
    )
