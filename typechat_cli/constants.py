"""Configuration constants and defaults."""

# Schema
DEFAULT_TYPE_NAME = "ResponseShape"

# OpenAI
DEFAULT_OPENAI_MODEL = "gpt-4"
OPENAI_BASE_URL = "https://api.openai.com/v1"

# Ollama
DEFAULT_OLLAMA_MODEL = "llama2"
OLLAMA_DEFAULT_ENDPOINT = "http://localhost:11434"

# Environment variable names
ENV_OPENAI_API_KEY = "OPENAI_API_KEY"
ENV_OPENAI_MODEL = "OPENAI_MODEL"
ENV_OPENAI_ENDPOINT = "OPENAI_ENDPOINT"
ENV_OPENAI_ORGANIZATION = "OPENAI_ORGANIZATION"
ENV_AZURE_API_KEY = "AZURE_OPENAI_API_KEY"
ENV_AZURE_ENDPOINT = "AZURE_OPENAI_ENDPOINT"
ENV_OLLAMA_ENDPOINT = "OLLAMA_ENDPOINT"
ENV_OLLAMA_MODEL = "OLLAMA_MODEL"

# Generation defaults
DEFAULT_TEMPERATURE = 0.0
