"""
typechat-cli: Translate text into schema-shaped JSON with a language model.

The schema is a Python file of TypedDict/dataclass definitions; prompting,
validation and repair are handled by TypeChat. The model backend (OpenAI,
Azure OpenAI, Ollama, or any OpenAI-compatible server) is picked from the
environment.
"""

__version__ = "0.1.0"

from typechat_cli.factory import create_client
from typechat_cli.model import ClientLanguageModel
from typechat_cli.runner import SchemaTranslator, TranslationError
from typechat_cli.schema import load_schema_type


__all__ = [
    "__version__",
    "ClientLanguageModel",
    "SchemaTranslator",
    "TranslationError",
    "create_client",
    "load_schema_type",
]
