from app.infra.llm.anthropic_client import AnthropicClient
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.client import invoke_chat
from app.infra.llm.errors import (
    ProviderError,
    ProviderErrorKind,
    classify_provider_error,
)
from app.infra.llm.factory import (
    get_primary_client,
    get_secondary_client,
    reset_clients,
)
from app.infra.llm.openai_client import OpenAIClient

__all__ = [
    "BaseLLMClient",
    "OpenAIClient",
    "AnthropicClient",
    "ProviderError",
    "ProviderErrorKind",
    "classify_provider_error",
    "get_primary_client",
    "get_secondary_client",
    "reset_clients",
    "invoke_chat",
]
