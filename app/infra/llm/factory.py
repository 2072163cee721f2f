from app.core.config import settings
from app.core.logging import get_logger
from app.infra.llm.anthropic_client import AnthropicClient
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.openai_client import OpenAIClient

logger = get_logger(__name__)

_primary_client: BaseLLMClient | None = None
_secondary_client: BaseLLMClient | None = None


def get_primary_client() -> BaseLLMClient | None:
    """1순위 LLM 클라이언트(OpenAI) 반환, 키가 없으면 None"""
    global _primary_client

    if _primary_client is not None:
        return _primary_client
    if not settings.openai_api_key:
        return None

    _primary_client = OpenAIClient(settings)
    logger.info("OpenAI 클라이언트 초기화 model=%s", settings.openai_model)
    return _primary_client


def get_secondary_client() -> BaseLLMClient | None:
    """2순위 LLM 클라이언트(Anthropic) 반환, 키가 없으면 None"""
    global _secondary_client

    if _secondary_client is not None:
        return _secondary_client
    if not settings.anthropic_api_key:
        return None

    _secondary_client = AnthropicClient(settings)
    logger.info("Anthropic 클라이언트 초기화 model=%s", settings.anthropic_model)
    return _secondary_client


def reset_clients() -> None:
    """클라이언트 캐시 초기화 - 테스트용"""
    global _primary_client, _secondary_client
    _primary_client = None
    _secondary_client = None
