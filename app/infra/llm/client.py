import asyncio
import os

from langchain_core.messages import HumanMessage, SystemMessage
from langfuse.langchain import CallbackHandler

from app.core.config import settings
from app.core.logging import get_logger
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.errors import ProviderError, ProviderErrorKind, to_provider_error

logger = get_logger(__name__)

if settings.langfuse_public_key:
    os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
if settings.langfuse_secret_key:
    os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
if settings.langfuse_base_url:
    os.environ["LANGFUSE_HOST"] = settings.langfuse_base_url


def get_langfuse_handler() -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환"""
    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        return None

    return CallbackHandler()


def extract_text(content) -> str:
    """채팅 모델 응답 content에서 텍스트만 추출

    Anthropic은 content block 리스트를 반환할 수 있음
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return ""


async def invoke_chat(
    client: BaseLLMClient,
    system_prompt: str,
    human_prompt: str,
    timeout: float | None = None,
    session_id: str | None = None,
    tags: list[str] | None = None,
) -> str:
    """시스템/사용자 메시지 쌍으로 채팅 모델 호출

    Args:
        client: 호출할 LLM 클라이언트
        system_prompt: 시스템 메시지
        human_prompt: 사용자 메시지
        timeout: 전체 호출 제한 시간(초), None이면 클라이언트 타임아웃만 적용
        session_id: Langfuse 세션 ID
        tags: Langfuse 태그

    Returns:
        앞뒤 공백을 제거한 생성 텍스트

    Raises:
        ProviderError: 호출 실패 또는 빈 응답
    """
    provider = client.provider_name
    langfuse_handler = get_langfuse_handler()
    config = {
        "callbacks": [langfuse_handler] if langfuse_handler else [],
        "metadata": {
            "langfuse_session_id": session_id,
            "langfuse_tags": tags or [],
        },
    }
    messages = [
        SystemMessage(content=system_prompt),
        HumanMessage(content=human_prompt),
    ]

    logger.debug("LLM 호출 provider=%s model=%s", provider, client.get_model_name())

    try:
        call = client.get_chat_model().ainvoke(messages, config=config)
        if timeout is not None:
            result = await asyncio.wait_for(call, timeout=timeout)
        else:
            result = await call
    except Exception as e:
        error = to_provider_error(e, provider)
        logger.warning(
            "LLM 호출 실패 provider=%s kind=%s status=%s",
            provider,
            error.kind.value,
            error.status_code,
        )
        raise error from e

    text = extract_text(getattr(result, "content", "")).strip()
    if not text:
        raise ProviderError(
            ProviderErrorKind.API_ERROR,
            provider,
            f"No content received from {provider}",
        )

    logger.debug("LLM 호출 완료 provider=%s length=%d", provider, len(text))
    return text
