"""
LLM 프로바이더 에러 분류

프로바이더 SDK 예외를 닫힌 종류(ProviderErrorKind)로 변환하여
상위 로직이 메시지 문자열이 아닌 종류로 분기하도록 함
"""

import asyncio
from enum import Enum

import anthropic
import httpx
import openai

QUOTA_ERROR_CODES = frozenset({"insufficient_quota"})
TOKEN_LIMIT_ERROR_CODES = frozenset({"context_length_exceeded", "string_above_max_length"})
# Anthropic은 초과 프롬프트를 400 invalid_request_error 메시지로만 알려줌
TOKEN_LIMIT_MESSAGE_MARKERS = ("prompt is too long",)
AUTH_STATUS_CODES = frozenset({401, 403})

TRANSPORT_EXCEPTIONS = (
    TimeoutError,
    asyncio.TimeoutError,
    httpx.TransportError,
    openai.APIConnectionError,
    anthropic.APIConnectionError,
)


class ProviderErrorKind(str, Enum):
    """프로바이더 실패 종류"""

    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    AUTH_ERROR = "AUTH_ERROR"
    TOKEN_LIMIT_EXCEEDED = "TOKEN_LIMIT_EXCEEDED"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    API_ERROR = "API_ERROR"


class ProviderError(Exception):
    def __init__(
        self,
        kind: ProviderErrorKind,
        provider: str,
        message: str,
        status_code: int | None = None,
    ):
        self.kind = kind
        self.provider = provider
        self.status_code = status_code
        super().__init__(message)


def _error_code(exc: Exception) -> str | None:
    """예외 객체 또는 응답 본문에서 프로바이더 에러 코드 추출"""
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code

    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict):
            body = nested
        for key in ("code", "type"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def _error_message(exc: Exception) -> str:
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict):
            body = nested
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return getattr(exc, "message", None) or str(exc) or type(exc).__name__


def _is_prompt_too_long(exc: Exception) -> bool:
    message = _error_message(exc).lower()
    return any(marker in message for marker in TOKEN_LIMIT_MESSAGE_MARKERS)


def classify_provider_error(exc: Exception) -> ProviderErrorKind:
    """SDK/전송 예외를 ProviderErrorKind로 분류"""
    if isinstance(exc, ProviderError):
        return exc.kind
    if isinstance(exc, TRANSPORT_EXCEPTIONS):
        return ProviderErrorKind.TRANSPORT_ERROR

    status_code = getattr(exc, "status_code", None)
    code = _error_code(exc)

    if status_code == 429 and code in QUOTA_ERROR_CODES:
        return ProviderErrorKind.QUOTA_EXCEEDED
    if status_code in AUTH_STATUS_CODES:
        return ProviderErrorKind.AUTH_ERROR
    if status_code == 413 or code in TOKEN_LIMIT_ERROR_CODES:
        return ProviderErrorKind.TOKEN_LIMIT_EXCEEDED
    if status_code == 400 and _is_prompt_too_long(exc):
        return ProviderErrorKind.TOKEN_LIMIT_EXCEEDED
    return ProviderErrorKind.API_ERROR


def to_provider_error(exc: Exception, provider: str) -> ProviderError:
    """임의의 예외를 ProviderError로 변환"""
    if isinstance(exc, ProviderError):
        return exc

    kind = classify_provider_error(exc)
    status_code = getattr(exc, "status_code", None)
    if not isinstance(status_code, int):
        status_code = None

    if status_code is not None:
        message = f"{provider} API error ({status_code}): {_error_message(exc)}"
    elif kind is ProviderErrorKind.TRANSPORT_ERROR:
        message = f"{provider} API transport error: {type(exc).__name__}"
    else:
        message = f"{provider} API error: {_error_message(exc)}"

    return ProviderError(kind, provider, message, status_code=status_code)
