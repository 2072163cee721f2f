"""
structlog 기반 로깅 설정

- 개발 환경: 컬러풀한 콘솔 출력
- 프로덕션 환경: JSON 형식 출력, LLM/GitHub 자격 증명 마스킹
- 컨텍스트 자동 주입: request_id
"""

import logging
import re
import sys

import structlog

from app.core.config import settings
from app.core.context import get_request_id

SENSITIVE_PATTERNS = [
    (re.compile(r"(Bearer\s+)[^\s]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(x-github-token[\"']?\s*[:=]\s*[\"']?)[^\"'\s,}]+", re.IGNORECASE), r"\1***"),
    # OpenAI(sk-, sk-proj-), Anthropic(sk-ant-), Langfuse(sk-lf-, pk-lf-)
    (re.compile(r"\b((?:sk|pk)-(?:ant-|proj-|lf-)?)[a-zA-Z0-9_-]{8,}"), r"\1***"),
    (re.compile(r"\b(gh[pousr]_|github_pat_)[a-zA-Z0-9_]+"), r"\1***"),
]

NOISY_LOGGERS = (
    "httpcore",
    "httpx",
    "langfuse",
    "langchain",
    "langchain_core",
    "langchain_openai",
    "langchain_anthropic",
    "openai",
    "anthropic",
    "slowapi",
    "anyio",
)


def _configured_secrets() -> list[str]:
    """설정에 들어 있는 API 키 원문"""
    values = (
        settings.openai_api_key,
        settings.anthropic_api_key,
        settings.langfuse_secret_key,
    )
    return [value for value in values if len(value) >= 8]


def _mask_sensitive_data(value: str) -> str:
    """민감한 정보 마스킹"""
    for secret in _configured_secrets():
        value = value.replace(secret, "***")
    for pattern, replacement in SENSITIVE_PATTERNS:
        value = pattern.sub(replacement, value)
    return value


def add_context_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """request_id를 로그에 자동 주입"""
    request_id = get_request_id()

    if request_id:
        event_dict["request_id"] = request_id

    return event_dict


def mask_sensitive_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """프로덕션에서 민감한 정보 마스킹"""
    if not settings.is_production:
        return event_dict

    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _mask_sensitive_data(value)

    return event_dict


def setup_logging(level: str | None = None) -> None:
    """structlog 설정 초기화"""
    if level is None:
        level = settings.log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        add_context_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_production:
        # 프로바이더 인증 에러 메시지에 키가 담길 수 있어 예외를 문자열로 만든 뒤 마스킹
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    shared_processors.append(mask_sensitive_processor)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        logging.getLogger(logger_name).handlers.clear()

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """structlog 로거 반환"""
    return structlog.get_logger(name)
