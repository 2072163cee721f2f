"""
요청 컨텍스트 관리 모듈

contextvars를 사용하여 비동기 환경에서도 안전하게 request_id를 관리.
request_id는 응답 헤더와 Langfuse session_id로도 쓰이므로
외부에서 받은 값은 안전한 문자만 허용
"""

import re
import uuid
from contextvars import ContextVar

REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    """현재 컨텍스트의 request_id 반환"""
    return request_id_var.get()


def normalize_request_id(value: str | None) -> str | None:
    """클라이언트가 보낸 X-Request-ID 검증, 허용되지 않으면 None"""
    if value is None:
        return None
    value = value.strip()
    return value if REQUEST_ID_PATTERN.match(value) else None


def set_request_id(request_id: str | None = None) -> str:
    """
    request_id 설정

    인자가 없거나 형식이 맞지 않으면 8자리 UUID 자동 생성
    """
    request_id = normalize_request_id(request_id) or uuid.uuid4().hex[:8]
    request_id_var.set(request_id)
    return request_id


def clear_context() -> None:
    """모든 컨텍스트 변수 초기화"""
    request_id_var.set(None)
