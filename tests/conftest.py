"""테스트 공통 fixture"""

from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import openai
import pytest
from httpx import ASGITransport, AsyncClient
from langchain_core.messages import AIMessage

from app.core.limiter import limiter
from app.domain.changelog.schemas import Commit, CommitAuthor
from app.infra.llm.factory import reset_clients
from app.main import app

OPENAI_URL = "https://api.openai.com/v1/chat/completions"
ANTHROPIC_URL = "https://api.anthropic.com/v1/messages"


@pytest.fixture(autouse=True)
def _reset_state():
    """요청 제한 저장소와 LLM 클라이언트 캐시 초기화"""
    limiter.reset()
    reset_clients()
    yield
    app.dependency_overrides.clear()
    reset_clients()


@pytest.fixture
def make_commit():
    """Commit 생성 helper"""

    def _make(
        message: str,
        sha: str = "abc1234",
        author_name: str | None = "Jane Doe",
        date: str | None = "2024-01-05T10:00:00Z",
    ) -> Commit:
        return Commit(
            sha=sha,
            message=message,
            author=CommitAuthor(name=author_name, email="jane@example.com", date=date),
            url=f"https://github.com/acme/app/commit/{sha}",
            date=date,
        )

    return _make


@pytest.fixture
def sample_commits(make_commit) -> list[Commit]:
    """테스트용 커밋 리스트"""
    return [
        make_commit("feat: add export\n\nSupports CSV and PDF", sha="a1"),
        make_commit("fix: crash on save", sha="b2"),
        make_commit("chore: bump deps\n\nSigned-off-by: Bot <bot@example.com>", sha="c3"),
    ]


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def make_llm_client():
    """LLM 클라이언트 mock 생성 helper

    content가 예외면 ainvoke가 해당 예외를 발생시킴
    """

    def _make(provider_name: str, content="## 1.0.0\n\n### Added\n\n- Export"):
        client = MagicMock()
        client.provider_name = provider_name
        client.get_model_name.return_value = f"{provider_name.lower()}-model"
        chat_model = MagicMock()
        if isinstance(content, BaseException):
            chat_model.ainvoke = AsyncMock(side_effect=content)
        else:
            chat_model.ainvoke = AsyncMock(return_value=AIMessage(content=content))
        client.get_chat_model.return_value = chat_model
        return client

    return _make


@pytest.fixture
def openai_error():
    """OpenAI SDK 상태 에러 생성 helper"""

    def _create(status_code: int, code: str | None = None, message: str = "error"):
        request = httpx.Request("POST", OPENAI_URL)
        response = httpx.Response(status_code, request=request)
        error_cls = {
            401: openai.AuthenticationError,
            429: openai.RateLimitError,
            400: openai.BadRequestError,
        }.get(status_code, openai.APIStatusError)
        body = {"message": message, "type": code or "error", "code": code}
        return error_cls(message, response=response, body=body)

    return _create


@pytest.fixture
def anthropic_error():
    """Anthropic SDK 상태 에러 생성 helper"""

    def _create(status_code: int, error_type: str = "api_error", message: str = "error"):
        request = httpx.Request("POST", ANTHROPIC_URL)
        response = httpx.Response(status_code, request=request)
        body = {"type": "error", "error": {"type": error_type, "message": message}}
        return anthropic.APIStatusError(message, response=response, body=body)

    return _create


@pytest.fixture
def mock_github_response():
    """GitHub API 응답 mock 생성"""
    mock = MagicMock()
    mock.raise_for_status = MagicMock()
    return mock


@pytest.fixture
def create_http_error():
    """HTTPStatusError 생성 helper"""

    def _create(status_code: int, message: str = "Error"):
        return httpx.HTTPStatusError(
            message,
            request=httpx.Request("GET", "https://test.com"),
            response=httpx.Response(status_code),
        )

    return _create
