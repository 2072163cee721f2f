"""app/main.py 테스트"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.domain.changelog.service import get_changelog_generator
from app.main import app

GENERATE_PAYLOAD = {
    "commits": [{"sha": "a1", "message": "feat: add export"}],
    "projectName": "Acme",
    "versionLabel": "1.0.0",
}


class TestHealthCheck:
    """헬스체크 엔드포인트 테스트"""

    @pytest.mark.asyncio
    async def test_health_check_returns_up(self, async_client):
        """헬스체크 엔드포인트가 정상 응답을 반환"""
        async with async_client as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "UP"}


class TestAppConfiguration:
    """앱 설정 테스트"""

    def test_app_has_correct_title(self):
        """앱 제목이 올바르게 설정됨"""
        assert app.title == "Changelogy"

    def test_app_has_correct_version(self):
        """앱 버전이 올바르게 설정됨"""
        assert app.version == "1.0.0"

    def test_router_is_included(self):
        """API 라우터가 포함됨"""
        routes = [route.path for route in app.routes]
        assert "/health" in routes
        assert "/api/v1/changelogs/generate" in routes
        assert "/api/v1/changelogs/prepare" in routes
        assert "/api/v1/projects/slug" in routes
        assert "/api/v1/github/repos" in routes
        assert "/api/v1/github/repos/{owner}/{repo}/commits" in routes


class TestRequestId:
    """X-Request-ID 헤더 테스트"""

    @pytest.mark.asyncio
    async def test_generates_request_id(self, async_client):
        """요청 ID가 없으면 새로 생성"""
        async with async_client as client:
            response = await client.post("/api/v1/projects/slug", json={"name": "Acme"})

        assert response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_echoes_incoming_request_id(self, async_client):
        """요청 ID가 있으면 그대로 사용"""
        async with async_client as client:
            response = await client.post(
                "/api/v1/projects/slug",
                json={"name": "Acme"},
                headers={"X-Request-ID": "req-123"},
            )

        assert response.headers["X-Request-ID"] == "req-123"

    @pytest.mark.asyncio
    async def test_ignores_oversized_request_id(self, async_client):
        """너무 긴 요청 ID는 무시"""
        async with async_client as client:
            response = await client.post(
                "/api/v1/projects/slug",
                json={"name": "Acme"},
                headers={"X-Request-ID": "x" * 100},
            )

        assert response.headers["X-Request-ID"] != "x" * 100


class TestUnhandledException:
    """처리되지 않은 예외 핸들러 테스트"""

    @pytest.mark.asyncio
    async def test_returns_internal_error(self):
        """예상치 못한 예외는 500 INTERNAL_ERROR"""
        generator = MagicMock()
        generator.generate = AsyncMock(side_effect=RuntimeError("boom"))
        app.dependency_overrides[get_changelog_generator] = lambda: generator

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/api/v1/changelogs/generate", json=GENERATE_PAYLOAD)

        assert response.status_code == 500
        body = response.json()
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["detail"] == "boom"
