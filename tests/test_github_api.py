"""GitHub API 엔드포인트 테스트"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from app.domain.changelog.schemas import Commit, GitHubRepo

REPOS_URL = "/api/v1/github/repos"
COMMITS_URL = "/api/v1/github/repos/user/repo/commits"
TOKEN_HEADER = {"X-GitHub-Token": "gho_test"}


class TestListRepos:
    """GET /github/repos 테스트"""

    @pytest.mark.asyncio
    async def test_missing_token(self, async_client):
        """토큰 헤더가 없으면 403"""
        async with async_client as client:
            response = await client.get(REPOS_URL)

        assert response.status_code == 403
        assert response.json()["error_code"] == "GITHUB_NOT_CONNECTED"

    @pytest.mark.asyncio
    async def test_success(self, async_client):
        repo = GitHubRepo(
            id=1,
            name="repo",
            full_name="user/repo",
            owner="user",
            html_url="https://github.com/user/repo",
        )

        with patch(
            "app.api.v1.github.get_user_repos", AsyncMock(return_value=[repo])
        ) as mock_get:
            async with async_client as client:
                response = await client.get(REPOS_URL, headers=TOKEN_HEADER)

        assert response.status_code == 200
        assert response.json()["repos"][0]["full_name"] == "user/repo"
        mock_get.assert_awaited_once_with("gho_test")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status,expected_status,expected_code",
        [
            (401, 401, "GITHUB_UNAUTHORIZED"),
            (404, 404, "GITHUB_NOT_FOUND"),
            (500, 502, "GITHUB_API_ERROR"),
        ],
    )
    async def test_github_errors(
        self, async_client, create_http_error, status, expected_status, expected_code
    ):
        """GitHub 상태 코드를 API 에러로 변환"""
        with patch(
            "app.api.v1.github.get_user_repos",
            AsyncMock(side_effect=create_http_error(status)),
        ):
            async with async_client as client:
                response = await client.get(REPOS_URL, headers=TOKEN_HEADER)

        assert response.status_code == expected_status
        assert response.json()["error_code"] == expected_code

    @pytest.mark.asyncio
    async def test_transport_error(self, async_client):
        """연결 실패는 502"""
        with patch(
            "app.api.v1.github.get_user_repos",
            AsyncMock(side_effect=httpx.ConnectError("refused")),
        ):
            async with async_client as client:
                response = await client.get(REPOS_URL, headers=TOKEN_HEADER)

        assert response.status_code == 502


class TestListCommits:
    """GET /github/repos/{owner}/{repo}/commits 테스트"""

    @pytest.mark.asyncio
    async def test_success(self, async_client):
        commits = [Commit(sha="abc", message="feat: init")]

        with patch(
            "app.api.v1.github.get_commits",
            AsyncMock(return_value=(commits, "master")),
        ) as mock_get:
            async with async_client as client:
                response = await client.get(
                    COMMITS_URL, params={"per_page": 20}, headers=TOKEN_HEADER
                )

        assert response.status_code == 200
        body = response.json()
        assert body["branch"] == "master"
        assert body["commits"][0]["sha"] == "abc"
        mock_get.assert_awaited_once_with(
            "user", "repo", token="gho_test", branch="main", per_page=20
        )

    @pytest.mark.asyncio
    async def test_invalid_name(self, async_client):
        """이름 검증 실패는 400"""
        with patch(
            "app.api.v1.github.get_commits",
            AsyncMock(side_effect=ValueError("유효하지 않은 GitHub 이름: user/re po")),
        ):
            async with async_client as client:
                response = await client.get(COMMITS_URL, headers=TOKEN_HEADER)

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_INPUT"

    @pytest.mark.asyncio
    async def test_per_page_out_of_range(self, async_client):
        async with async_client as client:
            response = await client.get(
                COMMITS_URL, params={"per_page": 500}, headers=TOKEN_HEADER
            )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_not_found(self, async_client, create_http_error):
        with patch(
            "app.api.v1.github.get_commits",
            AsyncMock(side_effect=create_http_error(404)),
        ):
            async with async_client as client:
                response = await client.get(COMMITS_URL, headers=TOKEN_HEADER)

        assert response.status_code == 404
