import asyncio
import re

import httpx

from app.core.config import settings
from app.core.logging import get_logger
from app.domain.changelog.schemas import Commit, CommitAuthor, GitHubRepo

logger = get_logger(__name__)

GITHUB_API_BASE = "https://api.github.com"
GITHUB_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]+$")
DEFAULT_BRANCH = "main"
MAX_PER_PAGE = 100

_client = httpx.AsyncClient(timeout=settings.github_timeout)
_request_semaphore = asyncio.Semaphore(settings.github_max_concurrent_requests)


def _get_headers(token: str | None = None) -> dict[str, str]:
    """GitHub API 요청 헤더 생성

    Args:
        token: GitHub OAuth 토큰

    Returns:
        HTTP 헤더 딕셔너리
    """
    headers = {"Accept": "application/vnd.github.v3+json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


async def close_client():
    """httpx 클라이언트 종료"""
    await _client.aclose()


def validate_repo_path(owner: str, repo: str) -> tuple[str, str]:
    """owner/repo 이름 검증

    Raises:
        ValueError: GitHub 이름 규칙에 맞지 않는 경우
    """
    for name in (owner, repo):
        if not name or not GITHUB_NAME_PATTERN.match(name) or name in {".", ".."}:
            raise ValueError(f"유효하지 않은 GitHub 이름: {owner}/{repo}")
    return owner, repo


def _clamp_per_page(per_page: int) -> int:
    return max(1, min(per_page, MAX_PER_PAGE))


async def _get(url: str, token: str | None, params: dict | None = None) -> httpx.Response:
    async with _request_semaphore:
        return await _client.get(url, headers=_get_headers(token), params=params)


def _to_commit(data: dict) -> Commit:
    """GitHub 커밋 응답을 Commit으로 변환"""
    commit = data.get("commit") or {}
    author = commit.get("author") or {}
    committer = commit.get("committer") or {}
    return Commit(
        sha=data.get("sha", ""),
        message=commit.get("message", ""),
        author=CommitAuthor(
            name=author.get("name"),
            email=author.get("email"),
            date=author.get("date"),
        ),
        url=data.get("html_url"),
        date=committer.get("date"),
    )


async def get_user_repos(token: str, per_page: int = MAX_PER_PAGE) -> list[GitHubRepo]:
    """인증된 사용자의 레포지토리 목록 조회, 최근 업데이트 순

    Args:
        token: GitHub OAuth 토큰
        per_page: 가져올 레포지토리 개수

    Returns:
        레포지토리 목록

    Raises:
        httpx.HTTPStatusError: GitHub API 호출 실패 시
    """
    url = f"{GITHUB_API_BASE}/user/repos"
    params = {"sort": "updated", "per_page": _clamp_per_page(per_page)}

    response = await _get(url, token, params)
    response.raise_for_status()

    repos = [
        GitHubRepo(
            id=repo["id"],
            name=repo["name"],
            full_name=repo["full_name"],
            owner=repo["owner"]["login"],
            description=repo.get("description"),
            html_url=repo["html_url"],
            private=repo.get("private", False),
            default_branch=repo.get("default_branch") or DEFAULT_BRANCH,
        )
        for repo in response.json()
    ]

    logger.info("레포지토리 목록 조회 완료 count=%d", len(repos))
    return repos


async def get_default_branch(owner: str, repo: str, token: str | None = None) -> str | None:
    """레포지토리 기본 브랜치 조회, 실패 시 None"""
    owner, repo = validate_repo_path(owner, repo)
    url = f"{GITHUB_API_BASE}/repos/{owner}/{repo}"

    try:
        response = await _get(url, token)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning(
            "기본 브랜치 조회 실패 repo=%s/%s error=%s", owner, repo, type(e).__name__
        )
        return None

    return response.json().get("default_branch")


async def get_commits(
    owner: str,
    repo: str,
    token: str | None = None,
    branch: str = DEFAULT_BRANCH,
    per_page: int = MAX_PER_PAGE,
) -> tuple[list[Commit], str]:
    """브랜치 커밋 목록 조회

    branch가 기본값 'main'이면 레포지토리의 실제 기본 브랜치를 먼저 조회

    Args:
        owner: 레포지토리 소유자
        repo: 레포지토리 이름
        token: GitHub OAuth 토큰
        branch: 조회할 브랜치
        per_page: 가져올 커밋 개수

    Returns:
        (커밋 목록, 실제 조회한 브랜치)

    Raises:
        ValueError: owner/repo 이름이 유효하지 않은 경우
        httpx.HTTPStatusError: GitHub API 호출 실패 시
    """
    owner, repo = validate_repo_path(owner, repo)

    branch_to_use = branch or DEFAULT_BRANCH
    if branch_to_use == DEFAULT_BRANCH:
        branch_to_use = await get_default_branch(owner, repo, token) or DEFAULT_BRANCH

    url = f"{GITHUB_API_BASE}/repos/{owner}/{repo}/commits"
    params = {"sha": branch_to_use, "per_page": _clamp_per_page(per_page)}

    response = await _get(url, token, params)
    response.raise_for_status()

    commits = [_to_commit(item) for item in response.json()]

    logger.info(
        "커밋 조회 완료 repo=%s/%s branch=%s count=%d",
        owner,
        repo,
        branch_to_use,
        len(commits),
    )
    return commits, branch_to_use
