import httpx
from fastapi import APIRouter, Depends, Header, Query

from app.api.v1.schemas import CommitListResponse, RepoListResponse
from app.core.exceptions import (
    GitHubAPIError,
    GitHubNotConnectedError,
    GitHubNotFoundError,
    GitHubUnauthorizedError,
    ValidationError,
)
from app.core.logging import get_logger
from app.infra.github.client import get_commits, get_user_repos

router = APIRouter(prefix="/github", tags=["github"])
logger = get_logger(__name__)


def require_github_token(
    x_github_token: str | None = Header(default=None, alias="X-GitHub-Token"),
) -> str:
    """요청 헤더에서 GitHub 토큰 추출"""
    if not x_github_token:
        raise GitHubNotConnectedError()
    return x_github_token


def _raise_github_error(e: httpx.HTTPError) -> None:
    """httpx 예외를 API 예외로 변환"""
    if isinstance(e, httpx.HTTPStatusError):
        status_code = e.response.status_code
        if status_code == 401:
            raise GitHubUnauthorizedError() from e
        if status_code == 404:
            raise GitHubNotFoundError() from e
        raise GitHubAPIError(detail=f"status_code={status_code}") from e
    raise GitHubAPIError(detail=type(e).__name__) from e


@router.get("/repos", response_model=RepoListResponse)
async def list_repos(token: str = Depends(require_github_token)) -> RepoListResponse:
    try:
        repos = await get_user_repos(token)
    except httpx.HTTPError as e:
        logger.warning("레포지토리 목록 조회 실패 error=%s", type(e).__name__)
        _raise_github_error(e)

    return RepoListResponse(repos=repos)


@router.get("/repos/{owner}/{repo}/commits", response_model=CommitListResponse)
async def list_commits(
    owner: str,
    repo: str,
    branch: str = Query(default="main"),
    per_page: int = Query(default=100, ge=1, le=100),
    token: str = Depends(require_github_token),
) -> CommitListResponse:
    try:
        commits, branch_used = await get_commits(
            owner, repo, token=token, branch=branch, per_page=per_page
        )
    except ValueError as e:
        raise ValidationError(detail=str(e)) from e
    except httpx.HTTPError as e:
        logger.warning(
            "커밋 목록 조회 실패 repo=%s/%s error=%s", owner, repo, type(e).__name__
        )
        _raise_github_error(e)

    return CommitListResponse(commits=commits, branch=branch_used)
