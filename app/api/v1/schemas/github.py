"""GitHub API 스키마."""

from pydantic import BaseModel

from app.domain.changelog.schemas import Commit, GitHubRepo


class RepoListResponse(BaseModel):
    """레포지토리 목록 응답."""

    repos: list[GitHubRepo]


class CommitListResponse(BaseModel):
    """커밋 목록 응답."""

    commits: list[Commit]
    branch: str
