from app.api.v1.schemas.changelog import (
    GenerateChangelogRequest,
    GenerateChangelogResponse,
    PrepareChangelogRequest,
    PrepareChangelogResponse,
    ProjectSlugRequest,
    ProjectSlugResponse,
)
from app.api.v1.schemas.github import CommitListResponse, RepoListResponse

__all__ = [
    "GenerateChangelogRequest",
    "GenerateChangelogResponse",
    "PrepareChangelogRequest",
    "PrepareChangelogResponse",
    "ProjectSlugRequest",
    "ProjectSlugResponse",
    "RepoListResponse",
    "CommitListResponse",
]
