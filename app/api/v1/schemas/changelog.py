"""체인지로그 API 스키마."""

from pydantic import BaseModel, Field, field_validator

from app.domain.changelog.schemas import Commit

MAX_VERSION_LABEL_LENGTH = 60


class GenerateChangelogRequest(BaseModel):
    """체인지로그 생성 요청."""

    commits: list[Commit]
    project_name: str = Field(alias="projectName")
    version_label: str = Field(alias="versionLabel", max_length=MAX_VERSION_LABEL_LENGTH)

    @field_validator("commits")
    @classmethod
    def validate_commits(cls, v: list[Commit]) -> list[Commit]:
        if not v:
            raise ValueError("Commits are required")
        return v

    @field_validator("project_name", "version_label", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("project_name", "version_label")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Project name and version label are required")
        return v

    class Config:
        populate_by_name = True


class GenerateChangelogResponse(BaseModel):
    """체인지로그 생성 응답."""

    changelog: str
    ai_used: bool = Field(alias="aiUsed")
    fallback_reason: str | None = Field(default=None, alias="fallbackReason")

    class Config:
        populate_by_name = True


class PrepareChangelogRequest(BaseModel):
    """저장 전 체인지로그 정리 요청."""

    version_label: str = Field(alias="versionLabel", min_length=1, max_length=MAX_VERSION_LABEL_LENGTH)
    content: str = Field(min_length=10)
    existing_version_slugs: list[str] = Field(default_factory=list, alias="existingVersionSlugs")

    @field_validator("version_label", mode="before")
    @classmethod
    def strip_version_label(cls, v):
        return v.strip() if isinstance(v, str) else v

    class Config:
        populate_by_name = True


class PrepareChangelogResponse(BaseModel):
    """저장 전 체인지로그 정리 결과."""

    version_slug: str = Field(alias="versionSlug")
    title: str
    summary: str | None = None
    content: str

    class Config:
        populate_by_name = True


class ProjectSlugRequest(BaseModel):
    """프로젝트 slug 생성 요청."""

    name: str = Field(min_length=2, max_length=80)
    existing_slugs: list[str] = Field(default_factory=list, alias="existingSlugs")

    class Config:
        populate_by_name = True


class ProjectSlugResponse(BaseModel):
    """프로젝트 slug 생성 결과."""

    slug: str
    available: bool
