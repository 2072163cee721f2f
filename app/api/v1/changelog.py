from fastapi import APIRouter, Depends, Request

from app.api.v1.schemas import (
    GenerateChangelogRequest,
    GenerateChangelogResponse,
    PrepareChangelogRequest,
    PrepareChangelogResponse,
    ProjectSlugRequest,
    ProjectSlugResponse,
)
from app.core.config import settings
from app.core.context import get_request_id
from app.core.exceptions import ValidationError
from app.core.limiter import limiter
from app.core.logging import get_logger
from app.domain.changelog.publishing import (
    build_summary,
    clean_changelog_text,
    slugify,
    unique_slug,
)
from app.domain.changelog.service import ChangelogGenerator, get_changelog_generator

router = APIRouter(tags=["changelog"])
logger = get_logger(__name__)


@router.post("/changelogs/generate", response_model=GenerateChangelogResponse)
@limiter.limit(settings.generate_rate_limit)
async def generate_changelog(
    request: Request,
    body: GenerateChangelogRequest,
    generator: ChangelogGenerator = Depends(get_changelog_generator),
) -> GenerateChangelogResponse:
    logger.info(
        "체인지로그 생성 요청 project=%s version=%s commits=%d",
        body.project_name,
        body.version_label,
        len(body.commits),
    )

    draft = await generator.generate(
        commits=body.commits,
        project_name=body.project_name,
        version_label=body.version_label,
        session_id=get_request_id(),
    )

    logger.info(
        "체인지로그 생성 완료 ai_used=%s fallback_reason=%s",
        draft.ai_used,
        draft.fallback_reason,
    )
    return GenerateChangelogResponse(
        changelog=draft.changelog,
        ai_used=draft.ai_used,
        fallback_reason=draft.fallback_reason,
    )


@router.post("/changelogs/prepare", response_model=PrepareChangelogResponse)
async def prepare_changelog(body: PrepareChangelogRequest) -> PrepareChangelogResponse:
    """저장 직전 본문 정리, 버전 slug 및 요약 생성"""
    content = clean_changelog_text(body.content)
    if not content:
        raise ValidationError(detail="content는 비어 있을 수 없습니다")

    summary = build_summary(content)
    return PrepareChangelogResponse(
        version_slug=unique_slug(
            body.version_label, set(body.existing_version_slugs), fallback="version"
        ),
        title=body.version_label.strip(),
        summary=summary or None,
        content=content,
    )


@router.post("/projects/slug", response_model=ProjectSlugResponse)
async def suggest_project_slug(body: ProjectSlugRequest) -> ProjectSlugResponse:
    """프로젝트명으로 사용 가능한 slug 제안"""
    taken = set(body.existing_slugs)
    base = slugify(body.name) or "project"
    return ProjectSlugResponse(
        slug=unique_slug(body.name, taken),
        available=base not in taken,
    )
