from app.core.config import settings
from app.core.logging import get_logger
from app.domain.changelog.categorizer import generate_basic_changelog
from app.domain.changelog.constants import (
    FALLBACK_AUTH,
    FALLBACK_BOTH_FAILED,
    FALLBACK_GENERIC,
    FALLBACK_NO_API_KEY,
    FALLBACK_QUOTA,
    FALLBACK_TOKEN_LIMIT,
    MAX_COMMITS,
)
from app.domain.changelog.formatter import format_commits_for_prompt
from app.domain.changelog.normalizer import process_commits, truncate_commits
from app.domain.changelog.postprocess import post_process_changelog
from app.domain.changelog.prompts import CHANGELOG_SYSTEM, build_changelog_human
from app.domain.changelog.schemas import ChangelogDraft, Commit
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.client import invoke_chat
from app.infra.llm.errors import ProviderError, ProviderErrorKind
from app.infra.llm.factory import get_primary_client, get_secondary_client

logger = get_logger(__name__)

FALLBACK_REASONS = {
    ProviderErrorKind.QUOTA_EXCEEDED: FALLBACK_QUOTA,
    ProviderErrorKind.TOKEN_LIMIT_EXCEEDED: FALLBACK_TOKEN_LIMIT,
    ProviderErrorKind.AUTH_ERROR: FALLBACK_AUTH,
}


def fallback_reason_for(error: ProviderError) -> str:
    """프로바이더 에러 종류를 사용자에게 보여줄 대체 사유로 변환"""
    return FALLBACK_REASONS.get(error.kind, FALLBACK_GENERIC)


class ChangelogGenerator:
    """커밋 목록으로 체인지로그를 생성하는 파이프라인

    1순위 프로바이더 → (쿼터 초과 시) 2순위 프로바이더 → 규칙 기반 생성 순으로
    시도하며, 어떤 경로든 예외 없이 ChangelogDraft를 반환
    """

    def __init__(
        self,
        primary: BaseLLMClient | None = None,
        secondary: BaseLLMClient | None = None,
        timeout: float | None = None,
        max_commits: int = MAX_COMMITS,
    ):
        self.primary = primary
        self.secondary = secondary
        self.timeout = timeout
        # 설정값과 무관하게 MAX_COMMITS를 넘지 않음
        self.max_commits = max(1, min(max_commits, MAX_COMMITS))

    async def generate(
        self,
        commits: list[Commit],
        project_name: str,
        version_label: str,
        session_id: str | None = None,
    ) -> ChangelogDraft:
        commits_to_process = truncate_commits(commits, self.max_commits)
        processed = process_commits(commits_to_process)
        human_prompt = build_changelog_human(
            project_name=project_name,
            version_label=version_label,
            commit_count=len(commits_to_process),
            formatted_commits=format_commits_for_prompt(processed),
        )

        changelog, fallback_reason = await self._generate_with_ai(
            human_prompt, version_label, session_id
        )
        ai_used = changelog is not None

        if changelog is None:
            logger.info("규칙 기반 체인지로그 생성 reason=%s", fallback_reason)
            changelog = generate_basic_changelog(commits_to_process, version_label)

        return ChangelogDraft(
            changelog=post_process_changelog(changelog, version_label),
            ai_used=ai_used,
            fallback_reason=None if ai_used else fallback_reason,
        )

    async def _generate_with_ai(
        self,
        human_prompt: str,
        version_label: str,
        session_id: str | None,
    ) -> tuple[str | None, str | None]:
        """AI 생성 시도, (생성 텍스트 또는 None, 대체 사유) 반환"""
        if self.primary is None and self.secondary is None:
            return None, FALLBACK_NO_API_KEY

        if self.primary is None:
            try:
                return await self._call(self.secondary, human_prompt, version_label, session_id), None
            except ProviderError as e:
                return None, fallback_reason_for(e)

        try:
            return await self._call(self.primary, human_prompt, version_label, session_id), None
        except ProviderError as e:
            if e.kind is not ProviderErrorKind.QUOTA_EXCEEDED or self.secondary is None:
                return None, fallback_reason_for(e)
            logger.info(
                "1순위 프로바이더 쿼터 초과, 2순위 시도 primary=%s secondary=%s",
                self.primary.provider_name,
                self.secondary.provider_name,
            )

        try:
            return await self._call(self.secondary, human_prompt, version_label, session_id), None
        except ProviderError:
            return None, FALLBACK_BOTH_FAILED

    async def _call(
        self,
        client: BaseLLMClient,
        human_prompt: str,
        version_label: str,
        session_id: str | None,
    ) -> str:
        return await invoke_chat(
            client,
            CHANGELOG_SYSTEM,
            human_prompt,
            timeout=self.timeout,
            session_id=session_id,
            tags=["changelog", "generate", version_label],
        )


def get_changelog_generator() -> ChangelogGenerator:
    """설정 기반 ChangelogGenerator 생성 - FastAPI 의존성"""
    return ChangelogGenerator(
        primary=get_primary_client(),
        secondary=get_secondary_client(),
        timeout=settings.generation_timeout,
        max_commits=settings.changelog_max_commits,
    )
