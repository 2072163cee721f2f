from datetime import datetime

from app.core.logging import get_logger
from app.domain.changelog.constants import (
    CONTEXT_SEPARATOR,
    MAX_COMMITS,
    MAX_DESCRIPTION_LINES,
    NOISE_LINE_PREFIXES,
)
from app.domain.changelog.schemas import Commit, ProcessedCommit

logger = get_logger(__name__)


def truncate_commits(commits: list[Commit], limit: int = MAX_COMMITS) -> list[Commit]:
    """외부 API 페이로드 제한을 위해 앞에서부터 limit개만 남김"""
    if len(commits) > limit:
        logger.warning("커밋 개수 초과 count=%d limit=%d", len(commits), limit)
        return commits[:limit]
    return list(commits)


def _is_noise_line(line: str) -> bool:
    lowered = line.strip().lower()
    return lowered.startswith(NOISE_LINE_PREFIXES)


def _format_date(value: str | None) -> str | None:
    """ISO 8601 날짜를 'Jan 5, 2024' 형식으로 변환, 실패 시 None"""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def extract_description(message: str) -> str:
    """커밋 본문에서 노이즈 줄을 제외한 앞 5줄 추출"""
    body = message.split("\n")[1:]
    lines = [line.strip() for line in body if line.strip() and not _is_noise_line(line)]
    return "\n".join(lines[:MAX_DESCRIPTION_LINES])


def build_context(commit: Commit) -> str:
    """작성자와 날짜를 'Author: x | Date: y' 형태로 결합"""
    parts = []
    if commit.author.name:
        parts.append(f"Author: {commit.author.name}")
    formatted_date = _format_date(commit.date or commit.author.date)
    if formatted_date:
        parts.append(f"Date: {formatted_date}")
    return CONTEXT_SEPARATOR.join(parts)


def process_commit(commit: Commit) -> ProcessedCommit:
    lines = commit.message.split("\n")
    title = lines[0].strip()
    return ProcessedCommit(
        title=title,
        description=extract_description(commit.message),
        context=build_context(commit),
    )


def process_commits(commits: list[Commit]) -> list[ProcessedCommit]:
    """원본 커밋 목록을 프롬프트용 구조로 정리

    Args:
        commits: 이미 개수 제한이 적용된 원본 커밋 목록

    Returns:
        입력 순서를 유지한 ProcessedCommit 목록
    """
    return [process_commit(commit) for commit in commits]
