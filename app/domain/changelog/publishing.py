"""
체인지로그 저장/공개용 헬퍼

- 프로젝트/버전 slug 생성
- 사용자가 붙여넣은 체인지로그 텍스트 정리
- 목록 화면용 요약문 추출
"""

import re
from collections.abc import Collection

from app.domain.changelog.constants import SUMMARY_MAX_LENGTH, SUMMARY_MAX_LINES

NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
HYPHEN_DUPLICATES = re.compile(r"-{2,}")
BULLET_PATTERN = re.compile(r"^(?:[-*•]\s+|\d+[.)]\s+)")
LINE_BREAK_PATTERN = re.compile(r"\r\n?")


def slugify(text: str) -> str:
    """URL에 쓸 수 있는 소문자-하이픈 slug로 변환"""
    slug = NON_ALPHANUMERIC.sub("-", text.strip().lower())
    slug = HYPHEN_DUPLICATES.sub("-", slug)
    return slug.strip("-")


def unique_slug(text: str, taken: Collection[str], fallback: str = "project") -> str:
    """이미 사용 중인 slug와 겹치지 않는 slug 생성

    Args:
        text: slug로 변환할 원문 (프로젝트명, 버전 라벨 등)
        taken: 같은 범위에서 이미 사용 중인 slug 목록
        fallback: 변환 결과가 비었을 때 사용할 기본 slug

    Returns:
        base, base-2, base-3 ... 중 처음으로 비어 있는 slug
    """
    base = slugify(text) or fallback
    slug = base
    counter = 1
    while slug in taken:
        counter += 1
        slug = f"{base}-{counter}"
    return slug


def _sentence_case(text: str) -> str:
    return text[:1].upper() + text[1:]


def clean_changelog_text(raw: str) -> str:
    """저장 전 체인지로그 본문 정리

    줄바꿈 통일, 연속 빈 줄 축소, 글머리표를 '- '로 통일하고
    각 줄 첫 글자를 대문자로 변환
    """
    normalized = LINE_BREAK_PATTERN.sub("\n", raw).strip()
    if not normalized:
        return ""

    cleaned: list[str] = []
    previous_blank = False

    for line in normalized.split("\n"):
        trimmed = line.strip()

        if not trimmed:
            if not previous_blank and cleaned:
                cleaned.append("")
                previous_blank = True
            continue

        previous_blank = False

        if BULLET_PATTERN.match(trimmed):
            text = BULLET_PATTERN.sub("", trimmed, count=1).strip()
            cleaned.append(f"- {_sentence_case(text)}")
            continue

        cleaned.append(_sentence_case(trimmed))

    return "\n".join(cleaned)


def build_summary(content: str, max_length: int = SUMMARY_MAX_LENGTH) -> str:
    """본문 앞 3줄로 한 줄 요약 생성, 길면 말줄임표로 자름"""
    condensed = " ".join(content.split("\n")[:SUMMARY_MAX_LINES]).strip()
    if len(condensed) <= max_length:
        return condensed
    return f"{condensed[: max_length - 1].rstrip()}…"
