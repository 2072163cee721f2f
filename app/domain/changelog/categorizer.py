from app.domain.changelog.constants import (
    ADDED_KEYWORDS,
    ADDED_PREFIXES,
    CHANGED_KEYWORDS,
    CHANGED_PREFIXES,
    FIXED_KEYWORDS,
    FIXED_PREFIXES,
    NO_CHANGES_TEXT,
    SECTION_ORDER,
)
from app.domain.changelog.schemas import Commit

_RULES = (
    ("Added", ADDED_KEYWORDS, ADDED_PREFIXES),
    ("Fixed", FIXED_KEYWORDS, FIXED_PREFIXES),
    ("Changed", CHANGED_KEYWORDS, CHANGED_PREFIXES),
)


def first_line(message: str) -> str:
    lines = message.split("\n")
    return lines[0].strip()


def categorize_commit(message: str) -> str:
    """커밋 제목 키워드로 섹션 결정

    Added, Fixed, Changed 순서로 먼저 일치하는 섹션을 반환하고
    아무것도 일치하지 않으면 Other
    """
    lowered = first_line(message).lower()
    for section, keywords, prefixes in _RULES:
        if any(keyword in lowered for keyword in keywords) or lowered.startswith(prefixes):
            return section
    return "Other"


def generate_basic_changelog(commits: list[Commit], version_label: str) -> str:
    """LLM 없이 규칙 기반으로 체인지로그 Markdown 생성"""
    if not commits:
        return f"## {version_label}\n\n{NO_CHANGES_TEXT}"

    sections: dict[str, list[str]] = {name: [] for name in SECTION_ORDER}
    for commit in commits:
        sections[categorize_commit(commit.message)].append(first_line(commit.message))

    lines = [f"## {version_label}", ""]
    for name in SECTION_ORDER:
        messages = sections[name]
        if not messages:
            continue
        lines.append(f"### {name}")
        lines.append("")
        lines.extend(f"- {msg}" for msg in messages)
        lines.append("")

    return "\n".join(lines)
