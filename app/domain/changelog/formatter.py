from app.domain.changelog.constants import COMMIT_SEPARATOR, EMPTY_DESCRIPTION_PLACEHOLDER
from app.domain.changelog.schemas import ProcessedCommit


def format_commit(index: int, commit: ProcessedCommit) -> str:
    """단일 커밋을 라벨이 붙은 레코드로 포맷"""
    lines = [f"[Commit {index}]", f"Title: {commit.title}"]

    if commit.description.strip():
        lines.append("Description:")
        lines.append(commit.description)
    else:
        lines.append(f"Description: {EMPTY_DESCRIPTION_PLACEHOLDER}")

    if commit.context:
        lines.append(f"Context: {commit.context}")

    return "\n".join(lines) + "\n"


def format_commits_for_prompt(processed_commits: list[ProcessedCommit]) -> str:
    """정리된 커밋 목록을 프롬프트용 텍스트로 포맷"""
    return COMMIT_SEPARATOR.join(
        format_commit(idx, commit) for idx, commit in enumerate(processed_commits, start=1)
    )
