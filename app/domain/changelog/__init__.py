from app.domain.changelog.categorizer import categorize_commit, generate_basic_changelog
from app.domain.changelog.formatter import format_commits_for_prompt
from app.domain.changelog.normalizer import process_commits, truncate_commits
from app.domain.changelog.postprocess import post_process_changelog
from app.domain.changelog.schemas import (
    ChangelogDraft,
    Commit,
    CommitAuthor,
    GitHubRepo,
    ProcessedCommit,
)

__all__ = [
    "Commit",
    "CommitAuthor",
    "ProcessedCommit",
    "ChangelogDraft",
    "GitHubRepo",
    "truncate_commits",
    "process_commits",
    "format_commits_for_prompt",
    "categorize_commit",
    "generate_basic_changelog",
    "post_process_changelog",
]
