from pydantic import BaseModel, Field


class CommitAuthor(BaseModel):
    """커밋 작성자 정보"""

    name: str | None = None
    email: str | None = None
    date: str | None = None


class Commit(BaseModel):
    """GitHub에서 조회한 원본 커밋"""

    sha: str = ""
    message: str = ""
    author: CommitAuthor = Field(default_factory=CommitAuthor)
    url: str | None = None
    date: str | None = None

    class Config:
        frozen = True


class ProcessedCommit(BaseModel):
    """프롬프트용으로 정리된 커밋"""

    title: str
    description: str = ""
    context: str = ""


class ChangelogDraft(BaseModel):
    """체인지로그 생성 결과"""

    changelog: str
    ai_used: bool = False
    fallback_reason: str | None = None


class GitHubRepo(BaseModel):
    """GitHub 레포지토리 요약 정보"""

    id: int
    name: str
    full_name: str
    owner: str
    description: str | None = None
    html_url: str
    private: bool = False
    default_branch: str = "main"
