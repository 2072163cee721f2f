from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    environment: str = "development"

    # OpenAI 설정 - 1순위 프로바이더
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    openai_timeout: float = 60.0

    # Anthropic 설정 - OpenAI 쿼터 초과 시 2순위 프로바이더
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-3-5-sonnet-20241022"
    anthropic_timeout: float = 60.0

    # 체인지로그 생성 설정
    llm_max_tokens: int = 1500
    llm_temperature: float = 0.7
    generation_timeout: float = 90.0
    changelog_max_commits: int = 50  # 줄이는 것만 가능, 50 초과 값은 50으로 적용

    # GitHub
    github_timeout: float = 30.0
    github_max_concurrent_requests: int = 5

    # 요청 제한
    generate_rate_limit: str = "10/minute"

    # 로깅 설정
    log_level: str = "INFO"

    # CORS 설정
    cors_allowed_origins: str = ""

    # Langfuse 설정
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def has_llm_provider(self) -> bool:
        return bool(self.openai_api_key or self.anthropic_api_key)

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    def validate_for_production(self) -> list[str]:
        """프로덕션 환경에서 필수 설정 검증 후 누락된 항목 반환"""
        errors = []
        if not self.has_llm_provider:
            errors.append("OPENAI_API_KEY 또는 ANTHROPIC_API_KEY")
        if not self.cors_allowed_origins:
            errors.append("CORS_ALLOWED_ORIGINS")
        return errors

    @model_validator(mode="after")
    def validate_generation_settings(self):
        """생성 관련 수치 설정 검증"""
        if self.changelog_max_commits < 1:
            raise ValueError("CHANGELOG_MAX_COMMITS는 1 이상이어야 합니다")
        if self.llm_max_tokens < 1:
            raise ValueError("LLM_MAX_TOKENS는 1 이상이어야 합니다")
        return self


settings = Settings()
