from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel

from app.core.config import Settings, settings
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.errors import ProviderError, ProviderErrorKind


class AnthropicClient(BaseLLMClient):
    """Anthropic API 클라이언트 - OpenAI 쿼터 초과 시 대체용"""

    provider_name = "Anthropic"

    def __init__(self, config: Settings = settings):
        if not config.anthropic_api_key:
            raise ProviderError(
                ProviderErrorKind.AUTH_ERROR,
                self.provider_name,
                "Anthropic API key is not configured",
            )

        self._model_name = config.anthropic_model
        self._model = ChatAnthropic(
            model=config.anthropic_model,
            api_key=config.anthropic_api_key,
            timeout=config.anthropic_timeout,
            temperature=config.llm_temperature,
            max_tokens=config.llm_max_tokens,
            max_retries=0,
        )

    def get_chat_model(self) -> BaseChatModel:
        """LangChain ChatAnthropic 모델 반환"""
        return self._model

    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        return self._model_name
