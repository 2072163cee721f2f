from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from app.core.config import Settings, settings
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.errors import ProviderError, ProviderErrorKind


class OpenAIClient(BaseLLMClient):
    """OpenAI API 클라이언트 - 1순위 생성용"""

    provider_name = "OpenAI"

    def __init__(self, config: Settings = settings):
        if not config.openai_api_key:
            raise ProviderError(
                ProviderErrorKind.AUTH_ERROR,
                self.provider_name,
                "OpenAI API key is not configured",
            )

        self._model_name = config.openai_model
        self._model = ChatOpenAI(
            model=config.openai_model,
            api_key=config.openai_api_key,
            timeout=config.openai_timeout,
            temperature=config.llm_temperature,
            max_tokens=config.llm_max_tokens,
            max_retries=0,
        )

    def get_chat_model(self) -> BaseChatModel:
        """LangChain ChatOpenAI 모델 반환"""
        return self._model

    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        return self._model_name
