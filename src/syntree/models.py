from enum import Enum

import anthropic
import httpx
import openai
from attrs import frozen
from langchain_anthropic import ChatAnthropic
from langchain_core.caches import BaseCache
from langchain_core.language_models import BaseChatModel
from langchain_core.rate_limiters import BaseRateLimiter, InMemoryRateLimiter
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from syntree.config import SynTreeSettings, get_settings


class Provider(Enum):
    anthropic = "anthropic"
    google = "google"
    openai = "OpenAI"


@frozen
class ModelParam:
    provider: Provider
    model: str
    temperature: float | None = None


chat_models_classes = {
    Provider.openai: ChatOpenAI,
    Provider.google: ChatGoogleGenerativeAI,
    Provider.anthropic: ChatAnthropic,
}

# Request timeouts raised by the provider clients
PROVIDER_TIMEOUT_ERRORS = (
    openai.APITimeoutError,
    anthropic.APITimeoutError,
    httpx.TimeoutException,
)


def make_rate_limiter(requests_per_second: float) -> InMemoryRateLimiter:
    """Build a limiter that spaces requests at least ``1 / requests_per_second`` apart."""
    return InMemoryRateLimiter(
        requests_per_second=requests_per_second,
        check_every_n_seconds=max(0.1, 1.0 / requests_per_second),
        max_bucket_size=1,
    )


class LLMProvider:
    """Registry/factory for the chat models behind LLM-backed capabilities.

    Responsibilities:
      - Maintain a mapping of logical model name -> `ModelParam` config.
      - Instantiate provider specific LangChain classes on demand, wiring in
        the caller's rate limiter and response cache.

    Notes:
      - Does not cache instantiated models; the owning capability decides
        their lifecycle.
    """

    def __init__(self, default_model_params: dict[str, ModelParam] | None = None):
        self._model_params = (default_model_params or {}).copy()

    @classmethod
    def from_settings(cls, settings: SynTreeSettings | None = None) -> "LLMProvider":
        """Create a provider with the configured tagger model registered.

        Params:
            settings: Configuration to read; defaults to the environment settings.

        Returns:
            Provider with one model registered under `settings.tagger_model`.
        """
        settings = settings or get_settings()
        return cls(
            {
                settings.tagger_model: ModelParam(
                    provider=Provider(settings.tagger_provider),
                    model=settings.tagger_model_name,
                    temperature=settings.tagger_temperature,
                )
            }
        )

    def get_llm(
        self,
        name: str,
        rate_limiter: BaseRateLimiter | None = None,
        cache: BaseCache | bool | None = None,
        timeout: float | None = None,
    ) -> BaseChatModel:
        """Get a chat (LLM) model by its registered name.

        Params:
            name: Logical model key registered in provider configuration.
            rate_limiter: Optional rate limiter to pace API calls.
            cache: Optional response cache; identical requests are answered from it.
            timeout: Optional request timeout in seconds.

        Returns:
            Instantiated chat model (`BaseChatModel`).

        Raises:
            KeyError: If the model name is not registered.
        """
        if name not in self._model_params:
            raise KeyError(
                f"Model {name} is not defined in the provider. Available models: {self.list_models()}"
            )
        model_params = self._model_params[name]
        model_class = chat_models_classes[model_params.provider]
        return model_class(
            model=model_params.model,
            temperature=model_params.temperature,
            rate_limiter=rate_limiter,
            cache=cache,
            timeout=timeout,
        )

    def list_models(self) -> list[str]:
        return list(self._model_params.keys())

    def set_model(self, name: str, model_params: ModelParam) -> None:
        """Insert a new model configuration or overwrite an existing one."""
        self._model_params[name] = model_params
