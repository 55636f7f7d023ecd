"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Choosing the Topic Service implementation named by TOPIC_PROVIDER.
2. Wiring it to the shared session repository and, for the generative
   provider, to the LLM adapter.
3. Building NavigationControllers for client code on top of that choice.

The FastAPI getters are @lru_cache'd so each service is created once per
process; tests swap them through `app.dependency_overrides`.
"""


from functools import lru_cache
from typing import Optional

from fastapi import Depends

from ..config import Settings, settings
from ..llm.interface import LLMProvider
from ..llm.adapters.openai_adapter import OpenAIAdapter
from ..navigation.controller import NavigationController
from ..repositories.session import TopicSessionRepository, InMemoryTopicSessionRepository
from ..topics.interface import TopicService
from ..topics.generative import GenerativeTopicService
from ..topics.mock import MockTopicService
from ..topics.remote import RemoteTopicService


def build_llm_provider(config: Settings) -> LLMProvider:
    if not config.OPENAI_API_KEY:
        raise RuntimeError("OPENAI_API_KEY is required when TOPIC_PROVIDER=generative")
    return OpenAIAdapter(api_key=config.OPENAI_API_KEY, model_name=config.OPENAI_MODEL)


def build_topic_service(
    config: Settings,
    repository: Optional[TopicSessionRepository] = None,
    llm: Optional[LLMProvider] = None,
) -> TopicService:
    """
    Instantiates the Topic Service named by `config.TOPIC_PROVIDER`.
    """
    provider = config.TOPIC_PROVIDER
    if provider == "mock":
        return MockTopicService(repository=repository, latency=config.MOCK_LATENCY_SECONDS)
    if provider == "generative":
        return GenerativeTopicService(
            llm_provider=llm or build_llm_provider(config),
            repository=repository,
            min_items=config.MENU_MIN_ITEMS,
            max_items=config.MENU_MAX_ITEMS,
            temperature=config.LLM_TEMPERATURE,
        )
    if provider == "remote":
        return RemoteTopicService(
            base_url=config.TOPIC_SERVICE_URL, timeout=config.HTTP_TIMEOUT_SECONDS
        )
    raise ValueError(f"Unknown topic provider '{provider}'")


def build_controller(
    config: Settings = settings,
    topic_service: Optional[TopicService] = None,
) -> NavigationController:
    """Client-side entry point: a controller wired to the configured Topic Service."""
    return NavigationController(
        topic_service=topic_service or build_topic_service(config),
        request_timeout=config.REQUEST_TIMEOUT_SECONDS,
    )


# Session Repository (Singleton)
# Note: In-memory storage must be a singleton so data persists across requests!
@lru_cache()
def get_session_repository() -> TopicSessionRepository:
    return InMemoryTopicSessionRepository()


# The Topic Service (Singleton Service)
@lru_cache()
def get_topic_service(
    repository: TopicSessionRepository = Depends(get_session_repository),
) -> TopicService:
    if settings.TOPIC_PROVIDER == "remote":
        # Serving a remote provider would only proxy requests back to a server
        raise RuntimeError("TOPIC_PROVIDER=remote cannot back the Topic Service API")
    return build_topic_service(settings, repository=repository)
