from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Which Topic Service implementation backs the navigation controller.
    # "remote" is client-side only: it talks to a running Topic Service over HTTP.
    TOPIC_PROVIDER: Literal["mock", "generative", "remote"] = "mock"
    TOPIC_SERVICE_URL: str = "http://localhost:8000"

    # LLM Configuration (only read by the generative provider)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"
    LLM_TEMPERATURE: float = 0.0

    # Menu size bounds for generated menus
    MENU_MIN_ITEMS: int = 2
    MENU_MAX_ITEMS: int = 6

    # Simulated round-trip of the mock service
    MOCK_LATENCY_SECONDS: float = 0.5

    # None keeps requests unbounded: a stuck Topic Service call stays Loading
    REQUEST_TIMEOUT_SECONDS: Optional[float] = None
    HTTP_TIMEOUT_SECONDS: float = 20.0

    LOG_LEVEL: str = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
