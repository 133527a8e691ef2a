from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenRouter
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"

    # Neo4j (similarity search over stored person embeddings)
    NEO4J_URI: str = "bolt://neo4j:7687"
    NEO4J_USER: str = "neo4j"
    NEO4J_PASSWORD: str = "netnav_dev"
    NEO4J_VECTOR_INDEX: str = "person_embeddings"

    # Redis
    REDIS_URL: str = "redis://redis:6379/0"

    # LangSmith
    LANGSMITH_API_KEY: str = ""
    LANGSMITH_PROJECT: str = "netnav"
    LANGCHAIN_TRACING_V2: bool = False

    # Query pipeline
    CACHE_ENABLED: bool = True
    CACHE_TTL_SECONDS: int = 300
    HISTORY_WINDOW: int = Field(default=3, description="Recent chat messages forwarded to collaborators")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="json", description="'json' for production, 'console' for dev")


def get_settings() -> Settings:
    return Settings()
