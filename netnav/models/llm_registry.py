"""Task-to-model registry via OpenRouter.

Every collaborator task (classification, extraction, explanation, QA) maps
to a model chosen for that task's latency/quality trade-off.
"""

from __future__ import annotations

from dataclasses import dataclass

from langchain_openai import ChatOpenAI

from netnav.config import Settings
from netnav.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ModelSpec:
    slug: str
    temperature: float
    purpose: str
    max_tokens: int | None = None


MODEL_CONFIG: dict[str, ModelSpec] = {
    "classifier": ModelSpec(
        slug="openai/gpt-4.1-mini",
        temperature=0.0,
        purpose="Coarse routing between graph, relational and knowledge questions",
        max_tokens=16,
    ),
    "intent_extractor": ModelSpec(
        slug="openai/gpt-4.1-mini",
        temperature=0.0,
        purpose="Operation, entity and parameter extraction for graph questions",
    ),
    "explainer": ModelSpec(
        slug="openai/gpt-4.1",
        temperature=0.3,
        purpose="Conversational explanation of structured graph results",
    ),
    "relational_qa": ModelSpec(
        slug="openai/gpt-4.1",
        temperature=0.0,
        purpose="Answers about how people relate, grounded in their shared history",
    ),
    "knowledge_qa": ModelSpec(
        slug="openai/gpt-4.1-mini",
        temperature=0.2,
        purpose="Open-ended questions about people's profiles and work",
    ),
}

FALLBACK_CHAINS: dict[str, list[str]] = {
    "openai/gpt-4.1": ["anthropic/claude-sonnet-4.6", "google/gemini-2.5-pro"],
    "openai/gpt-4.1-mini": ["google/gemini-2.5-flash", "anthropic/claude-sonnet-4.6"],
}


def _fallback_spec(task: str, primary: ModelSpec, slug: str) -> ModelSpec:
    """Same sampling settings as the primary, served by another provider."""
    return ModelSpec(
        slug=slug,
        temperature=primary.temperature,
        max_tokens=primary.max_tokens,
        purpose=f"Fallback for {task}",
    )


class LLMRegistry:
    """One OpenRouter-backed chat model per collaborator task, plus usage counters."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._slug_cache: dict[str, ChatOpenAI] = {}
        self._models: dict[str, ChatOpenAI] = {
            task: self._build_model(spec) for task, spec in MODEL_CONFIG.items()
        }
        self._call_stats: dict[str, dict] = {task: {"calls": 0, "tokens": 0} for task in MODEL_CONFIG}

    def _build_model(self, spec: ModelSpec) -> ChatOpenAI:
        key = f"{spec.slug}:{spec.temperature}:{spec.max_tokens}"
        model = self._slug_cache.get(key)
        if model is None:
            model = ChatOpenAI(
                model=spec.slug,
                openai_api_key=self._settings.OPENROUTER_API_KEY,
                openai_api_base=self._settings.OPENROUTER_BASE_URL,
                temperature=spec.temperature,
                max_tokens=spec.max_tokens,
                default_headers={"HTTP-Referer": "https://netnav.local", "X-Title": "netnav"},
            )
            self._slug_cache[key] = model
            logger.debug("model_built", slug=spec.slug, purpose=spec.purpose)
        return model

    def get_model(self, task: str) -> ChatOpenAI:
        """Primary model for a task; unknown tasks are a programming error."""
        try:
            return self._models[task]
        except KeyError:
            raise KeyError(f"No model registered for task '{task}'") from None

    def get_fallback_chain(self, task: str) -> list[ChatOpenAI]:
        spec = MODEL_CONFIG.get(task)
        if spec is None:
            return []
        return [
            self._build_model(_fallback_spec(task, spec, slug))
            for slug in FALLBACK_CHAINS.get(spec.slug, [])
        ]

    def record_usage(self, task: str, tokens: int) -> None:
        stats = self._call_stats.get(task)
        if stats is not None:
            stats["calls"] += 1
            stats["tokens"] += tokens

    @property
    def stats(self) -> dict[str, dict]:
        return {task: dict(counts) for task, counts in self._call_stats.items()}
