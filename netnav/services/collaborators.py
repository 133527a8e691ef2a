"""External collaborator interfaces and their LLM-backed implementations.

The orchestrator only depends on the protocols below; tests substitute
in-memory fakes and production wires the ``LLM*`` classes to a
``ModelRouter``.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import ValidationError

from netnav.agent.prompts.classifier import CLASSIFIER_SYSTEM_PROMPT
from netnav.agent.prompts.extractor import EXTRACTOR_SYSTEM_PROMPT
from netnav.agent.prompts.qa import KNOWLEDGE_QA_SYSTEM_PROMPT, RELATIONAL_QA_SYSTEM_PROMPT
from netnav.models.graph import Person
from netnav.models.model_router import ModelRouter
from netnav.models.schemas import HistoryMessage, IntentRequest
from netnav.utils.exceptions import ModelResponseParsingError
from netnav.utils.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Classifier(Protocol):
    async def classify(self, text: str, history: list[HistoryMessage]) -> str: ...


@runtime_checkable
class IntentExtractor(Protocol):
    async def extract(
        self,
        text: str,
        history: list[HistoryMessage],
        current_user_name: str,
        known_names: list[str],
    ) -> IntentRequest: ...


@runtime_checkable
class SimilarityService(Protocol):
    async def find_similar(self, person_id: str, count: int) -> Sequence[Person | str]: ...


@runtime_checkable
class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


@runtime_checkable
class RelationalAnswerer(Protocol):
    async def answer(self, text: str, history: list[HistoryMessage]) -> str: ...


@runtime_checkable
class KnowledgeAnswerer(Protocol):
    async def answer(self, text: str, history: list[HistoryMessage]) -> str: ...


def format_history(history: list[HistoryMessage]) -> str:
    if not history:
        return "(no previous messages)"
    return "\n".join(f"{m.sender}: {m.message}" for m in history)


def _text_of(result: object) -> str:
    content = getattr(result, "content", result)
    return content if isinstance(content, str) else str(content)


class LLMClassifier:
    def __init__(self, router: ModelRouter) -> None:
        self._router = router

    async def classify(self, text: str, history: list[HistoryMessage]) -> str:
        result = await self._router.invoke(
            "classifier",
            [
                SystemMessage(content=CLASSIFIER_SYSTEM_PROMPT.format(history=format_history(history))),
                HumanMessage(content=text),
            ],
        )
        return _text_of(result).strip()


class LLMIntentExtractor:
    def __init__(self, router: ModelRouter) -> None:
        self._router = router

    async def extract(
        self,
        text: str,
        history: list[HistoryMessage],
        current_user_name: str,
        known_names: list[str],
    ) -> IntentRequest:
        prompt = EXTRACTOR_SYSTEM_PROMPT.format(
            current_user_name=current_user_name,
            known_names="\n".join(f"- {name}" for name in known_names),
            history=format_history(history),
        )
        result = await self._router.invoke(
            "intent_extractor",
            [SystemMessage(content=prompt), HumanMessage(content=text)],
            structured_output=IntentRequest,
        )
        if isinstance(result, IntentRequest):
            return result
        try:
            return IntentRequest.model_validate(result)
        except ValidationError as exc:
            logger.error("intent_schema_invalid", errors=exc.error_count())
            raise ModelResponseParsingError("Intent extractor returned an invalid payload") from exc


class LLMTextGenerator:
    def __init__(self, router: ModelRouter, task: str = "explainer") -> None:
        self._router = router
        self._task = task

    async def generate(self, prompt: str) -> str:
        result = await self._router.invoke(self._task, [HumanMessage(content=prompt)])
        return _text_of(result)


class _LLMAnswerer:
    task: str = ""
    system_prompt: str = ""

    def __init__(self, router: ModelRouter) -> None:
        self._router = router

    async def answer(self, text: str, history: list[HistoryMessage]) -> str:
        result = await self._router.invoke(
            self.task,
            [
                SystemMessage(content=self.system_prompt.format(history=format_history(history))),
                HumanMessage(content=text),
            ],
        )
        return _text_of(result)


class LLMRelationalAnswerer(_LLMAnswerer):
    task = "relational_qa"
    system_prompt = RELATIONAL_QA_SYSTEM_PROMPT


class LLMKnowledgeAnswerer(_LLMAnswerer):
    task = "knowledge_qa"
    system_prompt = KNOWLEDGE_QA_SYSTEM_PROMPT
