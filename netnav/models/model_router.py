"""Task-level model invocation with fallback chains and LangSmith tracing."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Any

from langsmith import traceable

from netnav.models.llm_registry import LLMRegistry
from netnav.utils.exceptions import DownstreamFailure, ModelTimeoutError
from netnav.utils.logging import get_logger

if TYPE_CHECKING:
    from langchain_core.messages import BaseMessage

logger = get_logger(__name__)

DEFAULT_CALL_TIMEOUT_SECONDS = 30.0


def _total_tokens(result: object) -> int:
    usage = getattr(result, "usage_metadata", None)
    if isinstance(usage, dict):
        return int(usage.get("total_tokens") or 0)
    return 0


class ModelRouter:
    """Tries a task's primary model, then each fallback, until one answers.

    Every attempt is bounded by ``call_timeout``. If the whole chain fails
    the last error decides the exception type, so callers can tell a slow
    provider apart from a broken one.
    """

    def __init__(
        self,
        registry: LLMRegistry,
        *,
        call_timeout: float = DEFAULT_CALL_TIMEOUT_SECONDS,
    ) -> None:
        self._registry = registry
        self._call_timeout = call_timeout

    def _chain(self, task: str) -> list[tuple[str, Any]]:
        chain = [("primary", self._registry.get_model(task))]
        chain.extend(
            (f"fallback-{i}", model)
            for i, model in enumerate(self._registry.get_fallback_chain(task))
        )
        return chain

    async def _attempt(
        self,
        model: Any,
        messages: list[BaseMessage],
        structured_output: type | None,
    ) -> object:
        runnable = model.with_structured_output(structured_output) if structured_output else model
        return await asyncio.wait_for(runnable.ainvoke(messages), timeout=self._call_timeout)

    @traceable(run_type="chain", name="model_router_invoke")
    async def invoke(
        self,
        task: str,
        messages: list[BaseMessage],
        *,
        structured_output: type | None = None,
    ) -> object:
        """Invoke the model for a task, falling back on failure.

        Args:
            task: Registry task name, e.g. "classifier" or "explainer".
            messages: Chat messages to send.
            structured_output: Optional Pydantic model class for structured output.

        Raises:
            ModelTimeoutError: the last model in the chain timed out.
            DownstreamFailure: the last model in the chain failed otherwise.
        """
        last_error: Exception | None = None

        for label, model in self._chain(task):
            start = time.monotonic()
            try:
                result = await self._attempt(model, messages, structured_output)
            except Exception as exc:
                last_error = exc
                logger.error(
                    "model_invoke_failed",
                    task=task,
                    label=label,
                    model=model.model_name,
                    error=str(exc) or type(exc).__name__,
                )
                continue

            tokens = _total_tokens(result)
            self._registry.record_usage(task, tokens)
            log = logger.debug if label == "primary" else logger.warning
            log(
                "model_invoked" if label == "primary" else "model_fallback_used",
                task=task,
                label=label,
                model=model.model_name,
                tokens=tokens,
                elapsed_ms=int((time.monotonic() - start) * 1000),
            )
            return result

        if isinstance(last_error, (TimeoutError, asyncio.TimeoutError)):
            raise ModelTimeoutError(f"Model call timed out for task '{task}'") from last_error
        raise DownstreamFailure(f"All models failed for task '{task}': {last_error}") from last_error
