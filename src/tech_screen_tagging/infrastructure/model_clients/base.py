"""
Model client base class and retry mixin

Defines the abstract base class inherited by all model clients
and the RetryMixin that consolidates shared retry logic.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

from tech_screen_tagging.domain.value_objects import ModelResponse

T = TypeVar("T")


class RetryMixin:
    """Exponential backoff retry. Subclasses set self.max_retries and self.retry_delay_seconds."""

    max_retries: int = 1
    retry_delay_seconds: float = 1.0

    async def _with_retry(
        self,
        fn: Callable[[], Awaitable[T]],
        retryable_exceptions: tuple[type[BaseException], ...] = (Exception,),
    ) -> T:
        """
        Execute with exponential backoff retry.

        Args:
            fn: The coroutine function to retry (a callable with no arguments)
            retryable_exceptions: Tuple of exception types eligible for retry

        Returns:
            The awaited return value of fn()

        Raises:
            ValueError: If max_retries is less than 1
            Exception: The last exception if max retries are exceeded
        """
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1.")

        last_exception: BaseException | None = None
        for attempt in range(self.max_retries):
            try:
                return await fn()
            except retryable_exceptions as e:
                last_exception = e
                if attempt < self.max_retries - 1:
                    await asyncio.sleep(self.retry_delay_seconds * 2 ** attempt)

        assert last_exception is not None
        raise last_exception


class ModelClient(ABC):
    """Abstract base class for model clients"""

    model_name: str

    @abstractmethod
    async def generate(self, prompt: str) -> ModelResponse:
        """Send a prompt and retrieve the response"""
        pass
