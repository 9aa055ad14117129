"""
LMStudio (OpenAI-compatible API) model client
"""

import os
import time

import openai
from openai import AsyncOpenAI

from tech_screen_tagging.domain.value_objects import ModelResponse
from tech_screen_tagging.infrastructure.model_clients.base import ModelClient, RetryMixin


class LMStudioClient(RetryMixin, ModelClient):
    """Client using LMStudio (or any OpenAI-compatible endpoint)"""

    def __init__(
        self,
        model_name: str,
        base_url: str | None = None,
        api_key: str | None = None,
        max_retries: int = 1,
        retry_delay_seconds: float = 1.0,
        max_tokens: int = 1024,
    ):
        """
        Args:
            model_name: Model name (e.g. lmstudio/qwen2.5-7b)
            base_url: API endpoint (falls back to LMSTUDIO_BASE_URL env var if not specified)
            api_key: API key (falls back to LMSTUDIO_API_KEY env var; usually not required for LMStudio)
            max_retries: Maximum number of attempts (default: 1)
            retry_delay_seconds: Base delay for exponential backoff
            max_tokens: Maximum number of tokens (default: 1024)
        """
        self.model_name = model_name
        # Strip the lmstudio/ prefix to get the model name for the API
        self.api_model_name = model_name.removeprefix("lmstudio/")
        self.max_retries = max_retries
        self.retry_delay_seconds = retry_delay_seconds
        self.max_tokens = max_tokens

        # Configuration priority: argument > environment variable > default value
        self.base_url = base_url or os.environ.get("LMSTUDIO_BASE_URL", "http://localhost:1234/v1")
        api_key = api_key or os.environ.get("LMSTUDIO_API_KEY", "lm-studio")

        self.client = AsyncOpenAI(base_url=self.base_url, api_key=api_key)

    async def generate(self, prompt: str) -> ModelResponse:
        """
        Send a prompt and retrieve the response

        Args:
            prompt: Input prompt

        Returns:
            ModelResponse: The model's response

        Raises:
            Exception: If the maximum number of retries is exceeded
        """
        async def _call():
            start_time = time.time()
            response = await self.client.chat.completions.create(
                model=self.api_model_name,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.0,
                max_tokens=self.max_tokens,
            )
            end_time = time.time()

            input_tokens = 0
            output_tokens = 0
            if response.usage:
                input_tokens = response.usage.prompt_tokens or 0
                output_tokens = response.usage.completion_tokens or 0

            return ModelResponse(
                output=(response.choices[0].message.content or "").strip(),
                latency_ms=int((end_time - start_time) * 1000),
                model_name=self.model_name,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
            )

        return await self._with_retry(
            _call,
            retryable_exceptions=(
                openai.APIConnectionError,
                openai.RateLimitError,
                openai.APIStatusError,
            ),
        )
