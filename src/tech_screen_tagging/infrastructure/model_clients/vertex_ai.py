"""
Vertex AI (Google GenAI SDK) model client
"""

import os
import time

from google import genai
from google.genai import errors as genai_errors
from google.genai.types import GenerateContentConfig, HttpOptions

from tech_screen_tagging.domain.value_objects import ModelResponse
from tech_screen_tagging.infrastructure.model_clients.base import ModelClient, RetryMixin


class VertexAIClient(RetryMixin, ModelClient):
    """Model client using the Google GenAI SDK (via Vertex AI) async API"""

    def __init__(
        self,
        model_name: str,
        project_id: str | None = None,
        location: str | None = None,
        timeout_seconds: float = 30,
        max_retries: int = 1,
        retry_delay_seconds: float = 1.0,
    ):
        """
        Args:
            model_name: Model name (e.g. gemini-2.5-flash)
            project_id: GCP project ID (falls back to environment variable if not specified)
            location: Region (defaults to "global")
            timeout_seconds: HTTP timeout in seconds (default: 30)
            max_retries: Maximum number of attempts (default: 1)
            retry_delay_seconds: Base delay for exponential backoff
        """
        self.model_name = model_name
        self.project_id = project_id or os.environ.get("GCP_PROJECT_ID")
        self.location = location or "global"
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries
        self.retry_delay_seconds = retry_delay_seconds

        if not self.project_id:
            raise ValueError("GCP_PROJECT_ID is not set")

        # Timeout is configured via HttpOptions (milliseconds)
        self.client = genai.Client(
            vertexai=True,
            project=self.project_id,
            location=self.location,
            http_options=HttpOptions(timeout=int(timeout_seconds * 1000)),
        )

        # Set temperature=0 for reproducibility
        self.generation_config = GenerateContentConfig(temperature=0.0)

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
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=self.generation_config,
            )
            end_time = time.time()

            input_tokens = 0
            output_tokens = 0
            if getattr(response, "usage_metadata", None):
                input_tokens = getattr(response.usage_metadata, "prompt_token_count", 0) or 0
                output_tokens = getattr(response.usage_metadata, "candidates_token_count", 0) or 0

            return ModelResponse(
                output=(response.text or "").strip(),
                latency_ms=int((end_time - start_time) * 1000),
                model_name=self.model_name,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
            )

        return await self._with_retry(
            _call,
            retryable_exceptions=(genai_errors.ServerError,),
        )
