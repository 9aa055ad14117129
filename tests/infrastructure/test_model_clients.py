"""
Tests for model clients

Covers the async retry behaviour of RetryMixin._with_retry() and the
create_client() factory branches.
"""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from tech_screen_tagging.harness_config import HarnessConfig
from tech_screen_tagging.infrastructure.model_clients.base import RetryMixin
from tech_screen_tagging.infrastructure.model_clients.claude import ClaudeClient
from tech_screen_tagging.infrastructure.model_clients.factory import create_client
from tech_screen_tagging.infrastructure.model_clients.lmstudio import LMStudioClient
from tech_screen_tagging.infrastructure.model_clients.vertex_ai import VertexAIClient


class TestRetryMixin:
    """Tests for RetryMixin._with_retry()"""

    def _make_mixin(self, max_retries=3, retry_delay_seconds=1.0):
        mixin = RetryMixin()
        mixin.max_retries = max_retries
        mixin.retry_delay_seconds = retry_delay_seconds
        return mixin

    @patch("tech_screen_tagging.infrastructure.model_clients.base.asyncio.sleep", new_callable=AsyncMock)
    def test_success_on_first_attempt(self, mock_sleep):
        """Returns the value without retrying"""
        mixin = self._make_mixin()
        fn = AsyncMock(return_value="ok")

        result = asyncio.run(mixin._with_retry(fn))

        assert result == "ok"
        fn.assert_awaited_once()
        mock_sleep.assert_not_called()

    @patch("tech_screen_tagging.infrastructure.model_clients.base.asyncio.sleep", new_callable=AsyncMock)
    def test_success_after_two_failures(self, mock_sleep):
        """Fails twice, succeeds on the third attempt with exponential backoff"""
        mixin = self._make_mixin(max_retries=3, retry_delay_seconds=1.0)
        fn = AsyncMock(side_effect=[ValueError("1"), ValueError("2"), "ok"])

        result = asyncio.run(mixin._with_retry(fn))

        assert result == "ok"
        assert fn.await_count == 3
        assert mock_sleep.await_count == 2
        mock_sleep.assert_any_await(1.0)  # 1.0 * 2 ** 0
        mock_sleep.assert_any_await(2.0)  # 1.0 * 2 ** 1

    @patch("tech_screen_tagging.infrastructure.model_clients.base.asyncio.sleep", new_callable=AsyncMock)
    def test_raises_after_all_retries_exhausted(self, mock_sleep):
        """Raises the last exception when every attempt fails"""
        mixin = self._make_mixin(max_retries=3)
        fn = AsyncMock(side_effect=[ValueError("1"), ValueError("2"), ValueError("final")])

        with pytest.raises(ValueError, match="final"):
            asyncio.run(mixin._with_retry(fn))

        assert fn.await_count == 3

    @patch("tech_screen_tagging.infrastructure.model_clients.base.asyncio.sleep", new_callable=AsyncMock)
    def test_single_attempt_default(self, mock_sleep):
        """With the default max_retries=1 there is exactly one attempt"""
        mixin = RetryMixin()
        fn = AsyncMock(side_effect=ValueError("once"))

        with pytest.raises(ValueError, match="once"):
            asyncio.run(mixin._with_retry(fn))

        fn.assert_awaited_once()
        mock_sleep.assert_not_called()

    def test_max_retries_zero_raises_value_error(self):
        """max_retries=0 raises ValueError immediately"""
        mixin = self._make_mixin(max_retries=0)
        fn = AsyncMock(return_value="ok")

        with pytest.raises(ValueError, match="max_retries must be at least 1"):
            asyncio.run(mixin._with_retry(fn))

        fn.assert_not_called()

    @patch("tech_screen_tagging.infrastructure.model_clients.base.asyncio.sleep", new_callable=AsyncMock)
    def test_retryable_exceptions_filter(self, mock_sleep):
        """Exceptions outside retryable_exceptions are raised immediately"""
        mixin = self._make_mixin(max_retries=3)
        fn = AsyncMock(side_effect=TypeError("not retryable"))

        with pytest.raises(TypeError, match="not retryable"):
            asyncio.run(mixin._with_retry(fn, retryable_exceptions=(ValueError,)))

        fn.assert_awaited_once()
        mock_sleep.assert_not_called()


class TestCreateClient:
    """Tests for the create_client() factory"""

    def test_gemini_model_returns_vertex_ai_client(self):
        config = HarnessConfig()
        config.vertex.project_id = "test-project"
        client = create_client("gemini-2.5-flash", config=config)
        assert isinstance(client, VertexAIClient)
        assert client.project_id == "test-project"

    @patch.dict("os.environ", {"ANTHROPIC_API_KEY": "test-key"})
    def test_claude_model_returns_claude_client(self):
        client = create_client("claude-haiku-4-5-20251001", config=HarnessConfig())
        assert isinstance(client, ClaudeClient)
        assert client.max_retries == 1

    def test_lmstudio_model_returns_lmstudio_client(self):
        client = create_client("lmstudio/qwen2.5-7b", config=HarnessConfig())
        assert isinstance(client, LMStudioClient)
        assert client.api_model_name == "qwen2.5-7b"

    def test_retry_settings_are_passed_through(self):
        config = HarnessConfig()
        config.tagger.max_retries = 4
        config.tagger.retry_delay_seconds = 0.5
        client = create_client("lmstudio/qwen2.5-7b", config=config)
        assert client.max_retries == 4
        assert client.retry_delay_seconds == 0.5

    @patch.dict("os.environ", {}, clear=True)
    def test_claude_without_api_key_raises(self):
        with pytest.raises(ValueError, match="ANTHROPIC_API_KEY"):
            create_client("claude-haiku-4-5-20251001", config=HarnessConfig())


class TestLMStudioGenerate:
    def test_generate_maps_response(self):
        client = LMStudioClient("lmstudio/qwen2.5-7b")
        completion = MagicMock()
        completion.choices[0].message.content = ' ["Python"] '
        completion.usage.prompt_tokens = 12
        completion.usage.completion_tokens = 3
        client.client = MagicMock()
        client.client.chat.completions.create = AsyncMock(return_value=completion)

        response = asyncio.run(client.generate("prompt"))

        assert response.output == '["Python"]'
        assert response.model_name == "lmstudio/qwen2.5-7b"
        assert response.input_tokens == 12
        assert response.output_tokens == 3
