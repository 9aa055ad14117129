"""Tests for the tagger health check"""

import asyncio

from unittest.mock import AsyncMock, MagicMock

from tech_screen_tagging.use_cases.health_check import HEALTH_CHECK_DESCRIPTION, check_tagger


def _tagger(**kwargs) -> MagicMock:
    tagger = MagicMock()
    tagger.name = "mock"
    tagger.tag = AsyncMock(**kwargs)
    return tagger


class TestCheckTagger:
    def test_success(self):
        tagger = _tagger(return_value=["Python"])

        result = asyncio.run(check_tagger(tagger, "mock-model"))

        assert result.success is True
        assert result.name == "mock-model"
        assert result.latency_ms is not None
        assert result.error is None
        tagger.tag.assert_awaited_once_with(HEALTH_CHECK_DESCRIPTION)

    def test_failure(self):
        tagger = _tagger(side_effect=ConnectionError("unreachable"))

        result = asyncio.run(check_tagger(tagger))

        assert result.success is False
        assert result.name == "mock"
        assert result.latency_ms is None
        assert "unreachable" in result.error

    def test_timeout(self):
        async def _never(*args, **kwargs):
            await asyncio.sleep(10)

        tagger = MagicMock()
        tagger.name = "slow"
        tagger.tag = _never

        result = asyncio.run(check_tagger(tagger, timeout_seconds=0.01))

        assert result.success is False
        assert "No answer" in result.error
