"""
Health Check

Verifies a tagger can answer before a batch is spent on it.
"""

import asyncio
import time

from tech_screen_tagging.domain.entities import HealthCheckResult
from tech_screen_tagging.infrastructure.taggers.base import Tagger


HEALTH_CHECK_DESCRIPTION = (
    "We are hiring a backend engineer with experience in Python, PostgreSQL and Docker."
)


async def check_tagger(
    tagger: Tagger,
    name: str | None = None,
    timeout_seconds: float = 30,
) -> HealthCheckResult:
    """
    Execute a health check for a tagger.

    Args:
        tagger: Tagger to check
        name: Display name (defaults to tagger.name)
        timeout_seconds: Time allowed for the probe call

    Returns:
        HealthCheckResult: Health check result
    """
    name = name or tagger.name
    start_time = time.time()
    try:
        await asyncio.wait_for(tagger.tag(HEALTH_CHECK_DESCRIPTION), timeout=timeout_seconds)
    except asyncio.TimeoutError:
        return HealthCheckResult(
            name=name,
            success=False,
            latency_ms=None,
            error=f"No answer within {timeout_seconds}s",
        )
    except Exception as e:
        return HealthCheckResult(
            name=name,
            success=False,
            latency_ms=None,
            error=str(e),
        )
    return HealthCheckResult(
        name=name,
        success=True,
        latency_ms=int((time.time() - start_time) * 1000),
        error=None,
    )
