"""
Stub tagger

Placeholder that simulates a slow remote call and finds nothing.
"""

import asyncio

from tech_screen_tagging.infrastructure.taggers.base import Tagger


class StubTagger(Tagger):
    """Waits delay_seconds, then returns no technologies"""

    name = "stub"

    def __init__(self, delay_seconds: float = 2.0) -> None:
        self.delay_seconds = delay_seconds

    async def tag(self, input_text: str, augmentation: dict | None = None) -> list[str]:
        await asyncio.sleep(self.delay_seconds)
        return []
