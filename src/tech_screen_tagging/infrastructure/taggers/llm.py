"""
LLM tagger

Asks a model for the technologies in a job description and parses its answer
into a tag list.
"""

from __future__ import annotations

import json
import logging
import re

from tech_screen_tagging.domain.errors import TagParseError
from tech_screen_tagging.infrastructure.model_clients.base import ModelClient
from tech_screen_tagging.infrastructure.taggers.base import Tagger
from tech_screen_tagging.prompt_builder import build_tagging_prompt
from tech_screen_tagging.scoring.blacklist import filter_technologies

logger = logging.getLogger(__name__)

# Longer free-text items are prose, not technology names
MAX_WORDS_PER_TAG = 4


class LLMTagger(Tagger):
    """Tagger backed by a ModelClient"""

    name = "llm"

    _CODE_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")
    _ARRAY_RE = re.compile(r"\[[\s\S]*\]")

    def __init__(
        self,
        client: ModelClient,
        vocabulary: list[str] | None = None,
        blacklist: list[str] | None = None,
    ) -> None:
        self._client = client
        self.vocabulary = vocabulary
        self.blacklist = blacklist

    async def tag(self, input_text: str, augmentation: dict | None = None) -> list[str]:
        prompt = build_tagging_prompt(input_text, vocabulary=self.vocabulary, augmentation=augmentation)
        response = await self._client.generate(prompt)
        logger.debug("%s answered in %dms", response.model_name, response.latency_ms)
        tags = self.parse_tags(response.output)
        return filter_technologies(tags, self.blacklist)

    @classmethod
    def parse_tags(cls, raw: str) -> list[str]:
        """
        Extract a tag list from a model response

        Parse order:
        1. JSON (array, or object with a "technologies" array), inside a code block if present
        2. First bracketed JSON array anywhere in the text
        3. Comma / newline separated list
        4. TagParseError

        Tags are stripped and de-duplicated case-insensitively (first spelling wins).
        """
        text = raw.strip()
        if not text:
            return []

        match = cls._CODE_BLOCK_RE.search(text)
        candidates = [match.group(1) if match else text]
        array_match = cls._ARRAY_RE.search(text)
        if array_match:
            candidates.append(array_match.group(0))

        for candidate in candidates:
            try:
                data = json.loads(candidate.strip())
            except (json.JSONDecodeError, ValueError):
                continue
            if isinstance(data, dict):
                data = data.get("technologies")
            if isinstance(data, list) and all(isinstance(item, str) for item in data):
                return cls._dedupe(data)

        # Free text is accepted only when it looks like a plain list
        if "{" not in text and "[" not in text:
            items = re.split(r"[,\n]", text)
            items = [re.sub(r"^\s*(?:[-*•]|\d+\.)\s*", "", item) for item in items]
            tags = cls._dedupe(items)
            if tags and all(len(tag.split()) <= MAX_WORDS_PER_TAG for tag in tags):
                return tags

        raise TagParseError(f"Failed to parse technologies from model response: {text[:200]}")

    @staticmethod
    def _dedupe(items: list[str]) -> list[str]:
        seen: set[str] = set()
        tags = []
        for item in items:
            tag = item.strip().strip('"').strip()
            if tag and tag.lower() not in seen:
                seen.add(tag.lower())
                tags.append(tag)
        return tags
