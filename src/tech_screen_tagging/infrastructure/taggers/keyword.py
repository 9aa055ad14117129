"""
Keyword tagger

Rule-based tagger that reports every catalog technology mentioned in the text.
"""

from __future__ import annotations

import re

from tech_screen_tagging.infrastructure.taggers.base import Tagger
from tech_screen_tagging.scoring.blacklist import filter_technologies


def _keyword_pattern(term: str) -> re.Pattern:
    """
    Compile a case-insensitive pattern for a technology name.

    Word characters must not touch the match on either side, so "Go" does not
    match "Google" while "C++" and ".NET" still match.
    """
    return re.compile(rf"(?<![\w]){re.escape(term)}(?![\w])", re.IGNORECASE)


class KeywordTagger(Tagger):
    """Tagger matching a fixed vocabulary of technology names"""

    name = "keyword"

    def __init__(self, vocabulary: list[str], blacklist: list[str] | None = None) -> None:
        """
        Args:
            vocabulary: Technology names to look for (output keeps their casing and order)
            blacklist: Technologies never reported (case-insensitive)
        """
        terms = filter_technologies(list(dict.fromkeys(vocabulary)), blacklist)
        self._patterns = [(term, _keyword_pattern(term)) for term in terms if term.strip()]

    async def tag(self, input_text: str, augmentation: dict | None = None) -> list[str]:
        return [term for term, pattern in self._patterns if pattern.search(input_text)]
