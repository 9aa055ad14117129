"""
Tagger package

Provides the Tagger interface and its implementations.
"""

from tech_screen_tagging.infrastructure.taggers.base import Tagger
from tech_screen_tagging.infrastructure.taggers.factory import create_tagger
from tech_screen_tagging.infrastructure.taggers.keyword import KeywordTagger
from tech_screen_tagging.infrastructure.taggers.llm import LLMTagger
from tech_screen_tagging.infrastructure.taggers.stub import StubTagger

__all__ = ["Tagger", "KeywordTagger", "LLMTagger", "StubTagger", "create_tagger"]
