"""
Tagger factory

Creates the tagger selected in the configuration.
"""

from __future__ import annotations

from tech_screen_tagging.domain.constants import TAGGER_NAMES
from tech_screen_tagging.harness_config import HarnessConfig, load_config
from tech_screen_tagging.infrastructure.model_clients.factory import create_client
from tech_screen_tagging.infrastructure.taggers.base import Tagger
from tech_screen_tagging.infrastructure.taggers.keyword import KeywordTagger
from tech_screen_tagging.infrastructure.taggers.llm import LLMTagger
from tech_screen_tagging.infrastructure.taggers.stub import StubTagger
from tech_screen_tagging.technology_catalog import load_technologies


def create_tagger(
    config: HarnessConfig | None = None,
    vocabulary: list[str] | None = None,
) -> Tagger:
    """
    Create the tagger named by config.tagger.tagger

    Args:
        config: HarnessConfig (loads from env if not provided)
        vocabulary: Known technology names (read from the question repository if not provided)

    Returns:
        Tagger: stub, keyword, or llm tagger

    Raises:
        ValueError: For an unknown tagger name, or a keyword tagger without vocabulary
    """
    if config is None:
        config = load_config()

    name = config.tagger.tagger
    if name not in TAGGER_NAMES:
        raise ValueError(f"Unknown tagger: {name} (available: {TAGGER_NAMES})")

    if name == "stub":
        return StubTagger(delay_seconds=config.tagger.stub_delay_seconds)

    if vocabulary is None:
        vocabulary = load_technologies(config.catalog.question_repo_path)
    blacklist = config.tagger.active_blacklist

    if name == "keyword":
        if not vocabulary:
            raise ValueError(
                f"The keyword tagger needs technologies from {config.catalog.question_repo_path}"
            )
        return KeywordTagger(vocabulary, blacklist=blacklist)

    client = create_client(config.tagger.model_name, config=config)
    return LLMTagger(client, vocabulary=vocabulary or None, blacklist=blacklist)
