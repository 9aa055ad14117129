"""Tests for domain constants"""

from tech_screen_tagging.domain.constants import (
    DEFAULT_BLACKLIST,
    PASS_EXTRA_TAG_THRESHOLD,
    TAGGER_NAMES,
)


def test_pass_extra_tag_threshold():
    assert PASS_EXTRA_TAG_THRESHOLD == 5


def test_default_blacklist_has_no_duplicates():
    lowered = [t.lower() for t in DEFAULT_BLACKLIST]
    assert len(lowered) == len(set(lowered))


def test_default_blacklist_contents():
    assert len(DEFAULT_BLACKLIST) == 17
    assert "Git" in DEFAULT_BLACKLIST
    assert ".NET Core" in DEFAULT_BLACKLIST


def test_tagger_names():
    assert TAGGER_NAMES == ["stub", "keyword", "llm"]
