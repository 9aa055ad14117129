"""
Technology blacklist filter

Drops generic technologies (Git, Agile, ...) that are too broad to be useful tags.
"""

from __future__ import annotations

from tech_screen_tagging.domain.constants import DEFAULT_BLACKLIST


def filter_technologies(
    technologies: list[str],
    blacklist: list[str] | None = DEFAULT_BLACKLIST,
) -> list[str]:
    """
    Filter technologies against a blacklist (case-insensitive)

    Args:
        technologies: Technology names to filter
        blacklist: Technology names to filter out; empty or None disables filtering

    Returns:
        Technologies not present in the blacklist, in their original order
    """
    if not blacklist:
        return technologies

    lowercase_blacklist = {item.lower() for item in blacklist}
    return [tech for tech in technologies if tech.lower() not in lowercase_blacklist]
