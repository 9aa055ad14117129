"""
Scoring sub-package

Provides label set comparison and technology blacklist filtering.
"""

from tech_screen_tagging.domain.value_objects import ComparisonResult
from tech_screen_tagging.scoring.blacklist import filter_technologies
from tech_screen_tagging.scoring.comparator import compare_labels, normalize_labels

__all__ = [
    # value objects (re-exported from domain)
    "ComparisonResult",
    # comparison
    "compare_labels",
    "normalize_labels",
    # blacklist
    "filter_technologies",
]
