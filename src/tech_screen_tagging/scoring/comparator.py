"""
Label set comparison

Compares an expected technology list with a predicted one as case-insensitive
sets and derives precision, recall, and F1.
"""

from __future__ import annotations

from typing import Iterable

from tech_screen_tagging.domain.constants import PASS_EXTRA_TAG_THRESHOLD
from tech_screen_tagging.domain.value_objects import ComparisonResult


def normalize_labels(labels: Iterable[str]) -> list[str]:
    """
    Lowercase labels and drop duplicates, keeping first-occurrence order

    Surrounding whitespace is trimmed as well, so " Python" and "python"
    count as the same label.

    Args:
        labels: Labels in any casing

    Returns:
        Unique lowercase labels
    """
    return list(dict.fromkeys(label.strip().lower() for label in labels))


def compare_labels(
    expected: Iterable[str],
    actual: Iterable[str],
    *,
    extra_threshold: int = PASS_EXTRA_TAG_THRESHOLD,
) -> ComparisonResult:
    """
    Compare expected and predicted labels

    Precision and recall are defined as 0 when their denominator set is empty,
    and F1 is 0 when both are 0.

    Args:
        expected: Expected labels
        actual: Predicted labels
        extra_threshold: A result passes only with fewer extra labels than this

    Returns:
        ComparisonResult with lowercase matches/extra/missing
    """
    expected_labels = normalize_labels(expected)
    actual_labels = normalize_labels(actual)
    expected_set = set(expected_labels)
    actual_set = set(actual_labels)

    matches = tuple(label for label in actual_labels if label in expected_set)
    extra = tuple(label for label in actual_labels if label not in expected_set)
    missing = tuple(label for label in expected_labels if label not in actual_set)

    precision = len(matches) / len(actual_labels) if actual_labels else 0.0
    recall = len(matches) / len(expected_labels) if expected_labels else 0.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall > 0 else 0.0

    return ComparisonResult(
        matches=matches,
        extra=extra,
        missing=missing,
        precision=precision,
        recall=recall,
        f1=f1,
        passed=not missing and len(extra) < extra_threshold,
    )
