"""
Domain Value Objects

Defines immutable data structures representing values such as label set
comparisons and model responses.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComparisonResult:
    """Comparison of an expected label set against a predicted one.

    Labels are reported in their lowercase (normalized) form.
    """
    matches: tuple[str, ...]
    extra: tuple[str, ...]      # false positives
    missing: tuple[str, ...]    # false negatives
    precision: float
    recall: float
    f1: float
    passed: bool


@dataclass
class ModelResponse:
    """Model response"""
    output: str
    latency_ms: int
    model_name: str
    input_tokens: int = 0
    output_tokens: int = 0
