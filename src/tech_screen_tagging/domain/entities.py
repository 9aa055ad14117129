"""
Domain Entities

Defines the primary data structures used in a tagging evaluation run.
"""

from dataclasses import dataclass, field

from tech_screen_tagging.domain.errors import ErrorKind
from tech_screen_tagging.domain.value_objects import ComparisonResult


@dataclass
class LabeledExample:
    """A training screen: job description plus the technologies it should be tagged with"""
    identifier: str
    input_text: str | None
    expected_labels: list[str] | None
    source: str = ""
    load_error: str | None = None  # Set by the loader when the file could not be parsed


@dataclass
class ExampleResult:
    """Result of evaluating a single example"""
    identifier: str
    expected_labels: list[str] = field(default_factory=list)
    actual_labels: list[str] = field(default_factory=list)
    latency_ms: int = 0
    comparison: ComparisonResult | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def errored(self) -> bool:
        return self.error_kind is not None

    @property
    def passed(self) -> bool:
        return self.comparison is not None and self.comparison.passed


@dataclass
class BatchSummary:
    """Aggregate statistics of a batch (averages cover non-errored results only)"""
    total: int
    passed_count: int
    failed_count: int
    error_count: int
    avg_precision: float
    avg_recall: float
    avg_f1: float
    avg_latency_ms: float

    @property
    def all_passed(self) -> bool:
        return self.passed_count == self.total


@dataclass
class BatchResult:
    """Per-example results of one run, in selection order, plus the summary"""
    results: list[ExampleResult]
    summary: BatchSummary
    total_available: int = 0
    start_index: int = 0
    run_count: int = 0
    run_id: str = ""


@dataclass
class HealthCheckResult:
    """Health check result"""
    name: str
    success: bool
    latency_ms: int | None
    error: str | None
