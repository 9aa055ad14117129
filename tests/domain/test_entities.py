"""Tests for domain entities, errors and value objects"""

import pytest

from tech_screen_tagging.domain.entities import (
    BatchSummary,
    ExampleResult,
    HealthCheckResult,
    LabeledExample,
)
from tech_screen_tagging.domain.errors import (
    ClassificationFailureError,
    ErrorKind,
    MalformedExampleError,
    StorageUnavailableError,
    TaggingHarnessError,
    TagParseError,
)
from tech_screen_tagging.domain.value_objects import ComparisonResult, ModelResponse


def _comparison(passed: bool) -> ComparisonResult:
    return ComparisonResult(
        matches=("python",),
        extra=(),
        missing=() if passed else ("go",),
        precision=1.0,
        recall=1.0 if passed else 0.5,
        f1=1.0 if passed else 2 / 3,
        passed=passed,
    )


class TestLabeledExample:
    def test_construction(self):
        example = LabeledExample(
            identifier="screen-001",
            input_text="Python developer",
            expected_labels=["Python"],
        )
        assert example.source == ""  # default
        assert example.load_error is None  # default


class TestExampleResult:
    def test_scored_passed(self):
        result = ExampleResult(identifier="a", comparison=_comparison(True))
        assert result.errored is False
        assert result.passed is True

    def test_scored_failed(self):
        result = ExampleResult(identifier="a", comparison=_comparison(False))
        assert result.errored is False
        assert result.passed is False

    def test_errored_never_passes(self):
        result = ExampleResult(
            identifier="a",
            error="boom",
            error_kind=ErrorKind.CLASSIFICATION_FAILURE,
        )
        assert result.errored is True
        assert result.passed is False
        assert result.comparison is None

    def test_defaults(self):
        result = ExampleResult(identifier="a")
        assert result.expected_labels == []
        assert result.actual_labels == []
        assert result.latency_ms == 0


class TestBatchSummary:
    def test_all_passed(self):
        summary = BatchSummary(
            total=2, passed_count=2, failed_count=0, error_count=0,
            avg_precision=1.0, avg_recall=1.0, avg_f1=1.0, avg_latency_ms=10.0,
        )
        assert summary.all_passed is True

    def test_error_prevents_all_passed(self):
        summary = BatchSummary(
            total=3, passed_count=2, failed_count=0, error_count=1,
            avg_precision=1.0, avg_recall=1.0, avg_f1=1.0, avg_latency_ms=10.0,
        )
        assert summary.all_passed is False


class TestHealthCheckResult:
    def test_failure(self):
        result = HealthCheckResult(name="llm", success=False, latency_ms=None, error="down")
        assert result.success is False
        assert result.error == "down"


class TestErrors:
    @pytest.mark.parametrize(
        "error_cls,kind",
        [
            (StorageUnavailableError, ErrorKind.STORAGE_UNAVAILABLE),
            (MalformedExampleError, ErrorKind.MALFORMED_EXAMPLE),
            (ClassificationFailureError, ErrorKind.CLASSIFICATION_FAILURE),
            (TagParseError, ErrorKind.CLASSIFICATION_FAILURE),
        ],
    )
    def test_kinds(self, error_cls, kind):
        error = error_cls("message")
        assert isinstance(error, TaggingHarnessError)
        assert error.kind == kind
        assert str(error) == "message"

    def test_error_kind_values(self):
        assert ErrorKind.MALFORMED_EXAMPLE.value == "malformed_example"
        assert ErrorKind("storage_unavailable") is ErrorKind.STORAGE_UNAVAILABLE


class TestModelResponse:
    def test_token_defaults(self):
        response = ModelResponse(output="[]", latency_ms=5, model_name="mock")
        assert response.input_tokens == 0
        assert response.output_tokens == 0
