"""
Evaluation Execution

Runs a tagger over a slice of labeled examples, compares its output with the
expected technologies, and aggregates the results. Nothing here prints;
reporting is left to the caller.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime
from typing import Callable, Sequence

from tech_screen_tagging.domain.entities import (
    BatchResult,
    BatchSummary,
    ExampleResult,
    LabeledExample,
)
from tech_screen_tagging.domain.errors import (
    ClassificationFailureError,
    ErrorKind,
    MalformedExampleError,
)
from tech_screen_tagging.harness_config import EvaluationConfig
from tech_screen_tagging.infrastructure.taggers.base import Tagger
from tech_screen_tagging.scoring.comparator import compare_labels

logger = logging.getLogger(__name__)

StartCallback = Callable[[int, LabeledExample], None]
ResultCallback = Callable[[int, ExampleResult], None]


def select_examples(
    examples: Sequence[LabeledExample],
    start_index: int = 0,
    run_count: int = 0,
) -> list[LabeledExample]:
    """
    Select a contiguous slice of examples without re-ordering.

    Args:
        examples: Examples in loader order
        start_index: Index of the first example to run
        run_count: Number of examples to run (0 = all remaining)

    Returns:
        list[LabeledExample]: Selected examples (empty if start_index is past the end)

    Raises:
        ValueError: If start_index or run_count is negative
    """
    if start_index < 0:
        raise ValueError(f"start_index must be non-negative: {start_index}")
    if run_count < 0:
        raise ValueError(f"run_count must be non-negative: {run_count}")

    selected = list(examples)
    if start_index > 0:
        selected = selected[start_index:]
    if run_count > 0:
        selected = selected[:run_count]
    return selected


def _validate_example(example: LabeledExample) -> tuple[str, list[str]]:
    """Return (input_text, expected_labels) or raise MalformedExampleError."""
    if example.load_error:
        raise MalformedExampleError(example.load_error)
    if example.input_text is None:
        raise MalformedExampleError(f"Example {example.identifier} has no input text")
    if example.expected_labels is None:
        raise MalformedExampleError(f"Example {example.identifier} has no expected labels")
    return example.input_text, list(example.expected_labels)


def _elapsed_ms(start_time: float) -> int:
    return int((time.time() - start_time) * 1000)


def _check_labels(output) -> list[str]:
    """Return tagger output as a list, or raise ClassificationFailureError if it is not a list of strings."""
    if not isinstance(output, (list, tuple)):
        raise ClassificationFailureError(
            f"Tagger returned {type(output).__name__}, expected a list of strings"
        )
    labels = list(output)
    invalid = [label for label in labels if not isinstance(label, str)]
    if invalid:
        raise ClassificationFailureError(
            f"Tagger returned non-string labels: {invalid[:5]!r}"
        )
    return labels


async def evaluate_example(
    example: LabeledExample,
    tagger: Tagger,
    config: EvaluationConfig | None = None,
) -> ExampleResult:
    """
    Evaluate a single example.

    Failures never propagate: a malformed example or a failing / timed out
    tagger call becomes an errored ExampleResult.

    Args:
        example: The labeled example
        tagger: Tagger under evaluation
        config: EvaluationConfig (defaults if not provided)

    Returns:
        ExampleResult: Scored or errored result
    """
    if config is None:
        config = EvaluationConfig()

    try:
        input_text, expected = _validate_example(example)
    except MalformedExampleError as e:
        logger.warning("Malformed example %s: %s", example.identifier, e)
        return ExampleResult(
            identifier=example.identifier,
            error=str(e),
            error_kind=ErrorKind.MALFORMED_EXAMPLE,
        )

    start_time = time.time()
    try:
        output = await asyncio.wait_for(tagger.tag(input_text), timeout=config.timeout_seconds)
        actual = _check_labels(output)
    except asyncio.TimeoutError:
        latency_ms = _elapsed_ms(start_time)
        message = f"Tagger timed out after {config.timeout_seconds}s"
        logger.warning("Example %s: %s", example.identifier, message)
        return ExampleResult(
            identifier=example.identifier,
            expected_labels=expected,
            latency_ms=latency_ms,
            error=message,
            error_kind=ErrorKind.CLASSIFICATION_FAILURE,
        )
    except Exception as e:
        latency_ms = _elapsed_ms(start_time)
        logger.warning("Example %s: tagger failed: %s", example.identifier, e)
        return ExampleResult(
            identifier=example.identifier,
            expected_labels=expected,
            latency_ms=latency_ms,
            error=f"{type(e).__name__}: {e}",
            error_kind=ErrorKind.CLASSIFICATION_FAILURE,
        )
    latency_ms = _elapsed_ms(start_time)

    comparison = compare_labels(expected, actual, extra_threshold=config.extra_tag_threshold)
    logger.debug(
        "Example %s: f1=%.4f passed=%s (%dms)",
        example.identifier, comparison.f1, comparison.passed, latency_ms,
    )
    return ExampleResult(
        identifier=example.identifier,
        expected_labels=expected,
        actual_labels=actual,
        latency_ms=latency_ms,
        comparison=comparison,
    )


def aggregate_results(results: Sequence[ExampleResult]) -> BatchSummary:
    """
    Aggregate per-example results.

    Errored results count toward the total and error count only; averages are
    taken over scored results and are 0 when there are none.

    Args:
        results: Per-example results

    Returns:
        BatchSummary
    """
    scored = [r for r in results if not r.errored]
    passed_count = sum(1 for r in scored if r.passed)

    def _mean(values: list[float]) -> float:
        return sum(values) / len(values) if values else 0.0

    return BatchSummary(
        total=len(results),
        passed_count=passed_count,
        failed_count=len(scored) - passed_count,
        error_count=len(results) - len(scored),
        avg_precision=_mean([r.comparison.precision for r in scored]),
        avg_recall=_mean([r.comparison.recall for r in scored]),
        avg_f1=_mean([r.comparison.f1 for r in scored]),
        avg_latency_ms=_mean([float(r.latency_ms) for r in scored]),
    )


async def run_batch(
    examples: Sequence[LabeledExample],
    tagger: Tagger,
    start_index: int = 0,
    run_count: int = 0,
    *,
    config: EvaluationConfig | None = None,
    on_start: StartCallback | None = None,
    on_result: ResultCallback | None = None,
    run_id: str | None = None,
) -> BatchResult:
    """
    Evaluate a slice of examples and aggregate the results.

    Examples run one at a time unless config.max_concurrency > 1, in which case
    at most max_concurrency tagger calls are in flight. Results are always
    returned in selection order.

    Args:
        examples: Examples in loader order
        tagger: Tagger under evaluation
        start_index: Index of the first example to run
        run_count: Number of examples to run (0 = all remaining)
        config: EvaluationConfig (defaults if not provided)
        on_start: Called with (selection index, example) before each example is tagged
        on_result: Called with (selection index, result) as each example finishes
        run_id: Run ID (timestamp if not provided)

    Returns:
        BatchResult
    """
    if config is None:
        config = EvaluationConfig()
    if run_id is None:
        run_id = datetime.now().strftime("%Y%m%d_%H%M%S")

    selected = select_examples(examples, start_index, run_count)
    logger.info(
        "Running %d of %d examples (start=%d, count=%d)",
        len(selected), len(examples), start_index, run_count,
    )

    results: list[ExampleResult | None] = [None] * len(selected)

    async def _run_one(index: int, example: LabeledExample) -> None:
        if on_start is not None:
            on_start(index, example)
        result = await evaluate_example(example, tagger, config)
        results[index] = result
        if on_result is not None:
            on_result(index, result)

    if config.max_concurrency <= 1:
        for index, example in enumerate(selected):
            await _run_one(index, example)
    else:
        semaphore = asyncio.Semaphore(config.max_concurrency)

        async def _bounded(index: int, example: LabeledExample) -> None:
            async with semaphore:
                await _run_one(index, example)

        await asyncio.gather(*(_bounded(i, ex) for i, ex in enumerate(selected)))

    final_results = [r for r in results if r is not None]
    return BatchResult(
        results=final_results,
        summary=aggregate_results(final_results),
        total_available=len(examples),
        start_index=start_index,
        run_count=run_count,
        run_id=run_id,
    )
