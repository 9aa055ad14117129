"""
Reporting

Formats batch results for the console and exports them to CSV.
Errored examples are always reported apart from scored ones: an error means
the tagger could not run, not that it found nothing.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from tech_screen_tagging.domain.entities import BatchResult, ExampleResult

RAW_COLUMNS = [
    "run_id",
    "identifier",
    "status",
    "passed",
    "expected_labels",
    "actual_labels",
    "matches",
    "extra",
    "missing",
    "precision",
    "recall",
    "f1",
    "latency_ms",
    "error_kind",
    "error",
]


def _status(result: ExampleResult) -> str:
    if result.errored:
        return "ERROR"
    return "PASSED" if result.passed else "FAILED"


def format_example_result(result: ExampleResult) -> str:
    """Format one example as an indented block."""
    lines = [f"{result.identifier}:"]
    if result.errored:
        lines.append("  ⚠️ ERROR")
        lines.append(f"  Kind: {result.error_kind.value}")
        lines.append(f"  Error: {result.error}")
        if result.expected_labels:
            lines.append(f"  Expected: {', '.join(result.expected_labels)}")
        lines.append(f"  Execution Time: {result.latency_ms:.2f}ms")
        return "\n".join(lines)

    comparison = result.comparison
    lines.append("  ✅ PASSED" if comparison.passed else "  ❌ FAILED")
    lines.append(f"  Missing Tags: {', '.join(comparison.missing)}")
    lines.append(f"  Extra Tags: {', '.join(comparison.extra)}")
    lines.append(f"  Expected: {', '.join(result.expected_labels)}")
    lines.append(f"  Actual: {', '.join(result.actual_labels)}")
    lines.append(f"  Matches: {len(comparison.matches)}")
    lines.append(f"  Precision: {comparison.precision:.4f}")
    lines.append(f"  Recall: {comparison.recall:.4f}")
    lines.append(f"  F1 Score: {comparison.f1:.4f}")
    lines.append(f"  Execution Time: {result.latency_ms:.2f}ms")
    return "\n".join(lines)


def format_summary(batch: BatchResult) -> str:
    """Format the aggregate summary, listing errored examples separately."""
    summary = batch.summary
    lines = [
        "=== BATCH TEST SUMMARY ===",
        "  ✅ PASSED" if summary.all_passed else "  ❌ FAILED",
        f"Total files processed: {summary.total}",
        f"Passing Test Count: {summary.passed_count}",
        f"Failing Test Count: {summary.failed_count}",
        f"Error Count: {summary.error_count}",
        f"Average Precision: {summary.avg_precision:.4f}",
        f"Average Recall: {summary.avg_recall:.4f}",
        f"Average F1 Score: {summary.avg_f1:.4f}",
        f"Average Execution Time: {summary.avg_latency_ms:.2f}ms",
    ]
    errored = [r for r in batch.results if r.errored]
    if errored:
        lines.append("")
        lines.append("Errored examples (excluded from averages):")
        for result in errored:
            lines.append(f"  {result.identifier} [{result.error_kind.value}]: {result.error}")
    return "\n".join(lines)


def results_to_dataframe(batch: BatchResult) -> pd.DataFrame:
    """One row per example; metric columns are empty for errored examples."""
    rows = []
    for result in batch.results:
        comparison = result.comparison
        rows.append({
            "run_id": batch.run_id,
            "identifier": result.identifier,
            "status": _status(result),
            "passed": result.passed,
            "expected_labels": "|".join(result.expected_labels),
            "actual_labels": "|".join(result.actual_labels),
            "matches": "|".join(comparison.matches) if comparison else None,
            "extra": "|".join(comparison.extra) if comparison else None,
            "missing": "|".join(comparison.missing) if comparison else None,
            "precision": comparison.precision if comparison else None,
            "recall": comparison.recall if comparison else None,
            "f1": comparison.f1 if comparison else None,
            "latency_ms": result.latency_ms,
            "error_kind": result.error_kind.value if result.error_kind else None,
            "error": result.error,
        })
    return pd.DataFrame(rows, columns=RAW_COLUMNS)


def summary_to_dataframe(batch: BatchResult) -> pd.DataFrame:
    """Single-row summary of the batch."""
    summary = batch.summary
    return pd.DataFrame([{
        "run_id": batch.run_id,
        "total_available": batch.total_available,
        "start_index": batch.start_index,
        "run_count": batch.run_count,
        "total": summary.total,
        "passed_count": summary.passed_count,
        "failed_count": summary.failed_count,
        "error_count": summary.error_count,
        "avg_precision": summary.avg_precision,
        "avg_recall": summary.avg_recall,
        "avg_f1": summary.avg_f1,
        "avg_latency_ms": summary.avg_latency_ms,
    }])


def save_results(batch: BatchResult, output_dir: str | Path) -> tuple[Path, Path]:
    """
    Save per-example and summary CSV files for a run.

    Args:
        batch: The batch result
        output_dir: Directory for output CSV files

    Returns:
        (raw results path, summary path)
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    raw_path = output_dir / f"raw_results_{batch.run_id}.csv"
    summary_path = output_dir / f"summary_{batch.run_id}.csv"
    results_to_dataframe(batch).to_csv(raw_path, index=False)
    summary_to_dataframe(batch).to_csv(summary_path, index=False)
    return raw_path, summary_path
