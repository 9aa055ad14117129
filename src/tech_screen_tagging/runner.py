"""
tech-screen-tagging CLI Runner

Runs the tagger over the training screens and reports precision / recall / F1.

Usage:
    python -m tech_screen_tagging.runner                 # all training screens
    python -m tech_screen_tagging.runner 10 5            # 5 screens starting at index 10
    python -m tech_screen_tagging.runner --tagger keyword --output-dir results
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from tech_screen_tagging.domain.constants import TAGGER_NAMES
from tech_screen_tagging.domain.entities import ExampleResult, LabeledExample
from tech_screen_tagging.domain.errors import StorageUnavailableError
from tech_screen_tagging.example_loader import TrainingScreenLoader
from tech_screen_tagging.harness_config import HarnessConfig, load_config
from tech_screen_tagging.infrastructure.taggers.factory import create_tagger
from tech_screen_tagging.reporting import format_example_result, format_summary, save_results
from tech_screen_tagging.use_cases.evaluation import run_batch, select_examples
from tech_screen_tagging.use_cases.health_check import check_tagger


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"'{value}' must be non-negative")
    return number


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"'{value}' must be greater than 0")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="tech-screen-tagging: Evaluate technology tagging against labeled training screens",
        epilog="Example: python -m tech_screen_tagging.runner 10 5  # Process 5 files starting at index 10",
    )
    parser.add_argument(
        "start_index",
        nargs="?",
        type=_non_negative_int,
        default=None,
        help="Index of the first training screen to process (default: 0)",
    )
    parser.add_argument(
        "run_count",
        nargs="?",
        type=_non_negative_int,
        default=None,
        help="Number of training screens to process (default: all)",
    )
    parser.add_argument(
        "--examples-dir",
        default=None,
        help="Directory of training screen JSON files (default: TAGGING_EXAMPLES_DIR from .env)",
    )
    parser.add_argument(
        "--tagger",
        choices=TAGGER_NAMES,
        default=None,
        help="Tagger to evaluate (default: TAGGER from .env)",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Model name for the llm tagger (default: TAGGER_MODEL from .env)",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=None,
        help="Seconds allowed per tagger call (default: TAGGING_TIMEOUT_SECONDS from .env)",
    )
    parser.add_argument(
        "--concurrency",
        type=_non_negative_int,
        default=None,
        help="Maximum concurrent tagger calls (default: TAGGING_MAX_CONCURRENCY from .env)",
    )
    parser.add_argument(
        "--extra-threshold",
        type=_non_negative_int,
        default=None,
        help="A screen passes only with fewer extra tags than this (default: 5)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Also write raw_results_<run_id>.csv and summary_<run_id>.csv here",
    )
    return parser.parse_args(argv)


def apply_args(config: HarnessConfig, args: argparse.Namespace) -> HarnessConfig:
    """Override configuration values with the ones given on the command line."""
    if args.start_index is not None:
        config.evaluation.start_index = args.start_index
    if args.run_count is not None:
        config.evaluation.run_count = args.run_count
    if args.examples_dir:
        config.evaluation.examples_dir = args.examples_dir
    if args.tagger:
        config.tagger.tagger = args.tagger
    if args.model:
        config.tagger.model_name = args.model
    if args.timeout is not None:
        config.evaluation.timeout_seconds = args.timeout
    if args.concurrency is not None:
        config.evaluation.max_concurrency = args.concurrency
    if args.extra_threshold is not None:
        config.evaluation.extra_tag_threshold = args.extra_threshold
    return config


def _print_start(index: int, example: LabeledExample) -> None:
    name = Path(example.source).name if example.source else example.identifier
    print(f"\nProcessing {name}...")


def _print_result(index: int, result: ExampleResult) -> None:
    print(f"\n{format_example_result(result)}")


async def run(config: HarnessConfig, output_dir: str | None = None) -> int:
    """
    Run a batch with the given configuration.

    Returns:
        Process exit code
    """
    evaluation = config.evaluation

    loader = TrainingScreenLoader(evaluation.examples_dir)
    try:
        examples = loader.list_examples()
    except StorageUnavailableError as e:
        print(f"ERROR: {e}")
        return 1

    if evaluation.timeout_seconds <= 0:
        print(f"ERROR: timeout must be greater than 0: {evaluation.timeout_seconds}")
        return 1
    try:
        selected = select_examples(examples, evaluation.start_index, evaluation.run_count)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1
    count_label = f", running {evaluation.run_count} files" if evaluation.run_count > 0 else ""
    print(f"Found {len(examples)} total training screen files.")
    print(f"Processing {len(selected)} files (starting at index {evaluation.start_index}{count_label}).")

    try:
        tagger = create_tagger(config)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    if config.tagger.tagger == "llm":
        print(f"\n=== Tagger Health Check ({config.tagger.model_name}) ===\n")
        health = await check_tagger(tagger, config.tagger.model_name, evaluation.timeout_seconds)
        if not health.success:
            error_short = health.error[:100] if health.error else "Unknown error"
            print("  FAILED")
            print(f"    Error: {error_short}")
            return 1
        print(f"  OK ({health.latency_ms}ms)")

    batch = await run_batch(
        examples,
        tagger,
        evaluation.start_index,
        evaluation.run_count,
        config=evaluation,
        on_start=_print_start,
        on_result=_print_result,
    )

    print(f"\n{format_summary(batch)}")

    if output_dir:
        raw_path, summary_path = save_results(batch, output_dir)
        print("\n=== Output ===\n")
        print(f"  Raw results: {raw_path}")
        print(f"  Summary:     {summary_path}")

    return 0


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)

    config = apply_args(load_config(), args)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sys.exit(asyncio.run(run(config, args.output_dir)))


if __name__ == "__main__":
    main()
