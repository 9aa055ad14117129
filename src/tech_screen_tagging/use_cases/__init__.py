"""
Use Cases Layer

Aggregates business logic and provides use cases called from the runner.
"""

from tech_screen_tagging.use_cases.evaluation import (
    aggregate_results,
    evaluate_example,
    run_batch,
    select_examples,
)
from tech_screen_tagging.use_cases.health_check import (
    HEALTH_CHECK_DESCRIPTION,
    check_tagger,
)

__all__ = [
    # evaluation
    "aggregate_results",
    "evaluate_example",
    "run_batch",
    "select_examples",
    # health_check
    "HEALTH_CHECK_DESCRIPTION",
    "check_tagger",
]
