"""
Domain Layer

Defines constants, entities, errors, and value objects that form the core of the
business logic. Has no dependencies on external libraries.
"""

from tech_screen_tagging.domain.constants import (
    DEFAULT_BLACKLIST,
    DEFAULT_TAGGER_MODEL,
    PASS_EXTRA_TAG_THRESHOLD,
    TAGGER_NAMES,
)
from tech_screen_tagging.domain.entities import (
    BatchResult,
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
from tech_screen_tagging.domain.value_objects import (
    ComparisonResult,
    ModelResponse,
)

__all__ = [
    # constants
    "DEFAULT_BLACKLIST",
    "DEFAULT_TAGGER_MODEL",
    "PASS_EXTRA_TAG_THRESHOLD",
    "TAGGER_NAMES",
    # entities
    "BatchResult",
    "BatchSummary",
    "ExampleResult",
    "HealthCheckResult",
    "LabeledExample",
    # errors
    "ClassificationFailureError",
    "ErrorKind",
    "MalformedExampleError",
    "StorageUnavailableError",
    "TaggingHarnessError",
    "TagParseError",
    # value objects
    "ComparisonResult",
    "ModelResponse",
]
