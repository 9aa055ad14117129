"""
Domain Errors

Typed errors for the tagging harness. Each error carries an explicit ErrorKind
so results can be discriminated without inspecting messages.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kind of failure recorded by the harness"""
    STORAGE_UNAVAILABLE = "storage_unavailable"
    MALFORMED_EXAMPLE = "malformed_example"
    CLASSIFICATION_FAILURE = "classification_failure"


class TaggingHarnessError(Exception):
    """Base class for harness errors"""
    kind: ErrorKind


class StorageUnavailableError(TaggingHarnessError):
    """The example store cannot be enumerated or read (fatal to a batch)"""
    kind = ErrorKind.STORAGE_UNAVAILABLE


class MalformedExampleError(TaggingHarnessError):
    """A single example is missing required fields"""
    kind = ErrorKind.MALFORMED_EXAMPLE


class ClassificationFailureError(TaggingHarnessError):
    """The tagger failed, timed out, or returned something unusable"""
    kind = ErrorKind.CLASSIFICATION_FAILURE


class TagParseError(ClassificationFailureError):
    """A model response could not be parsed into a tag list"""
    pass
