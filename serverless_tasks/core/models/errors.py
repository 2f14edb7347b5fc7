"""
Domain exceptions for the event handlers.

Collaborator failures carry the object they concern and the underlying cause
so that a batch summary can report them without losing context.
"""
from typing import List, Optional

from .object_reference import ObjectReference


class HandlerError(Exception):
    """Base exception for per-object handler failures."""

    def __init__(
        self,
        message: str,
        reference: Optional[ObjectReference] = None,
        cause: Optional[BaseException] = None,
        operation: str = ""
    ):
        self.message = message
        self.reference = reference
        self.cause = cause
        self.operation = operation
        super().__init__(self.message)


class UnsupportedMediaTypeError(HandlerError):
    """Object is not a supported image type. Non-fatal: the object is skipped."""


class DetectionFailure(HandlerError):
    """Label detection service call failed."""


class TaggingFailure(HandlerError):
    """Writing the tag set to object storage failed."""


class MetadataFetchFailure(HandlerError):
    """Reading object metadata failed."""


class ObjectTimeoutError(HandlerError):
    """The per-object time budget ran out."""


class BatchProcessingError(Exception):
    """Raised when one or more objects of a batch failed."""

    def __init__(self, failures: List[HandlerError]):
        self.failures = failures
        details = "; ".join(f"{type(f).__name__} for {f.reference}: {f.message}" for f in failures)
        super().__init__(f"{len(failures)} object(s) failed: {details}")
