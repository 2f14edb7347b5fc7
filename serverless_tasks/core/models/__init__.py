from .change_record import ChangeRecord
from .errors import (
    BatchProcessingError,
    DetectionFailure,
    HandlerError,
    MetadataFetchFailure,
    ObjectTimeoutError,
    TaggingFailure,
    UnsupportedMediaTypeError,
)
from .labels import BatchTaggingResult, LabelCandidate, Tag, TaggingOutcome
from .object_reference import ObjectReference, S3ObjectEvent

__all__ = [
    "BatchProcessingError",
    "BatchTaggingResult",
    "ChangeRecord",
    "DetectionFailure",
    "HandlerError",
    "LabelCandidate",
    "MetadataFetchFailure",
    "ObjectReference",
    "ObjectTimeoutError",
    "S3ObjectEvent",
    "Tag",
    "TaggingFailure",
    "TaggingOutcome",
    "UnsupportedMediaTypeError",
]
