"""
Label detection and tagging domain models.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .object_reference import ObjectReference

# Rekognition confidences are single precision: 7 significant digits
CONFIDENCE_FORMAT = ".7g"


def format_confidence(confidence: float) -> str:
    """Render a confidence score as tag text, e.g. 99.99983215332031 -> '99.99983'."""
    return format(confidence, CONFIDENCE_FORMAT)


@dataclass(frozen=True)
class LabelCandidate:
    """A detected label with its confidence score (0-100)."""
    name: str
    confidence: float


@dataclass(frozen=True)
class Tag:
    """Object tag written back to storage."""
    key: str
    value: str

    @classmethod
    def from_label(cls, label: LabelCandidate) -> "Tag":
        return cls(key=label.name, value=format_confidence(label.confidence))

    def to_s3(self) -> Dict[str, str]:
        return {"Key": self.key, "Value": self.value}


@dataclass
class TaggingOutcome:
    """Result of tagging a single object."""
    reference: ObjectReference
    tags: List[Tag]
    dropped_labels: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bucket": self.reference.bucket,
            "key": self.reference.key,
            "tags": [tag.to_s3() for tag in self.tags],
            "dropped_labels": self.dropped_labels
        }


@dataclass
class BatchTaggingResult:
    """Summary of one notification batch."""
    tagged: List[TaggingOutcome] = field(default_factory=list)
    skipped: List[ObjectReference] = field(default_factory=list)
    failures: List[Exception] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tagged_objects": len(self.tagged),
            "skipped_objects": len(self.skipped),
            "failed_objects": len(self.failures),
            "results": [outcome.to_dict() for outcome in self.tagged],
            "skipped": [str(reference) for reference in self.skipped],
            "errors": [
                {
                    "object": str(getattr(failure, "reference", "")),
                    "error_type": type(failure).__name__,
                    "error": str(failure)
                }
                for failure in self.failures
            ]
        }
