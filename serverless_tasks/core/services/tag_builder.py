"""
Tag set construction from detected labels.
"""
from typing import Iterable, List, Tuple

from serverless_tasks.infrastructure.logging.log_config import get_logger
from ..models.labels import LabelCandidate, Tag, format_confidence
from .image_constraints import ImageConstraints

logger = get_logger(__name__)


def build_tags(
    labels: Iterable[LabelCandidate],
    max_tags: int = ImageConstraints.MAX_TAGS_PER_OBJECT
) -> Tuple[List[Tag], int]:
    """
    Build the tag set for an object from its label candidates.

    Labels are taken in the order given; once ``max_tags`` tags are collected
    the remaining labels are dropped. No re-sorting by confidence happens here.

    Args:
        labels: Label candidates as returned by the detector
        max_tags: Maximum number of tags to produce

    Returns:
        Tuple of (tags, number of dropped labels)
    """
    tags: List[Tag] = []
    dropped = 0

    for label in labels:
        if len(tags) < max_tags:
            logger.info(f"\tFound label {label.name} with confidence {format_confidence(label.confidence)}")
            tags.append(Tag.from_label(label))
        else:
            logger.info(
                f"\tSkipped label {label.name} with confidence {format_confidence(label.confidence)} "
                "because the maximum number of tags has been reached"
            )
            dropped += 1

    return tags, dropped
