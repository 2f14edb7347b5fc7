"""
Tag Image Labels Use Case.

Detects labels in newly created images and writes the first labels returned
by the detector back onto each image as its object tag set.
"""
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Sequence, Union

from serverless_tasks.config.settings import DEFAULT_MIN_CONFIDENCE
from serverless_tasks.infrastructure.logging.log_config import get_logger
from ..models.errors import HandlerError, ObjectTimeoutError, UnsupportedMediaTypeError
from ..models.labels import BatchTaggingResult, TaggingOutcome
from ..models.object_reference import ObjectReference
from ..ports.label_detector import LabelDetectorPort
from ..ports.object_store import ObjectStorePort
from ..services.image_constraints import ImageConstraints
from ..services.tag_builder import build_tags

logger = get_logger(__name__)

# Outcome of one batch entry: None when skipped
ObjectOutcome = Optional[Union[TaggingOutcome, HandlerError]]


class TagImageLabelsUseCase:
    """
    Use case for labelling and tagging a batch of stored images.

    Each object is handled independently: a failure for one object is
    recorded and the rest of the batch is still processed.
    """

    def __init__(
        self,
        object_store: ObjectStorePort,
        label_detector: LabelDetectorPort,
        min_confidence: float = DEFAULT_MIN_CONFIDENCE,
        max_tags: int = ImageConstraints.MAX_TAGS_PER_OBJECT,
        object_timeout_seconds: float = 30.0,
        timeout_safety_margin_ms: int = 1000,
        max_workers: int = 1,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize the use case with its collaborators.

        Args:
            object_store: Storage port used to write tag sets
            label_detector: Detection port used to find labels
            min_confidence: Confidence floor passed to the detector
            max_tags: Maximum tags written per object
            object_timeout_seconds: Time budget for one object
            timeout_safety_margin_ms: Time kept in reserve before the invocation deadline
            max_workers: Objects processed concurrently (1 = sequential)
            clock: Monotonic clock in seconds
        """
        self.object_store = object_store
        self.label_detector = label_detector
        self.min_confidence = min_confidence
        self.max_tags = max_tags
        self.object_timeout_seconds = object_timeout_seconds
        self.timeout_safety_margin_ms = timeout_safety_margin_ms
        self.max_workers = max_workers
        self._clock = clock

    def execute(
        self,
        batch: Sequence[ObjectReference],
        remaining_time_ms: Optional[Callable[[], int]] = None
    ) -> BatchTaggingResult:
        """
        Label and tag every supported image in the batch.

        Args:
            batch: Object references in delivery order
            remaining_time_ms: Returns the invocation's remaining time in
                milliseconds (Lambda ``context.get_remaining_time_in_millis``)

        Returns:
            BatchTaggingResult with tagged, skipped and failed objects
        """
        logger.info("Processing notification batch", extra={'extra_fields': {
            "objects": len(batch),
            "min_confidence": self.min_confidence,
            "max_workers": self.max_workers
        }})

        if self.max_workers > 1 and len(batch) > 1:
            outcomes = self._execute_in_parallel(batch, remaining_time_ms)
        else:
            outcomes = [self._process_object(reference, remaining_time_ms) for reference in batch]

        result = BatchTaggingResult()
        for reference, outcome in zip(batch, outcomes):
            if outcome is None:
                result.skipped.append(reference)
            elif isinstance(outcome, HandlerError):
                result.failures.append(outcome)
            else:
                result.tagged.append(outcome)

        logger.info("Notification batch processed", extra={'extra_fields': {
            "tagged": len(result.tagged),
            "skipped": len(result.skipped),
            "failed": len(result.failures)
        }})
        return result

    def tag_object(self, reference: ObjectReference, deadline: float) -> TaggingOutcome:
        """
        Detect labels for one image and replace its tag set.

        Args:
            reference: Image to tag
            deadline: Clock value after which no further collaborator call is made

        Raises:
            HandlerError: If detection or tagging fails or the deadline passes
        """
        self._check_deadline(reference, deadline, "detect_labels")
        logger.info(f"Looking for labels in image {reference}")
        labels = self.label_detector.detect_labels(reference, self.min_confidence)

        tags, dropped = build_tags(labels, self.max_tags)

        self._check_deadline(reference, deadline, "put_tagging")
        self.object_store.put_tagging(reference, tags)

        return TaggingOutcome(reference=reference, tags=tags, dropped_labels=dropped)

    def _process_object(
        self,
        reference: ObjectReference,
        remaining_time_ms: Optional[Callable[[], int]]
    ) -> ObjectOutcome:
        try:
            ImageConstraints.validate_image(reference)
        except UnsupportedMediaTypeError as e:
            logger.info(e.message)
            return None

        try:
            return self.tag_object(reference, self._deadline(remaining_time_ms))
        except HandlerError as e:
            logger.error("Failed to tag image", extra={'extra_fields': {
                "bucket": reference.bucket,
                "key": reference.key,
                "operation": e.operation,
                "error_type": type(e).__name__,
                "error": str(e)
            }})
            return e

    def _execute_in_parallel(
        self,
        batch: Sequence[ObjectReference],
        remaining_time_ms: Optional[Callable[[], int]]
    ) -> List[ObjectOutcome]:
        # Repeated entries for one object stay in a single task so that their
        # detect/tag calls never interleave
        groups: Dict[ObjectReference, List[int]] = {}
        for index, reference in enumerate(batch):
            groups.setdefault(reference, []).append(index)

        outcomes: List[ObjectOutcome] = [None] * len(batch)
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(groups))) as executor:
            futures = {
                executor.submit(self._process_group, reference, len(indices), remaining_time_ms): indices
                for reference, indices in groups.items()
            }
            for future in as_completed(futures):
                for index, outcome in zip(futures[future], future.result()):
                    outcomes[index] = outcome

        return outcomes

    def _process_group(
        self,
        reference: ObjectReference,
        count: int,
        remaining_time_ms: Optional[Callable[[], int]]
    ) -> List[ObjectOutcome]:
        return [self._process_object(reference, remaining_time_ms) for _ in range(count)]

    def _deadline(self, remaining_time_ms: Optional[Callable[[], int]]) -> float:
        budget = self.object_timeout_seconds
        if remaining_time_ms is not None:
            available = (remaining_time_ms() - self.timeout_safety_margin_ms) / 1000.0
            budget = min(budget, available)
        return self._clock() + budget

    def _check_deadline(self, reference: ObjectReference, deadline: float, operation: str) -> None:
        if self._clock() >= deadline:
            raise ObjectTimeoutError(
                f"Time budget exhausted before {operation} for {reference}",
                reference=reference,
                operation=operation
            )
