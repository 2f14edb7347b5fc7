"""
Fetch Object Metadata Use Case.

Returns the content type of the object named by the first record of an S3
notification.
"""
from typing import Optional, Sequence

from serverless_tasks.infrastructure.logging.log_config import get_logger
from ..models.errors import HandlerError, MetadataFetchFailure
from ..models.object_reference import S3ObjectEvent
from ..ports.object_store import ObjectStorePort

logger = get_logger(__name__)


class FetchObjectMetadataUseCase:
    """Use case for reading an object's content type."""

    def __init__(self, object_store: ObjectStorePort):
        self.object_store = object_store

    def execute(self, events: Sequence[S3ObjectEvent]) -> Optional[str]:
        """
        Get the content type of the first object in the notification.

        Args:
            events: Parsed S3 notification records

        Returns:
            Content type, or None when the notification has no records

        Raises:
            MetadataFetchFailure: If the metadata cannot be read
        """
        if not events:
            logger.info("No S3 records in notification")
            return None

        reference = events[0].reference
        try:
            return self.object_store.get_content_type(reference)
        except HandlerError as e:
            cause = e.cause or e
            logger.error(
                f"Error getting object {reference.key} from bucket {reference.bucket}. "
                "Make sure they exist and your bucket is in the same region as this function.",
                exc_info=cause
            )
            logger.error(str(cause))
            if isinstance(e, MetadataFetchFailure):
                raise
            raise MetadataFetchFailure(
                f"Could not read metadata for {reference}",
                reference=reference,
                cause=cause,
                operation="get_content_type"
            ) from e
