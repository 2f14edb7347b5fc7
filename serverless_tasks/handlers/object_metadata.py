"""
Lambda handler returning the content type of an uploaded S3 object.
"""
from typing import Any, Dict, Optional

from serverless_tasks.adapters.event_parsers.s3_event_parser import S3EventParser
from .dependencies import DependencyContainer, get_container


def lambda_handler(
    event: Dict[str, Any],
    context: Any,
    container: Optional[DependencyContainer] = None
) -> Optional[str]:
    """
    AWS Lambda entry point for S3 notifications.

    Reads the first well-formed S3 record of the notification, whatever its
    event name. Records that are not from S3 or lack bucket or key fields are
    skipped by the parser, so the lookup uses the next valid record.

    Returns:
        Content type of the object, or None when the event has no records

    Raises:
        MetadataFetchFailure: If the object's metadata cannot be read
    """
    container = container or get_container()
    events = S3EventParser(object_created_only=False).parse_event(event)
    return container.get_fetch_object_metadata_use_case().execute(events)
