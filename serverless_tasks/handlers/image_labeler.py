"""
Lambda handler for labelling and tagging images from S3 events.

Event Flow:
1. S3 uploads trigger Lambda with ObjectCreated events
2. Handler parses the S3 records into object references
3. Each supported image is labelled and its tag set is replaced
4. Any per-object failure fails the invocation after the whole batch ran,
   so the event source's redelivery applies
"""
import json
from typing import Any, Dict, Optional

from serverless_tasks.adapters.event_parsers.s3_event_parser import S3EventParser
from serverless_tasks.core.models.errors import BatchProcessingError
from serverless_tasks.infrastructure.logging.log_config import get_logger
from .dependencies import DependencyContainer, get_container

logger = get_logger(__name__)


def lambda_handler(
    event: Dict[str, Any],
    context: Any,
    container: Optional[DependencyContainer] = None
) -> Dict[str, Any]:
    """
    AWS Lambda entry point for S3 image upload events.

    Args:
        event: AWS Lambda event containing S3 notifications
        context: AWS Lambda context object
        container: Dependency container (defaults to the global one)

    Returns:
        Dict with processing results and status

    Raises:
        BatchProcessingError: If labelling or tagging failed for any object
    """
    container = container or get_container()

    logger.info("Lambda function started", extra={'extra_fields': {
        "function_name": getattr(context, 'function_name', 'unknown'),
        "request_id": getattr(context, 'aws_request_id', 'unknown')
    }})

    batch = S3EventParser().parse_references(event)
    if not batch:
        logger.warning("No valid S3 events found in Lambda trigger")
        return {
            'statusCode': 200,
            'body': json.dumps({
                'message': 'No valid S3 events to process',
                'tagged_objects': 0
            })
        }

    remaining_time_ms = getattr(context, 'get_remaining_time_in_millis', None)
    result = container.get_tag_image_labels_use_case().execute(batch, remaining_time_ms)
    summary = result.to_dict()

    if result.has_failures:
        logger.error("Image tagging failed for some objects", extra={'extra_fields': {
            "failed_objects": summary['failed_objects'],
            "errors": summary['errors']
        }})
        raise BatchProcessingError(result.failures)

    return {
        'statusCode': 200,
        'body': json.dumps({
            'message': 'Image tagging completed',
            **summary
        })
    }
