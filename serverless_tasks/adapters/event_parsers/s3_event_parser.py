"""
S3 event parsing for Lambda functions.

Validates the Lambda event structure and extracts the S3 object information
of every notification record. Malformed records are logged and skipped.
"""
import json
from typing import Any, Dict, List, Optional
from urllib.parse import unquote_plus

from serverless_tasks.core.models.object_reference import ObjectReference, S3ObjectEvent
from serverless_tasks.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)


class S3EventParser:
    """
    Parser for S3 events that trigger Lambda functions.

    Args:
        object_created_only: Drop records whose event name is not ObjectCreated:*
    """

    def __init__(self, object_created_only: bool = True):
        self.object_created_only = object_created_only

    def parse_event(self, event: Optional[Dict[str, Any]]) -> List[S3ObjectEvent]:
        """
        Parse Lambda event and extract S3 object information.

        Args:
            event: AWS Lambda event payload

        Returns:
            Parsed S3 events in delivery order
        """
        if not event or 'Records' not in event:
            logger.warning("Invalid event structure: missing Records")
            return []

        s3_events = []
        for record in event['Records'] or []:
            s3_event = self._parse_single_record(record)
            if s3_event is None:
                continue
            if self.object_created_only and not s3_event.is_object_created:
                logger.debug("Not an ObjectCreated event", extra={'extra_fields': {
                    "event_name": s3_event.event_name,
                    "key": s3_event.reference.key
                }})
                continue
            s3_events.append(s3_event)

        logger.info("Parsed S3 events", extra={'extra_fields': {
            "total_records": len(event['Records'] or []),
            "valid_events": len(s3_events)
        }})
        return s3_events

    def parse_references(self, event: Optional[Dict[str, Any]]) -> List[ObjectReference]:
        """Parse the event and return only the object references."""
        return [s3_event.reference for s3_event in self.parse_event(event)]

    def _parse_single_record(self, record: Any) -> Optional[S3ObjectEvent]:
        if not isinstance(record, dict) or record.get('eventSource') != 'aws:s3':
            logger.debug("Non-S3 record ignored", extra={'extra_fields': {
                "event_source": record.get('eventSource') if isinstance(record, dict) else None
            }})
            return None

        try:
            bucket_info = record['s3']['bucket']
            object_info = record['s3']['object']

            # Keys arrive URL-encoded (spaces as '+')
            reference = ObjectReference(
                bucket=bucket_info['name'],
                key=unquote_plus(object_info['key'])
            )

            return S3ObjectEvent(
                reference=reference,
                event_name=record.get('eventName', ''),
                event_time=record.get('eventTime', ''),
                size=object_info.get('size', 0),
                etag=object_info.get('eTag', ''),
                region=record.get('awsRegion', '')
            )
        except (KeyError, TypeError) as e:
            logger.warning("Invalid S3 record structure", extra={'extra_fields': {
                "missing_field": str(e),
                "record": json.dumps(record, default=str)
            }})
            return None
