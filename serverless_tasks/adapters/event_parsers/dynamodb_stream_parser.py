"""
DynamoDB Streams event parsing for Lambda functions.
"""
from typing import Any, Dict, List, Optional

from serverless_tasks.core.models.change_record import ChangeRecord
from serverless_tasks.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)


class DynamoDBStreamParser:
    """Parser for DynamoDB stream batches."""

    def parse_event(self, event: Optional[Dict[str, Any]]) -> List[ChangeRecord]:
        """
        Extract change records from a DynamoDB stream event.

        Records from other sources are ignored. The ``dynamodb`` section of
        each record is kept as the opaque payload.
        """
        if not event or 'Records' not in event:
            logger.warning("Invalid event structure: missing Records")
            return []

        records = []
        for record in event['Records'] or []:
            if not isinstance(record, dict) or record.get('eventSource') != 'aws:dynamodb':
                logger.debug("Non-DynamoDB record ignored")
                continue
            records.append(ChangeRecord(
                event_id=record.get('eventID', ''),
                event_name=record.get('eventName', ''),
                payload=record.get('dynamodb') or {}
            ))

        return records
