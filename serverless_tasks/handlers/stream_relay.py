"""
Lambda handler for DynamoDB stream batches.

Only logs the records; attach business logic through the relay use case's
record processor.
"""
from typing import Any, Dict, Optional

from serverless_tasks.adapters.event_parsers.dynamodb_stream_parser import DynamoDBStreamParser
from .dependencies import DependencyContainer, get_container


def lambda_handler(
    event: Dict[str, Any],
    context: Any,
    container: Optional[DependencyContainer] = None
) -> None:
    container = container or get_container()
    records = DynamoDBStreamParser().parse_event(event)
    container.get_relay_change_records_use_case().execute(records)
