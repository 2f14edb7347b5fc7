"""
Relay Change Records Use Case.

Logs each record of a DynamoDB stream batch. Business logic for the records
plugs in through ``record_processor``; without one the relay only logs.
"""
from typing import Callable, Optional, Sequence

from serverless_tasks.infrastructure.logging.log_config import get_logger
from ..models.change_record import ChangeRecord

logger = get_logger(__name__)

RecordProcessor = Callable[[ChangeRecord], None]


def _ignore_record(record: ChangeRecord) -> None:
    pass


class RelayChangeRecordsUseCase:
    """Use case for relaying change stream records."""

    def __init__(self, record_processor: Optional[RecordProcessor] = None):
        self.record_processor = record_processor or _ignore_record

    def execute(self, records: Sequence[ChangeRecord]) -> int:
        """
        Log every record and hand it to the record processor.

        Exceptions from the record processor propagate so that the stream
        source retries the batch.

        Returns:
            Number of records processed
        """
        logger.info(f"Beginning to process {len(records)} records...")

        for record in records:
            logger.info(f"Event ID: {record.event_id}")
            logger.info(f"Event Name: {record.event_name}")
            self.record_processor(record)

        logger.info("Stream processing complete.")
        return len(records)
