from .dynamodb_stream_parser import DynamoDBStreamParser
from .s3_event_parser import S3EventParser

__all__ = ["DynamoDBStreamParser", "S3EventParser"]
