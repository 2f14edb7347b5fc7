"""
Serverless task functions reacting to S3, DynamoDB Streams and Step Functions events.
"""

__version__ = "1.0.0"
