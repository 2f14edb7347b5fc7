"""
AWS client configuration for the Lambda functions.

Provides centralized boto3 client management with Lambda-optimized settings
for the S3 and Rekognition services, plus uniform AWS error logging.
"""
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError, NoCredentialsError

from serverless_tasks.config.settings import LambdaSettings, get_settings
from serverless_tasks.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)


class AWSConfigManager:
    """
    Centralized AWS client management for Lambda functions.

    Clients are created lazily and reused for the lifetime of the container.
    Connect and read timeouts follow the per-object timeout so that a single
    slow collaborator call cannot exceed the object's budget.
    """

    def __init__(self, settings: Optional[LambdaSettings] = None):
        self.settings = settings or get_settings()
        self._s3_client = None
        self._rekognition_client = None

        self._boto_config = Config(
            region_name=self.settings.aws_region,
            retries={
                'max_attempts': self.settings.aws_max_retry_attempts,
                'mode': 'standard'
            },
            max_pool_connections=self.settings.aws_max_pool_connections,
            connect_timeout=self.settings.object_timeout_seconds,
            read_timeout=self.settings.object_timeout_seconds
        )

        logger.info("AWS client manager initialized", extra={'extra_fields': {
            "region": self.settings.aws_region,
            "max_retries": self.settings.aws_max_retry_attempts,
            "timeout_seconds": self.settings.object_timeout_seconds
        }})

    @property
    def s3_client(self):
        """
        Get or create S3 client with proper configuration.

        Raises:
            NoCredentialsError: If AWS credentials are not available
        """
        if self._s3_client is None:
            self._s3_client = self._create_client('s3')
        return self._s3_client

    @property
    def rekognition_client(self):
        """
        Get or create Rekognition client with proper configuration.

        Raises:
            NoCredentialsError: If AWS credentials are not available
        """
        if self._rekognition_client is None:
            self._rekognition_client = self._create_client('rekognition')
        return self._rekognition_client

    def _create_client(self, service_name: str):
        try:
            client = boto3.client(service_name, config=self._boto_config)
            logger.debug(f"{service_name} client created successfully")
            return client
        except NoCredentialsError:
            logger.error(f"AWS credentials not found for {service_name} client")
            raise
        except Exception as e:
            logger.error(f"Failed to create {service_name} client", extra={'extra_fields': {"error": str(e)}})
            raise

    def handle_aws_error(self, error: Exception, operation: str, resource: str = "") -> None:
        """
        Log an AWS service error with its code and request id.

        Args:
            error: The AWS error that occurred
            operation: Description of the operation that failed
            resource: Resource identifier (bucket:key)
        """
        if isinstance(error, ClientError):
            error_code = error.response.get('Error', {}).get('Code', 'Unknown')
            error_message = error.response.get('Error', {}).get('Message', str(error))

            logger.error("AWS ClientError occurred", extra={'extra_fields': {
                "operation": operation,
                "resource": resource,
                "error_code": error_code,
                "error_message": error_message,
                "request_id": error.response.get('ResponseMetadata', {}).get('RequestId')
            }})

            if error_code in ('NoSuchBucket', 'NoSuchKey', '404'):
                logger.error("S3 object or bucket does not exist", extra={'extra_fields': {"resource": resource}})
            elif error_code in ('AccessDenied', 'AccessDeniedException'):
                logger.error("AWS access denied", extra={'extra_fields': {"operation": operation}})
            elif error_code in ('ThrottlingException', 'ProvisionedThroughputExceededException', 'SlowDown'):
                logger.warning("AWS request throttled", extra={'extra_fields': {"operation": operation}})
            elif error_code in ('InvalidImageFormatException', 'ImageTooLargeException', 'InvalidS3ObjectException'):
                logger.error("Image rejected by label detection", extra={'extra_fields': {"resource": resource}})

        elif isinstance(error, NoCredentialsError):
            logger.error("AWS credentials not available", extra={'extra_fields': {
                "operation": operation,
                "resource": resource
            }})
        else:
            logger.error("Unexpected AWS error", extra={'extra_fields': {
                "operation": operation,
                "resource": resource,
                "error": str(error),
                "error_type": type(error).__name__
            }})
