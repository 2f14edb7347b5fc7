"""
S3 object store implementation.

This module provides the S3-based implementation of the ObjectStorePort
interface, translating botocore errors into domain exceptions.
"""
from typing import Optional, Sequence

from botocore.exceptions import BotoCoreError, ClientError, ConnectTimeoutError, ReadTimeoutError

from serverless_tasks.core.models.errors import MetadataFetchFailure, ObjectTimeoutError, TaggingFailure
from serverless_tasks.core.models.labels import Tag
from serverless_tasks.core.models.object_reference import ObjectReference
from serverless_tasks.core.ports.object_store import ObjectStorePort
from serverless_tasks.infrastructure.aws.aws_config import AWSConfigManager
from serverless_tasks.infrastructure.logging.log_decorators import log_infrastructure_operation


class S3ObjectStore(ObjectStorePort):
    """
    S3 implementation of the object store.

    Tagging always replaces the object's whole tag set, so writing the same
    tags twice leaves the object in the same state.
    """

    def __init__(self, aws_config: AWSConfigManager, s3_client=None):
        self.aws_config = aws_config
        self.s3_client = s3_client or aws_config.s3_client

    @log_infrastructure_operation("get_object_metadata", include_args=True)
    def get_content_type(self, reference: ObjectReference) -> Optional[str]:
        try:
            response = self.s3_client.head_object(Bucket=reference.bucket, Key=reference.key)
        except (ConnectTimeoutError, ReadTimeoutError) as e:
            raise ObjectTimeoutError(
                f"Timed out reading metadata for {reference}",
                reference=reference, cause=e, operation="get_content_type"
            ) from e
        except (ClientError, BotoCoreError) as e:
            self.aws_config.handle_aws_error(e, "get_content_type", str(reference))
            raise MetadataFetchFailure(
                f"Could not read metadata for {reference}: {e}",
                reference=reference, cause=e, operation="get_content_type"
            ) from e

        return response.get('ContentType')

    @log_infrastructure_operation("put_object_tagging", include_args=True, include_result=False)
    def put_tagging(self, reference: ObjectReference, tags: Sequence[Tag]) -> None:
        try:
            self.s3_client.put_object_tagging(
                Bucket=reference.bucket,
                Key=reference.key,
                Tagging={'TagSet': [tag.to_s3() for tag in tags]}
            )
        except (ConnectTimeoutError, ReadTimeoutError) as e:
            raise ObjectTimeoutError(
                f"Timed out writing tags for {reference}",
                reference=reference, cause=e, operation="put_tagging"
            ) from e
        except (ClientError, BotoCoreError) as e:
            self.aws_config.handle_aws_error(e, "put_tagging", str(reference))
            raise TaggingFailure(
                f"Could not write tags for {reference}: {e}",
                reference=reference, cause=e, operation="put_tagging"
            ) from e
