"""
Rekognition label detector implementation.
"""
from typing import List

from botocore.exceptions import BotoCoreError, ClientError, ConnectTimeoutError, ReadTimeoutError

from serverless_tasks.core.models.errors import DetectionFailure, ObjectTimeoutError
from serverless_tasks.core.models.labels import LabelCandidate
from serverless_tasks.core.models.object_reference import ObjectReference
from serverless_tasks.core.ports.label_detector import LabelDetectorPort
from serverless_tasks.infrastructure.aws.aws_config import AWSConfigManager
from serverless_tasks.infrastructure.logging.log_decorators import log_infrastructure_operation


class RekognitionLabelDetector(LabelDetectorPort):
    """Detects labels in S3-hosted images with Amazon Rekognition."""

    def __init__(self, aws_config: AWSConfigManager, rekognition_client=None):
        self.aws_config = aws_config
        self.rekognition_client = rekognition_client or aws_config.rekognition_client

    @log_infrastructure_operation("detect_labels", include_args=True)
    def detect_labels(self, reference: ObjectReference, min_confidence: float) -> List[LabelCandidate]:
        try:
            response = self.rekognition_client.detect_labels(
                Image={
                    'S3Object': {
                        'Bucket': reference.bucket,
                        'Name': reference.key
                    }
                },
                MinConfidence=min_confidence
            )
        except (ConnectTimeoutError, ReadTimeoutError) as e:
            raise ObjectTimeoutError(
                f"Timed out detecting labels for {reference}",
                reference=reference, cause=e, operation="detect_labels"
            ) from e
        except (ClientError, BotoCoreError) as e:
            self.aws_config.handle_aws_error(e, "detect_labels", str(reference))
            raise DetectionFailure(
                f"Could not detect labels for {reference}: {e}",
                reference=reference, cause=e, operation="detect_labels"
            ) from e

        return [
            LabelCandidate(name=label['Name'], confidence=float(label['Confidence']))
            for label in response.get('Labels', [])
        ]
