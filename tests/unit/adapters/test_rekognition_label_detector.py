"""
Unit tests for the Rekognition label detector adapter.
"""
import pytest
from botocore.exceptions import ConnectTimeoutError

from serverless_tasks.adapters.detection.rekognition_label_detector import RekognitionLabelDetector
from serverless_tasks.core.models import DetectionFailure, LabelCandidate, ObjectTimeoutError
from tests.utils.mock_helpers import MockHelpers


@pytest.fixture
def detector(mock_aws_config, mock_rekognition_client):
    return RekognitionLabelDetector(mock_aws_config, mock_rekognition_client)


@pytest.mark.unit
class TestRekognitionLabelDetector:
    """Test cases for RekognitionLabelDetector."""

    def test_detect_labels_request(self, detector, mock_rekognition_client, image_reference):
        detector.detect_labels(image_reference, 85.0)

        mock_rekognition_client.detect_labels.assert_called_once_with(
            Image={'S3Object': {'Bucket': 'test-images', 'Name': 'uploads/cat.jpg'}},
            MinConfidence=85.0
        )

    def test_labels_keep_service_order(self, detector, image_reference):
        labels = detector.detect_labels(image_reference, 80.0)

        assert labels == [
            LabelCandidate('Label0', 99.5),
            LabelCandidate('Label1', 98.5),
            LabelCandidate('Label2', 97.5)
        ]

    def test_no_labels(self, detector, mock_rekognition_client, image_reference):
        mock_rekognition_client.detect_labels.return_value = {'Labels': []}

        assert detector.detect_labels(image_reference, 80.0) == []

    def test_invalid_image_raises_detection_failure(
        self, detector, mock_rekognition_client, mock_aws_config, image_reference
    ):
        error = MockHelpers.create_client_error('InvalidImageFormatException', 'DetectLabels', 'bad image')
        mock_rekognition_client.detect_labels.side_effect = error

        with pytest.raises(DetectionFailure) as exc_info:
            detector.detect_labels(image_reference, 80.0)

        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error
        mock_aws_config.handle_aws_error.assert_called_once()

    def test_connect_timeout(self, detector, mock_rekognition_client, image_reference):
        mock_rekognition_client.detect_labels.side_effect = ConnectTimeoutError(endpoint_url='https://rekognition')

        with pytest.raises(ObjectTimeoutError) as exc_info:
            detector.detect_labels(image_reference, 80.0)

        assert exc_info.value.operation == 'detect_labels'
