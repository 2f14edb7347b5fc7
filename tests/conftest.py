"""
Shared test configuration and fixtures for the serverless task functions.
"""
import os
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Setup Python path once for all tests
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment variables before any settings are read
os.environ['ENVIRONMENT'] = 'test'
os.environ['LOG_LEVEL'] = 'INFO'
os.environ['AWS_REGION'] = 'us-east-1'
os.environ['AWS_DEFAULT_REGION'] = 'us-east-1'
os.environ['AWS_ACCESS_KEY_ID'] = 'testing'
os.environ['AWS_SECRET_ACCESS_KEY'] = 'testing'

from serverless_tasks.config.settings import LambdaSettings
from serverless_tasks.core.models import ObjectReference
from tests.utils.mock_helpers import MockHelpers


# ENVIRONMENT & CONFIGURATION FIXTURES

@pytest.fixture
def test_settings() -> LambdaSettings:
    """Settings with explicit values, independent of the environment."""
    return LambdaSettings(
        min_confidence=80.0,
        environment='test',
        object_timeout_seconds=30.0,
        timeout_safety_margin_ms=1000,
        max_workers=1
    )


# MOCK FIXTURES

@pytest.fixture
def mock_lambda_context():
    """Mock Lambda context for testing."""
    context = Mock()
    context.function_name = 'image-labeler'
    context.aws_request_id = 'test-request-id-123'
    context.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:image-labeler'
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def mock_s3_client() -> Mock:
    """Mock boto3 S3 client."""
    return MockHelpers.create_mock_s3_client()


@pytest.fixture
def mock_rekognition_client() -> Mock:
    """Mock boto3 Rekognition client returning three labels."""
    return MockHelpers.create_mock_rekognition_client(MockHelpers.create_rekognition_labels(3))


@pytest.fixture
def mock_aws_config(mock_s3_client, mock_rekognition_client) -> Mock:
    """Mock AWS config manager exposing the mocked clients."""
    aws_config = Mock()
    aws_config.s3_client = mock_s3_client
    aws_config.rekognition_client = mock_rekognition_client
    return aws_config


@pytest.fixture
def mock_object_store() -> Mock:
    """Mock object store port."""
    return MockHelpers.create_mock_object_store()


@pytest.fixture
def mock_label_detector() -> Mock:
    """Mock label detector port returning three labels."""
    return MockHelpers.create_mock_label_detector(MockHelpers.create_label_candidates(3))


# TEST DATA FIXTURES

@pytest.fixture
def image_reference() -> ObjectReference:
    return ObjectReference(bucket='test-images', key='uploads/cat.jpg')


@pytest.fixture
def text_reference() -> ObjectReference:
    return ObjectReference(bucket='test-images', key='uploads/notes.txt')


@pytest.fixture
def mock_s3_event():
    """Sample S3 event with one image and one text file."""
    return MockHelpers.create_s3_event([
        ('test-images', 'uploads/cat.jpg'),
        ('test-images', 'uploads/notes.txt')
    ])


@pytest.fixture
def mock_dynamodb_event():
    """Sample DynamoDB stream event with two records."""
    return {
        'Records': [
            {
                'eventID': '1',
                'eventName': 'INSERT',
                'eventSource': 'aws:dynamodb',
                'awsRegion': 'us-east-1',
                'dynamodb': {
                    'Keys': {'Id': {'N': '101'}},
                    'NewImage': {'Id': {'N': '101'}, 'Message': {'S': 'New item!'}},
                    'StreamViewType': 'NEW_AND_OLD_IMAGES'
                }
            },
            {
                'eventID': '2',
                'eventName': 'MODIFY',
                'eventSource': 'aws:dynamodb',
                'awsRegion': 'us-east-1',
                'dynamodb': {
                    'Keys': {'Id': {'N': '101'}},
                    'NewImage': {'Id': {'N': '101'}, 'Message': {'S': 'This item has changed'}},
                    'StreamViewType': 'NEW_AND_OLD_IMAGES'
                }
            }
        ]
    }
