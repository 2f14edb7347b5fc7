"""
Unit tests for the object metadata Lambda handler.
"""
import pytest

from serverless_tasks.adapters.storage.s3_object_store import S3ObjectStore
from serverless_tasks.core.models import MetadataFetchFailure, ObjectReference
from serverless_tasks.handlers.dependencies import configure_dependencies
from serverless_tasks.handlers.object_metadata import lambda_handler
from tests.utils.mock_helpers import MockHelpers


@pytest.mark.unit
class TestObjectMetadataHandler:
    """Test cases for the object metadata handler."""

    def test_returns_content_type(self, test_settings, mock_object_store, mock_s3_event, mock_lambda_context):
        container = configure_dependencies(settings=test_settings, object_store=mock_object_store)

        assert lambda_handler(mock_s3_event, mock_lambda_context, container) == 'image/jpeg'
        mock_object_store.get_content_type.assert_called_once_with(
            ObjectReference('test-images', 'uploads/cat.jpg')
        )

    def test_reads_first_record_of_any_event_type(self, test_settings, mock_object_store, mock_lambda_context):
        event = MockHelpers.create_s3_event([('bucket', 'gone.png')], event_name='ObjectRemoved:Delete')
        container = configure_dependencies(settings=test_settings, object_store=mock_object_store)

        lambda_handler(event, mock_lambda_context, container)

        mock_object_store.get_content_type.assert_called_once_with(ObjectReference('bucket', 'gone.png'))

    def test_malformed_first_record_falls_through_to_next_s3_record(
        self, test_settings, mock_object_store, mock_lambda_context
    ):
        event = MockHelpers.create_s3_event([('bucket', 'second.png')])
        event['Records'].insert(0, {'eventSource': 'aws:s3', 's3': {'bucket': {'name': 'bucket'}}})
        event['Records'].insert(0, {'eventSource': 'aws:sqs', 'body': '{}'})
        container = configure_dependencies(settings=test_settings, object_store=mock_object_store)

        lambda_handler(event, mock_lambda_context, container)

        mock_object_store.get_content_type.assert_called_once_with(ObjectReference('bucket', 'second.png'))

    def test_no_records(self, test_settings, mock_object_store, mock_lambda_context):
        container = configure_dependencies(settings=test_settings, object_store=mock_object_store)

        assert lambda_handler({'Records': []}, mock_lambda_context, container) is None

    def test_missing_object_raises(self, test_settings, mock_aws_config, mock_s3_client, mock_s3_event,
                                   mock_lambda_context):
        mock_s3_client.head_object.side_effect = MockHelpers.create_client_error('404', 'HeadObject', 'Not Found')
        container = configure_dependencies(
            settings=test_settings,
            object_store=S3ObjectStore(mock_aws_config, mock_s3_client)
        )

        with pytest.raises(MetadataFetchFailure):
            lambda_handler(mock_s3_event, mock_lambda_context, container)
