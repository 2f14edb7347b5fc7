"""
Unit tests for the S3 object store adapter.
"""
import pytest
from botocore.exceptions import EndpointConnectionError, ReadTimeoutError

from serverless_tasks.adapters.storage.s3_object_store import S3ObjectStore
from serverless_tasks.core.models import (
    MetadataFetchFailure,
    ObjectTimeoutError,
    Tag,
    TaggingFailure,
)
from tests.utils.mock_helpers import MockHelpers


@pytest.fixture
def object_store(mock_aws_config, mock_s3_client):
    return S3ObjectStore(mock_aws_config, mock_s3_client)


@pytest.mark.unit
class TestS3ObjectStore:
    """Test cases for S3ObjectStore."""

    def test_uses_client_from_config(self, mock_aws_config, mock_s3_client):
        assert S3ObjectStore(mock_aws_config).s3_client is mock_s3_client

    def test_get_content_type(self, object_store, mock_s3_client, image_reference):
        assert object_store.get_content_type(image_reference) == 'image/jpeg'

        mock_s3_client.head_object.assert_called_once_with(Bucket='test-images', Key='uploads/cat.jpg')

    def test_get_content_type_missing_header(self, object_store, mock_s3_client, image_reference):
        mock_s3_client.head_object.return_value = {'ContentLength': 10}

        assert object_store.get_content_type(image_reference) is None

    def test_get_content_type_client_error(self, object_store, mock_s3_client, mock_aws_config, image_reference):
        error = MockHelpers.create_client_error('404', 'HeadObject', 'Not Found')
        mock_s3_client.head_object.side_effect = error

        with pytest.raises(MetadataFetchFailure) as exc_info:
            object_store.get_content_type(image_reference)

        assert exc_info.value.cause is error
        assert exc_info.value.reference == image_reference
        mock_aws_config.handle_aws_error.assert_called_once_with(
            error, 'get_content_type', 'test-images:uploads/cat.jpg'
        )

    def test_put_tagging_replaces_tag_set(self, object_store, mock_s3_client, image_reference):
        object_store.put_tagging(image_reference, [Tag('Cat', '99.5'), Tag('Pet', '97.0')])

        mock_s3_client.put_object_tagging.assert_called_once_with(
            Bucket='test-images',
            Key='uploads/cat.jpg',
            Tagging={'TagSet': [
                {'Key': 'Cat', 'Value': '99.5'},
                {'Key': 'Pet', 'Value': '97.0'}
            ]}
        )

    def test_put_tagging_empty_tag_set(self, object_store, mock_s3_client, image_reference):
        object_store.put_tagging(image_reference, [])

        assert mock_s3_client.put_object_tagging.call_args.kwargs['Tagging'] == {'TagSet': []}

    def test_put_tagging_access_denied(self, object_store, mock_s3_client, image_reference):
        mock_s3_client.put_object_tagging.side_effect = MockHelpers.create_client_error(
            'AccessDenied', 'PutObjectTagging', 'Access Denied'
        )

        with pytest.raises(TaggingFailure) as exc_info:
            object_store.put_tagging(image_reference, [Tag('Cat', '99.5')])

        assert exc_info.value.operation == 'put_tagging'

    def test_put_tagging_connection_error(self, object_store, mock_s3_client, image_reference):
        mock_s3_client.put_object_tagging.side_effect = EndpointConnectionError(endpoint_url='https://s3')

        with pytest.raises(TaggingFailure):
            object_store.put_tagging(image_reference, [])

    def test_read_timeout_maps_to_object_timeout(self, object_store, mock_s3_client, image_reference):
        mock_s3_client.put_object_tagging.side_effect = ReadTimeoutError(endpoint_url='https://s3')

        with pytest.raises(ObjectTimeoutError):
            object_store.put_tagging(image_reference, [])
