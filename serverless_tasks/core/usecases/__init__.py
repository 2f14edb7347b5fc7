from .fetch_object_metadata import FetchObjectMetadataUseCase
from .relay_change_records import RelayChangeRecordsUseCase
from .tag_image_labels import TagImageLabelsUseCase

__all__ = ["FetchObjectMetadataUseCase", "RelayChangeRecordsUseCase", "TagImageLabelsUseCase"]
