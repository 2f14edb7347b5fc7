"""
Object store port (interface).

Defines the storage operations the handlers need without implementation
details.
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..models.labels import Tag
from ..models.object_reference import ObjectReference


class ObjectStorePort(ABC):
    """Port for object metadata and tagging operations."""

    @abstractmethod
    def get_content_type(self, reference: ObjectReference) -> Optional[str]:
        """
        Get the content type of a stored object (None if the object has none).

        Raises:
            MetadataFetchFailure: If the metadata cannot be read
        """
        pass

    @abstractmethod
    def put_tagging(self, reference: ObjectReference, tags: Sequence[Tag]) -> None:
        """
        Replace the object's full tag set.

        Raises:
            TaggingFailure: If the tag set cannot be written
        """
        pass
