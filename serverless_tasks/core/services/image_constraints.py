"""
Image tagging business rules and constraints.
Domain-level constants that remain the same across environments.
"""
from ..models.errors import UnsupportedMediaTypeError
from ..models.object_reference import ObjectReference


class ImageConstraints:
    """Business rules for labelling and tagging images."""

    # Extensions are compared as provided, without case normalization
    SUPPORTED_IMAGE_TYPES = frozenset({".png", ".jpg", ".jpeg"})

    # S3 accepts at most 10 tags per object
    MAX_TAGS_PER_OBJECT = 10

    @classmethod
    def is_supported_image(cls, reference: ObjectReference) -> bool:
        """Check if the object's key has a supported image extension."""
        return reference.extension in cls.SUPPORTED_IMAGE_TYPES

    @classmethod
    def validate_image(cls, reference: ObjectReference) -> None:
        """
        Validate that the object can be sent to label detection.

        Raises:
            UnsupportedMediaTypeError: If the extension is not a supported image type
        """
        if not cls.is_supported_image(reference):
            raise UnsupportedMediaTypeError(
                f"Object {reference} is not a supported image type",
                reference=reference
            )
