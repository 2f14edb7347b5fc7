"""
Label detector port (interface).
"""
from abc import ABC, abstractmethod
from typing import List

from ..models.labels import LabelCandidate
from ..models.object_reference import ObjectReference


class LabelDetectorPort(ABC):
    """Port for image label detection."""

    @abstractmethod
    def detect_labels(self, reference: ObjectReference, min_confidence: float) -> List[LabelCandidate]:
        """
        Detect labels in a stored image.

        Args:
            reference: Image location
            min_confidence: Only labels at or above this confidence are returned

        Returns:
            Label candidates in the order the service returned them

        Raises:
            DetectionFailure: If the detection call fails
        """
        pass
