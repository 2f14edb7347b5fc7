from .label_detector import LabelDetectorPort
from .object_store import ObjectStorePort

__all__ = ["LabelDetectorPort", "ObjectStorePort"]
