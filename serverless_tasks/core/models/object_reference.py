"""
Storage domain models.
Pure domain entities without infrastructure dependencies.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ObjectReference:
    """Identifies one stored object (bucket + key)."""
    bucket: str
    key: str

    @property
    def extension(self) -> str:
        """
        File extension of the key including the dot, case preserved.

        Taken from the last dot of the final path segment, so dot-files such as
        ``uploads/.png`` have the extension ``.png``. A trailing dot gives ''.
        """
        name = self.key.rsplit("/", 1)[-1]
        index = name.rfind(".")
        if index < 0 or index == len(name) - 1:
            return ""
        return name[index:]

    def __str__(self) -> str:
        return f"{self.bucket}:{self.key}"


@dataclass(frozen=True)
class S3ObjectEvent:
    """One parsed S3 notification record."""
    reference: ObjectReference
    event_name: str = ""
    event_time: str = ""
    size: int = 0
    etag: str = ""
    region: str = ""

    @property
    def is_object_created(self) -> bool:
        return self.event_name.startswith("ObjectCreated")
