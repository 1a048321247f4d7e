"""
In-memory cache for class metadata.

Metadata is built once per class per process.
"""

from formguard.domain.interfaces import MetadataCacheInterface
from formguard.domain.metadata import ClassMetadata


class InMemoryMetadataCache(MetadataCacheInterface):
    """Simple dict-backed metadata cache."""

    def __init__(self) -> None:
        self._metadata: dict[type, ClassMetadata] = {}

    def has(self, cls: type) -> bool:
        return cls in self._metadata

    def read(self, cls: type) -> ClassMetadata:
        if cls not in self._metadata:
            raise KeyError(f"No metadata cached for class: {cls.__name__}")
        return self._metadata[cls]

    def write(self, metadata: ClassMetadata) -> None:
        self._metadata[metadata.cls] = metadata

    def clear(self) -> None:
        self._metadata.clear()
