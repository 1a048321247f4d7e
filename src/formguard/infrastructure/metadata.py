"""
Metadata loading: builds ClassMetadata from ``load_validator_metadata`` hooks.
"""

import logging

from formguard.domain.interfaces import MetadataCacheInterface, MetadataFactoryInterface
from formguard.domain.metadata import ClassMetadata
from formguard.infrastructure.persistence.memory import InMemoryMetadataCache

logger = logging.getLogger(__name__)


class StaticMethodLoader:
    """
    Calls a class-level hook that declares constraints.

    Only a hook defined on the class itself is called; inherited constraints
    are merged by the factory.
    """

    def __init__(self, method_name: str = "load_validator_metadata"):
        self.method_name = method_name

    def load_class_metadata(self, metadata: ClassMetadata) -> bool:
        """
        Args:
            metadata: Empty metadata for the class to load

        Returns:
            True if the class declared a hook
        """
        hook = metadata.cls.__dict__.get(self.method_name)
        if hook is None:
            return False
        if isinstance(hook, (classmethod, staticmethod)):
            hook = hook.__get__(None, metadata.cls)
            hook(metadata)
        else:
            raise TypeError(
                f"{metadata.class_name}.{self.method_name} must be a classmethod "
                "or staticmethod"
            )
        return True


class ClassMetadataFactory(MetadataFactoryInterface):
    """
    Builds and caches metadata, merging the metadata of base classes.

    Args:
        loader: Reads constraint declarations from classes
        cache: Stores loaded metadata (in-memory if None)
    """

    def __init__(
        self,
        loader: StaticMethodLoader | None = None,
        cache: MetadataCacheInterface | None = None,
    ):
        self._loader = loader or StaticMethodLoader()
        self._cache = cache if cache is not None else InMemoryMetadataCache()

    def get_class_metadata(self, cls: type) -> ClassMetadata:
        if self._cache.has(cls):
            return self._cache.read(cls)

        metadata = ClassMetadata(cls)
        for base in cls.__bases__:
            if base is not object:
                metadata.merge_constraints(self.get_class_metadata(base))
        if self._loader.load_class_metadata(metadata):
            logger.debug("Loaded validation metadata for %s", cls.__qualname__)

        self._cache.write(metadata)
        return metadata
