"""
Persistence adapters for validation metadata.
"""

from formguard.infrastructure.persistence.memory import InMemoryMetadataCache

__all__ = [
    "InMemoryMetadataCache",
]
