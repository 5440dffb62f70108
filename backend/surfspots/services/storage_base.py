"""
Surf Spots Backend - Abstract Storage Backend Interface
=========================================================

What:  Abstract base class for whatever holds the raw bytes of the spot document.
How:   Concrete backends inherit from StorageBackend and implement read()/write().
Who:   Used by SpotPersistence; chosen once in create_app().

Implementations:
    - FileStorage:   the JSON file on disk (production default)
    - MemoryStorage: an in-process buffer (tests and fakes)

Contract:
    - read() returns the complete document or raises StorageError
    - write() replaces the complete document or raises StorageError
    - Backends never decode JSON; that is SpotPersistence's job
"""

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Abstract interface over the storage of one whole document."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the document, used in logs."""
        ...

    @abstractmethod
    async def read(self) -> bytes:
        """
        Return the full stored document.

        Raises:
            StorageError: Document missing or unreadable.
        """
        ...

    @abstractmethod
    async def write(self, data: bytes) -> None:
        """
        Replace the full stored document with `data`.

        Raises:
            StorageError: Document could not be written.
        """
        ...

    async def exists(self) -> bool:
        """Whether a document is currently stored."""
        return True
