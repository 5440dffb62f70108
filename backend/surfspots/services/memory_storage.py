"""In-process storage backend used by tests and local fakes."""

from typing import Optional

from surfspots.exceptions import StorageError
from surfspots.services.storage_base import StorageBackend


class MemoryStorage(StorageBackend):
    """
    Holds the document as bytes in memory.

    Starts empty unless `initial` is given; reading an empty store raises
    StorageError just like a missing file does.
    """

    def __init__(self, initial: Optional[bytes] = None):
        self._data = initial
        self.write_count = 0

    @property
    def location(self) -> str:
        return "memory"

    @property
    def data(self) -> Optional[bytes]:
        return self._data

    async def exists(self) -> bool:
        return self._data is not None

    async def read(self) -> bytes:
        if self._data is None:
            raise StorageError(
                message="Failed to read JSON file",
                context={"path": self.location, "os_error": "no document stored"},
            )
        return self._data

    async def write(self, data: bytes) -> None:
        self._data = bytes(data)
        self.write_count += 1
