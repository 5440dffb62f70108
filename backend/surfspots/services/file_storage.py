"""
Surf Spots Backend - File Storage Backend
===========================================

What:  Reads and writes the spot document as a single JSON file on disk.
How:   Async file I/O via aiofiles. Writes go to a temporary sibling file
       which is then renamed over the target.
Who:   Built by create_app() from settings.data_file.

Write Protocol:
    spot.json                      (current document, untouched until step 3)
    .spot.json.<uuid>.tmp          1. full new content written here
                                   2. flushed and closed
                                   3. os.replace(tmp, spot.json), atomic on POSIX and Windows
    On failure in 1-3 the temporary file is removed and the target keeps
    its previous content.

Reading never creates the file: a missing document is a StorageError, the
same as an unreadable one.
"""

import logging
import uuid
from pathlib import Path
from typing import Union

import aiofiles
import aiofiles.os

from surfspots.exceptions import StorageError
from surfspots.services.storage_base import StorageBackend

logger = logging.getLogger(__name__)


class FileStorage(StorageBackend):
    """
    Storage backend over one file path.

    The temporary file lives in the target's own directory so that the
    final rename never crosses a filesystem boundary.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    async def exists(self) -> bool:
        return await aiofiles.os.path.isfile(self.path)

    async def read(self) -> bytes:
        try:
            async with aiofiles.open(self.path, "rb") as f:
                return await f.read()
        except OSError as e:
            logger.error("Error reading JSON file %s: %s", self.path, str(e))
            raise StorageError(
                message="Failed to read JSON file",
                context={"path": str(self.path), "os_error": str(e)},
            ) from e

    def _temporary_path(self) -> Path:
        return self.path.with_name(f".{self.path.name}.{uuid.uuid4().hex}.tmp")

    async def write(self, data: bytes) -> None:
        tmp_path = self._temporary_path()
        try:
            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(data)
                await f.flush()
            await aiofiles.os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error("Error writing JSON file %s: %s", self.path, str(e))
            await self._cleanup(tmp_path)
            raise StorageError(
                message="Failed to write JSON file",
                context={"path": str(self.path), "os_error": str(e)},
            ) from e

        logger.debug("Wrote %s (%d bytes)", self.path, len(data))

    async def _cleanup(self, tmp_path: Path) -> None:
        """Best-effort removal of a leftover temporary file."""
        try:
            if await aiofiles.os.path.exists(tmp_path):
                await aiofiles.os.remove(tmp_path)
        except OSError as e:
            logger.warning("Failed to clean up temporary file %s: %s", tmp_path, str(e))
