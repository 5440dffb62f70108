"""
Surf Spots Backend - Persistence Adapter
==========================================

What:  Loads and saves the whole SpotCollection through a StorageBackend.
How:   read bytes → pydantic decode on load; pydantic encode → write bytes on save.
Who:   Called by SpotService at the start (load) and end (save) of a request.

There are no partial reads or writes: every load decodes the full document
and every save rewrites it.
"""

import logging

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from surfspots.exceptions import DecodeError, EncodeError
from surfspots.schemas.spot import SpotCollection
from surfspots.services.storage_base import StorageBackend

logger = logging.getLogger(__name__)


def decode_collection(raw: bytes) -> SpotCollection:
    """
    Decode a stored document.

    Raises:
        DecodeError: Not well-formed JSON, or JSON that does not match the schema.
    """
    try:
        return SpotCollection.model_validate_json(raw)
    except PydanticValidationError as e:
        logger.error("Error parsing JSON data: %d problem(s)", e.error_count())
        raise DecodeError(
            message="Failed to parse JSON",
            context={"errors": e.errors(include_url=False)[:5]},
        ) from e


def encode_collection(collection: SpotCollection) -> bytes:
    """
    Encode a collection with the document's JSON key names.

    Absent fields are written as null so that every record carries the full
    key set.

    Raises:
        EncodeError: The collection holds a value pydantic cannot serialize.
    """
    try:
        return collection.model_dump_json(by_alias=True).encode("utf-8")
    except (PydanticSerializationError, ValueError, TypeError) as e:
        logger.error("Error encoding JSON data: %s", str(e))
        raise EncodeError(message="Failed to encode JSON", context={"error": str(e)}) from e


class SpotPersistence:
    """Whole-document load/save over an injected storage backend."""

    def __init__(self, storage: StorageBackend):
        self.storage = storage

    async def load(self) -> SpotCollection:
        """
        Raises:
            StorageError: Document missing or unreadable.
            DecodeError:  Content is not a valid SpotCollection.
        """
        raw = await self.storage.read()
        collection = decode_collection(raw)
        logger.debug(
            "Loaded %d record(s) from %s", len(collection.records), self.storage.location
        )
        return collection

    async def save(self, collection: SpotCollection) -> None:
        """
        Raises:
            EncodeError:  Collection could not be serialized.
            StorageError: Document could not be written.
        """
        data = encode_collection(collection)
        await self.storage.write(data)
        logger.debug(
            "Saved %d record(s) to %s", len(collection.records), self.storage.location
        )
