"""
Surf Spots Backend - Spot Service (Request Orchestrator)
==========================================================

What:  Runs one load → operate → save cycle per API call.
How:   Composes SpotPersistence (I/O + codec) and SpotRepository (list ops).
Who:   Called by the /api/spots route handlers.

Orchestration Flow (mutations):
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────────┐
    │  Route   │───▶│ load() under │───▶│  Repository  │───▶│ save() under │
    │ handler  │    │  write lock  │    │  operation   │    │  write lock  │
    └──────────┘    └──────────────┘    └──────────────┘    └──────────────┘

Concurrency:
    Mutations hold `_write_lock` from load to save, so two concurrent writers
    in this process can no longer overwrite each other's change. Reads skip
    the lock: storage replaces the document atomically, so a reader sees the
    state before or after a write, never a mix.

    The lock is per process. Several uvicorn workers pointed at one file
    still race; run a single worker.
"""

import asyncio
import logging
from typing import List

from surfspots.exceptions import NotFoundError
from surfspots.schemas.spot import SpotRecord, SpotUpdate
from surfspots.services.persistence import SpotPersistence
from surfspots.services.repository import SpotRepository

logger = logging.getLogger(__name__)


class SpotService:
    """
    Business logic layer for spot operations.

    Error Handling Strategy:
        StorageError / DecodeError / EncodeError raised by persistence
        propagate unchanged to the global handlers. A missing id becomes
        NotFoundError here, keeping HTTP out of the repository.
    """

    def __init__(self, persistence: SpotPersistence):
        self.persistence = persistence
        self._write_lock = asyncio.Lock()

    async def list_spots(self) -> List[SpotRecord]:
        collection = await self.persistence.load()
        return collection.records

    async def get_spot(self, spot_id: str) -> SpotRecord:
        """
        Raises:
            NotFoundError: No record with `spot_id`.
        """
        collection = await self.persistence.load()
        record = SpotRepository(collection).find_by_id(spot_id)
        if record is None:
            raise NotFoundError(resource="Spot", resource_id=spot_id)
        return record

    async def create_spot(self, record: SpotRecord) -> None:
        async with self._write_lock:
            collection = await self.persistence.load()
            repository = SpotRepository(collection)
            if record.id and repository.find_by_id(record.id) is not None:
                logger.warning("Creating spot with duplicate id=%s", record.id)
            repository.append(record)
            await self.persistence.save(collection)

        logger.info("Spot created: id=%s (%d total)", record.id, len(repository))

    async def update_spot(self, spot_id: str, update: SpotUpdate) -> None:
        """
        Raises:
            NotFoundError: No record with `spot_id`; nothing is written.
        """
        async with self._write_lock:
            collection = await self.persistence.load()
            if not SpotRepository(collection).update_fields(spot_id, update):
                raise NotFoundError(resource="Spot", resource_id=spot_id)
            await self.persistence.save(collection)

        logger.info("Spot updated: id=%s", spot_id)

    async def delete_spot(self, spot_id: str) -> None:
        """
        Raises:
            NotFoundError: No record with `spot_id`; nothing is written.
        """
        async with self._write_lock:
            collection = await self.persistence.load()
            repository = SpotRepository(collection)
            if not repository.remove_by_id(spot_id):
                raise NotFoundError(resource="Spot", resource_id=spot_id)
            await self.persistence.save(collection)

        logger.info("Spot deleted: id=%s (%d remaining)", spot_id, len(repository))
