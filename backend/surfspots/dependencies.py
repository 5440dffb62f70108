"""
Surf Spots Backend - Service Wiring
=====================================

What:  Builds the storage → persistence → service chain and exposes it to
       route handlers as a FastAPI dependency.
How:   create_app() calls build_spot_service() once and stores the result on
       app.state; get_spot_service() hands it to each request.

Why app.state (not a module-level singleton):
    Each app instance owns its own storage handle and writer lock, so tests
    can build an app over MemoryStorage or a temp file without patching.
"""

from typing import Optional

from fastapi import Request

from surfspots.config import settings
from surfspots.services.file_storage import FileStorage
from surfspots.services.persistence import SpotPersistence
from surfspots.services.spot_service import SpotService
from surfspots.services.storage_base import StorageBackend


def build_spot_service(storage: Optional[StorageBackend] = None) -> SpotService:
    """Wire a SpotService, defaulting to FileStorage over settings.data_file."""
    if storage is None:
        storage = FileStorage(settings.data_path)
    return SpotService(SpotPersistence(storage))


def get_spot_service(request: Request) -> SpotService:
    """FastAPI dependency returning the app's SpotService."""
    return request.app.state.spot_service
