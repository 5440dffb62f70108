# Services package init
"""
Surf Spots Backend - Services Layer
=====================================

What:  Everything between the route handlers (HTTP) and the stored bytes.

Service Inventory:
    - StorageBackend (abstract): Interface over the raw document
    - FileStorage: JSON file on disk with atomic replace (aiofiles)
    - MemoryStorage: In-process document for tests
    - SpotPersistence: Whole-collection load/save and JSON codec
    - SpotRepository: find / append / update / remove over a loaded collection
    - SpotService: Per-request orchestration and the single writer lock
"""
