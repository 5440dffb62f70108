"""
Surf Spots Backend - Application Package Initializer
====================================================

What: Marks the `surfspots` directory as a Python package.
Who:  Used by uvicorn (`surfspots.main:app`), `python -m surfspots` and pytest.

Architecture Note:
    The backend is a thin layered service over one JSON document:

    ┌─────────────────────────────────────┐
    │        Routes (API Layer)           │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     SpotService (Orchestration)     │  ← load → operate → save, writer lock
    ├─────────────────────────────────────┤
    │  SpotRepository  │  SpotPersistence │  ← list operations │ JSON codec
    ├─────────────────────────────────────┤
    │    StorageBackend (File / Memory)   │  ← raw document bytes
    └─────────────────────────────────────┘

    Nothing is cached between requests: the stored document is the only state.
"""

__version__ = "1.0.0"
