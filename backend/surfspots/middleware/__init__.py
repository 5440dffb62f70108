# Middleware package init
"""
Surf Spots Backend - Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the id; the
    response passes back through the chain in reverse.
"""
