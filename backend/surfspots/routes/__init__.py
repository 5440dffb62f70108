# Routes package init
"""
Surf Spots Backend - API Routes Package
=========================================

Route Inventory:
    - spots.py:   GET/POST       /api/spots
                  GET/PUT/DELETE /api/spots/{id}
    - health.py:  GET            /health

Routes are thin: extract path/body, call SpotService, pick the status code.
"""
