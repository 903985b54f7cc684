"""API Layer — FastAPI routes, dependencies, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - The only layer that chooses HTTP status codes
    - All error bodies are {"error": string}

Design Decisions:
    - Thin routes delegate to services
"""
