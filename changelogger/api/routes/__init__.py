"""Route Modules — one file per resource/concern.

Invariants:
    - Each module exposes a build_*_router() factory returning a fresh APIRouter
    - Routes never contain business logic (delegate to services)

Design Decisions:
    - Factories over module-level routers: no process-wide router state, every app
      built by create_app owns its routes
"""
