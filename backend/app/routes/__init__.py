"""
Todo API — Router
==================

What:  Static table mapping (method, path) onto handlers.
How:   Combines the per-resource APIRouters into `api_router`, which
       create_app() mounts once. No conditional logic, no mutable state.

Route Inventory:
    - health.py:  GET    /                (plain-text greeting)
                  GET    /health          (liveness probe)
    - todos.py:   GET    /todos           (list, limit/page)
                  POST   /todo            (create)
                  GET    /todo/{id}       (get)
                  PATCH  /todo/{id}       (partial update)
                  DELETE /todo/{id}       (delete)

Shared state (a pooled AsyncSession) reaches every todo handler through
the Depends chain declared in todos.py.
"""

from fastapi import APIRouter

from app.routes import health, todos

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(todos.router)
