"""
Top‑level API router.

Aggregates the domain routers.  The informational routes sit at the
root; user routes live under ``/users``.
"""

from fastapi import APIRouter

from .endpoints import info, users

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(users.router, prefix="/users", tags=["users"])
