"""
Top-level API router.

Aggregates the domain routers under a single router which the
application mounts at ``/api``.
"""

from fastapi import APIRouter

from .endpoints import clients, info

router = APIRouter()

router.include_router(clients.router, prefix="/clients", tags=["clients"])
router.include_router(info.router, prefix="/info", tags=["info"])
