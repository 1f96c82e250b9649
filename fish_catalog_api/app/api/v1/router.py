"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers under their path
prefixes.  When new endpoints are added, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import admin, fishes

router = APIRouter(redirect_slashes=False)

router.include_router(fishes.router, prefix="/fishes", tags=["fishes"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
