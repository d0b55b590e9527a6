"""API v1: mounts the pitch and template routers."""

from fastapi import APIRouter

from protolab.api.v1.routers import pitch, templates

router = APIRouter()
router.include_router(pitch.router)
router.include_router(templates.router)
