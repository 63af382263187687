from __future__ import annotations

from fastapi import APIRouter

from affiliate_roi.api.health import router as health_router
from affiliate_roi.api.projections import router as projections_router


api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(projections_router)
