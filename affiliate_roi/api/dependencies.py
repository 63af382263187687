from __future__ import annotations

from functools import lru_cache

from affiliate_roi.services.projection_service import ProjectionService


@lru_cache
def get_projection_service() -> ProjectionService:
    return ProjectionService()
