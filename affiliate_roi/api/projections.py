from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from affiliate_roi.api.dependencies import get_projection_service
from affiliate_roi.core.config import get_settings
from affiliate_roi.schemas.projection import (
    GrowthCurvePoint,
    MilestoneOut,
    ProjectionRequest,
    ProjectionResponse,
)
from affiliate_roi.services.projection_service import ProjectionService
from affiliate_roi.shared.response import ResponseEnvelope, build_meta


router = APIRouter(prefix="/projections", tags=["projections"])

PROJECTION_SOURCE = "affiliate_calculator"
PROJECTION_WINDOW = "12m"


@router.post("")
def create_projection(
    request: ProjectionRequest,
    service: ProjectionService = Depends(get_projection_service),
) -> ResponseEnvelope[ProjectionResponse]:
    data = service.project(request)
    meta = build_meta(
        source=PROJECTION_SOURCE,
        time_window=PROJECTION_WINDOW,
        currency=get_settings().currency_code,
    )
    return ResponseEnvelope(data=data, meta=meta)


@router.get("/milestones")
def projection_milestones(
    service: ProjectionService = Depends(get_projection_service),
) -> ResponseEnvelope[List[MilestoneOut]]:
    meta = build_meta(source=PROJECTION_SOURCE, time_window=PROJECTION_WINDOW)
    return ResponseEnvelope(data=service.get_milestones(), meta=meta)


@router.get("/growth-curve")
def projection_growth_curve(
    service: ProjectionService = Depends(get_projection_service),
) -> ResponseEnvelope[List[GrowthCurvePoint]]:
    meta = build_meta(source=PROJECTION_SOURCE, time_window=PROJECTION_WINDOW)
    return ResponseEnvelope(data=service.get_growth_curve(), meta=meta)
