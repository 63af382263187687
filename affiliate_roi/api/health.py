from __future__ import annotations

from fastapi import APIRouter

from affiliate_roi.shared.response import ResponseEnvelope, build_meta


router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> ResponseEnvelope[dict]:
    return ResponseEnvelope(data={"status": "ok"}, meta=build_meta(source="system", time_window="now"))


@router.get("/healthz")
def health_check_liveness() -> ResponseEnvelope[dict]:
    return ResponseEnvelope(data={"status": "ok"}, meta=build_meta(source="system", time_window="now"))
