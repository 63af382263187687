from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

from affiliate_roi.analytics.growth_curve import growth_curve
from affiliate_roi.analytics.milestones import DEFAULT_MILESTONES, Milestone, validate_milestones
from affiliate_roi.analytics.monthly_metrics import ProjectionOverflowError
from affiliate_roi.analytics.projection import run_projection, summarize_projection
from affiliate_roi.core.errors import InvalidInputError
from affiliate_roi.schemas.projection import (
    GrowthCurvePoint,
    MilestoneOut,
    ProjectionInputs,
    ProjectionRequest,
    ProjectionResponse,
)

logger = logging.getLogger(__name__)

# Request field -> (inputs field, divisor turning a percentage into a fraction)
INPUT_FIELDS: Dict[str, tuple[str, float]] = {
    "current_revenue": ("baseline_revenue", 1.0),
    "acquisition_cost": ("acquisition_cost", 1.0),
    "commission_percent": ("commission_rate", 100.0),
    "average_order_value": ("average_order_value", 1.0),
    "lifetime_value": ("lifetime_value", 1.0),
    "cogs_percent": ("cogs_rate", 100.0),
}
PERCENT_FIELDS = frozenset({"commission_percent", "cogs_percent"})


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_float(value: object) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        parsed = float(value.strip() if isinstance(value, str) else value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def parse_projection_inputs(request: ProjectionRequest) -> ProjectionInputs:
    missing: List[str] = []
    invalid: List[str] = []
    values: Dict[str, float] = {}
    for request_field, (input_field, divisor) in INPUT_FIELDS.items():
        raw = getattr(request, request_field)
        if _is_blank(raw):
            missing.append(request_field)
            continue
        parsed = _to_float(raw)
        if parsed is None or parsed < 0:
            invalid.append(request_field)
            continue
        if request_field in PERCENT_FIELDS and parsed > 100:
            invalid.append(request_field)
            continue
        if request_field == "average_order_value" and parsed <= 0:
            invalid.append(request_field)
            continue
        values[input_field] = parsed / divisor

    if missing or invalid:
        raise InvalidInputError(missing=missing, invalid=invalid)
    return ProjectionInputs(**values)


class ProjectionService:
    def __init__(self, milestones: Sequence[Milestone] = DEFAULT_MILESTONES) -> None:
        self.milestones = validate_milestones(milestones)

    def project(self, request: ProjectionRequest) -> ProjectionResponse:
        try:
            inputs = parse_projection_inputs(request)
        except InvalidInputError as exc:
            logger.warning("Projection rejected: %s", exc.message)
            raise
        return self.project_inputs(inputs)

    def project_inputs(self, inputs: ProjectionInputs) -> ProjectionResponse:
        try:
            result = run_projection(inputs, self.milestones)
        except ProjectionOverflowError as exc:
            logger.warning("Projection rejected: %s", exc)
            raise InvalidInputError(missing=[], invalid=[], reason=str(exc)) from exc
        summary = summarize_projection(result)
        final_month = result.records[-1]
        logger.info(
            "Projection computed: month %s revenue=%s customers=%s savings=%s",
            final_month.month,
            final_month.total_revenue,
            final_month.cumulative_customers,
            summary.spend_savings,
        )
        return ProjectionResponse(inputs=inputs, records=list(result.records), summary=summary)

    def get_milestones(self) -> List[MilestoneOut]:
        return [
            MilestoneOut(month=milestone.month, target_fraction=milestone.target_fraction)
            for milestone in self.milestones
        ]

    def get_growth_curve(self) -> List[GrowthCurvePoint]:
        return growth_curve(self.milestones)
