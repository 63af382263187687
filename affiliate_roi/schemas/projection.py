from __future__ import annotations

from typing import List, Optional, Tuple, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt, field_validator

from affiliate_roi.shared.base import BaseSchema, FrozenSchema

PROJECTION_MONTHS = 12

# Booleans are kept as-is so the parser can reject them instead of reading 1.0.
RawInputValue = Optional[Union[StrictInt, StrictFloat, StrictBool, str]]


class ProjectionRequest(BaseSchema):
    """Raw calculator form payload; numbers may arrive as JSON numbers or text."""

    current_revenue: RawInputValue = None
    acquisition_cost: RawInputValue = None
    commission_percent: RawInputValue = None
    average_order_value: RawInputValue = None
    lifetime_value: RawInputValue = None
    cogs_percent: RawInputValue = None


class ProjectionInputs(FrozenSchema):
    baseline_revenue: float = Field(..., ge=0, allow_inf_nan=False)
    acquisition_cost: float = Field(..., ge=0, allow_inf_nan=False)
    commission_rate: float = Field(..., ge=0, le=1, allow_inf_nan=False)
    average_order_value: float = Field(..., gt=0, allow_inf_nan=False)
    lifetime_value: float = Field(..., ge=0, allow_inf_nan=False)
    cogs_rate: float = Field(..., ge=0, le=1, allow_inf_nan=False)


class MilestoneOut(BaseSchema):
    month: int
    target_fraction: float


class GrowthCurvePoint(BaseSchema):
    month: int
    target_fraction: float
    target_percentage: int


class MonthRecord(FrozenSchema):
    month: int = Field(..., ge=1, le=PROJECTION_MONTHS)
    target_fraction: float
    target_percentage: int
    new_revenue: int
    residual_revenue: int
    total_revenue: int
    affiliate_cost: int
    agency_cost: int
    total_partnership_spend: int
    cogs_amount: int
    profit: int
    return_on_partnership_spend: float
    paid_media_spend: int
    paid_platform_fee: int
    equivalent_paid_spend: int
    spend_savings: int
    percent_of_baseline: float
    new_customers: int
    cumulative_customers: int


class ProjectionResult(FrozenSchema):
    records: Tuple[MonthRecord, ...] = Field(
        ..., min_length=PROJECTION_MONTHS, max_length=PROJECTION_MONTHS
    )

    @field_validator("records")
    @classmethod
    def _months_ascending(cls, records: Tuple[MonthRecord, ...]) -> Tuple[MonthRecord, ...]:
        months = [record.month for record in records]
        if months != list(range(1, PROJECTION_MONTHS + 1)):
            raise ValueError("records must cover months 1..12 in ascending order")
        return records


class ProjectionSummary(BaseSchema):
    total_revenue: int
    new_revenue: int
    residual_revenue: int
    total_partnership_spend: int
    equivalent_paid_spend: int
    spend_savings: int
    cogs_amount: int
    profit: int
    return_on_partnership_spend: float
    final_cumulative_customers: int


class ProjectionResponse(BaseSchema):
    inputs: ProjectionInputs
    records: List[MonthRecord]
    summary: ProjectionSummary
