from __future__ import annotations

from typing import List, Sequence

from affiliate_roi.analytics.growth_curve import target_fraction
from affiliate_roi.analytics.milestones import DEFAULT_MILESTONES, FINAL_MONTH, FIRST_MONTH, Milestone
from affiliate_roi.analytics.monthly_metrics import compute_month
from affiliate_roi.schemas.projection import (
    MonthRecord,
    ProjectionInputs,
    ProjectionResult,
    ProjectionSummary,
)
from affiliate_roi.shared.rounding import round_half_away


def run_projection(
    inputs: ProjectionInputs, milestones: Sequence[Milestone] = DEFAULT_MILESTONES
) -> ProjectionResult:
    # Residual revenue depends on every customer acquired so far, so months run in order.
    cumulative_customers = 0
    records: List[MonthRecord] = []
    for month in range(FIRST_MONTH, FINAL_MONTH + 1):
        fraction = target_fraction(month, milestones)
        record, cumulative_customers = compute_month(month, fraction, inputs, cumulative_customers)
        records.append(record)
    return ProjectionResult(records=tuple(records))


def summarize_projection(result: ProjectionResult) -> ProjectionSummary:
    records = result.records
    total_revenue = sum(record.total_revenue for record in records)
    total_partnership_spend = sum(record.total_partnership_spend for record in records)
    return ProjectionSummary(
        total_revenue=total_revenue,
        new_revenue=sum(record.new_revenue for record in records),
        residual_revenue=sum(record.residual_revenue for record in records),
        total_partnership_spend=total_partnership_spend,
        equivalent_paid_spend=sum(record.equivalent_paid_spend for record in records),
        spend_savings=sum(record.spend_savings for record in records),
        cogs_amount=sum(record.cogs_amount for record in records),
        profit=sum(record.profit for record in records),
        return_on_partnership_spend=round_half_away(total_revenue / total_partnership_spend, 2),
        final_cumulative_customers=records[-1].cumulative_customers,
    )
