from __future__ import annotations

import math
from typing import Tuple

from affiliate_roi.schemas.projection import MonthRecord, ProjectionInputs
from affiliate_roi.shared.rounding import round_half_away, round_to_int

MONTHS_PER_YEAR = 12
AGENCY_COST_FLOOR = 3500
AGENCY_RATE_MULTIPLIER = 1.5
AGENCY_RATE_CAP = 0.05
PAID_PLATFORM_FEE_RATE = 0.15


class ProjectionOverflowError(ValueError):
    """Raised when the inputs push a monthly figure past the float range."""


def _require_finite(month: int, **figures: float) -> None:
    overflowed = [name for name, value in figures.items() if not math.isfinite(value)]
    if overflowed:
        raise ProjectionOverflowError(
            f"Month {month} figures are not finite: " + ", ".join(overflowed)
        )


def agency_rate(commission_rate: float) -> float:
    return min(commission_rate * AGENCY_RATE_MULTIPLIER, AGENCY_RATE_CAP)


def compute_month(
    month: int,
    target_fraction: float,
    inputs: ProjectionInputs,
    cumulative_customers_before: int,
) -> Tuple[MonthRecord, int]:
    """Derive one month of partnership vs. paid-acquisition figures.

    Returns the rounded record and the cumulative customer count after this
    month. Intermediate math stays unrounded; rounding happens only when the
    record is built.
    """
    aov = inputs.average_order_value

    new_revenue = inputs.baseline_revenue * target_fraction
    exact_customers = new_revenue / aov
    _require_finite(month, new_revenue=new_revenue, new_customers=exact_customers)
    new_customers = round_to_int(exact_customers)
    cumulative_customers = cumulative_customers_before + new_customers

    try:
        residual_revenue = cumulative_customers * ((inputs.lifetime_value - aov) / MONTHS_PER_YEAR)
    except OverflowError as exc:
        raise ProjectionOverflowError(
            f"Month {month} figures are not finite: residual_revenue"
        ) from exc
    total_revenue = new_revenue + residual_revenue

    affiliate_cost = new_revenue * inputs.commission_rate
    agency_cost = max(AGENCY_COST_FLOOR, new_revenue * agency_rate(inputs.commission_rate))
    total_partnership_spend = affiliate_cost + agency_cost
    cogs_amount = total_revenue * inputs.cogs_rate

    implied_customers = total_revenue / aov
    paid_media_spend = implied_customers * inputs.acquisition_cost
    paid_platform_fee = paid_media_spend * PAID_PLATFORM_FEE_RATE
    equivalent_paid_spend = paid_media_spend + paid_platform_fee

    profit = total_revenue - total_partnership_spend - cogs_amount
    return_on_partnership_spend = total_revenue / total_partnership_spend
    spend_savings = equivalent_paid_spend - total_partnership_spend

    if inputs.baseline_revenue > 0:
        percent_of_baseline = total_revenue / inputs.baseline_revenue * 100
    else:
        percent_of_baseline = 0.0

    _require_finite(
        month,
        residual_revenue=residual_revenue,
        total_revenue=total_revenue,
        affiliate_cost=affiliate_cost,
        agency_cost=agency_cost,
        total_partnership_spend=total_partnership_spend,
        cogs_amount=cogs_amount,
        paid_media_spend=paid_media_spend,
        paid_platform_fee=paid_platform_fee,
        equivalent_paid_spend=equivalent_paid_spend,
        profit=profit,
        return_on_partnership_spend=return_on_partnership_spend,
        spend_savings=spend_savings,
        percent_of_baseline=percent_of_baseline,
    )

    record = MonthRecord(
        month=month,
        target_fraction=target_fraction,
        target_percentage=round_to_int(target_fraction * 100),
        new_revenue=round_to_int(new_revenue),
        residual_revenue=round_to_int(residual_revenue),
        total_revenue=round_to_int(total_revenue),
        affiliate_cost=round_to_int(affiliate_cost),
        agency_cost=round_to_int(agency_cost),
        total_partnership_spend=round_to_int(total_partnership_spend),
        cogs_amount=round_to_int(cogs_amount),
        profit=round_to_int(profit),
        return_on_partnership_spend=round_half_away(return_on_partnership_spend, 2),
        paid_media_spend=round_to_int(paid_media_spend),
        paid_platform_fee=round_to_int(paid_platform_fee),
        equivalent_paid_spend=round_to_int(equivalent_paid_spend),
        spend_savings=round_to_int(spend_savings),
        percent_of_baseline=round_half_away(percent_of_baseline, 1),
        new_customers=new_customers,
        cumulative_customers=cumulative_customers,
    )
    return record, cumulative_customers
