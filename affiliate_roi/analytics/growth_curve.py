from __future__ import annotations

from typing import List, Sequence

from affiliate_roi.analytics.milestones import (
    DEFAULT_MILESTONES,
    FINAL_MONTH,
    FIRST_MONTH,
    Milestone,
    bounding_milestones,
)
from affiliate_roi.schemas.projection import GrowthCurvePoint
from affiliate_roi.shared.rounding import round_to_int


def smoothstep(progress: float) -> float:
    return progress * progress * (3 - 2 * progress)


def target_fraction(month: int, milestones: Sequence[Milestone] = DEFAULT_MILESTONES) -> float:
    if not FIRST_MONTH <= month <= FINAL_MONTH:
        raise ValueError(f"Month {month} is outside {FIRST_MONTH}..{FINAL_MONTH}")
    prev_month, prev_fraction, next_month, next_fraction = bounding_milestones(month, milestones)
    # Past the last milestone both bounds collapse onto month 12.
    if next_month == prev_month:
        return prev_fraction
    progress = (month - prev_month) / (next_month - prev_month)
    return prev_fraction + (next_fraction - prev_fraction) * smoothstep(progress)


def growth_curve(milestones: Sequence[Milestone] = DEFAULT_MILESTONES) -> List[GrowthCurvePoint]:
    points: List[GrowthCurvePoint] = []
    for month in range(FIRST_MONTH, FINAL_MONTH + 1):
        fraction = target_fraction(month, milestones)
        points.append(
            GrowthCurvePoint(
                month=month,
                target_fraction=fraction,
                target_percentage=round_to_int(fraction * 100),
            )
        )
    return points
