from __future__ import annotations

from typing import NamedTuple, Sequence, Tuple

FIRST_MONTH = 1
FINAL_MONTH = 12


class Milestone(NamedTuple):
    month: int
    target_fraction: float


DEFAULT_MILESTONES: Tuple[Milestone, ...] = (
    Milestone(3, 0.20),
    Milestone(6, 0.40),
    Milestone(9, 0.70),
    Milestone(12, 1.00),
)

LOWER_ANCHOR = Milestone(0, 0.0)
UPPER_ANCHOR = Milestone(FINAL_MONTH, 1.0)


def validate_milestones(milestones: Sequence[Milestone]) -> Tuple[Milestone, ...]:
    validated = tuple(Milestone(int(month), float(fraction)) for month, fraction in milestones)
    previous = LOWER_ANCHOR
    for milestone in validated:
        if not FIRST_MONTH <= milestone.month <= FINAL_MONTH:
            raise ValueError(f"Milestone month {milestone.month} is outside 1..{FINAL_MONTH}")
        if not 0.0 <= milestone.target_fraction <= 1.0:
            raise ValueError(f"Milestone fraction {milestone.target_fraction} is outside [0, 1]")
        if milestone.month <= previous.month:
            raise ValueError("Milestone months must be strictly increasing")
        if milestone.target_fraction < previous.target_fraction:
            raise ValueError("Milestone fractions must be non-decreasing")
        previous = milestone
    return validated


def bounding_milestones(
    month: int, milestones: Sequence[Milestone] = DEFAULT_MILESTONES
) -> Tuple[int, float, int, float]:
    """Return (prev_month, prev_fraction, next_month, next_fraction) around ``month``.

    The lower bound is the latest milestone at or before ``month`` and the upper
    bound the earliest one after it, falling back to (0, 0.0) and (12, 1.0).
    """
    lower = max(
        (milestone for milestone in milestones if milestone.month <= month),
        key=lambda milestone: milestone.month,
        default=LOWER_ANCHOR,
    )
    upper = min(
        (milestone for milestone in milestones if milestone.month > month),
        key=lambda milestone: milestone.month,
        default=UPPER_ANCHOR,
    )
    return lower.month, lower.target_fraction, upper.month, upper.target_fraction
