"""Completion ratio and progress summary helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from .models import DonationConfig, Team


@dataclass(frozen=True)
class ProgressSummary:
    total_raised: float
    goal: float
    completion: float
    percent_display: str
    team_count: int


def compute_completion(goal: float, team_amounts: Iterable[float]) -> float:
    """Return ``sum(team_amounts) / goal`` capped at 1.0, or 0.0 without a goal.

    Amounts are summed as given and negative values are not filtered. A NaN
    ratio loses against the cap, so it reads as a full gauge.
    """
    raised = sum(team_amounts, 0.0)
    if goal > 0:
        ratio = raised / goal
        return 1.0 if math.isnan(ratio) else min(ratio, 1.0)
    return 0.0


def total_raised(teams: Iterable[Team]) -> float:
    return sum((t.total_raised for t in teams), 0.0)


def percent_display(raised: float, goal: float) -> str:
    """Completion percentage rounded half-up to two decimals, e.g. ``"75.01"``.

    Works on the decimal form of the inputs so 7500.5 of 10000 shows as 75.01
    regardless of binary float error.
    """
    completion = compute_completion(goal, (raised,))
    if not goal > 0 or not math.isfinite(raised) or not math.isfinite(goal):
        return f"{completion * 100.0:.2f}"
    exact = min(Decimal(repr(raised)) / Decimal(repr(goal)) * 100, Decimal(100))
    return str(exact.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def summarize(config: DonationConfig) -> ProgressSummary:
    raised = total_raised(config.teams)
    return ProgressSummary(
        total_raised=raised,
        goal=config.goal,
        completion=compute_completion(config.goal, (t.total_raised for t in config.teams)),
        percent_display=percent_display(raised, config.goal),
        team_count=len(config.teams),
    )
