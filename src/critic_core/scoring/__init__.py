"""Scoring module for calculating the aggregate project score.

The model limits each module cost, averages the limited costs, clamps the
average, and maps it linearly onto 0-100. See score_calculator for details.
"""

from __future__ import annotations

from critic_core.scoring.score_calculator import (
    average_cost,
    average_limited_cost,
    calculate_score,
    check_score_thresholds,
    enforce_minimum_score,
    limited_cost,
)

__all__ = [
    "average_cost",
    "average_limited_cost",
    "calculate_score",
    "check_score_thresholds",
    "enforce_minimum_score",
    "limited_cost",
]
