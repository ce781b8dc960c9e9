"""Scoring constants for critic-core.

These values are process-wide and fixed. They are mirrored as the defaults
of ScoringConfig, which is the form injected into a collection.
"""

from __future__ import annotations

# Ceiling applied to each module's cost before averaging, so a single
# pathological module cannot dominate the project score.
COST_LIMIT = 32

# Score goes from 0 (worst) to 100 (perfect).
MAX_SCORE = 100

# Projects with an average cost of 16 or above score 0. 16 is where the
# worst ratings start.
ZERO_SCORE_COST = 16

COST_MULTIPLIER = MAX_SCORE / ZERO_SCORE_COST

# Complexity points that add one unit of cost to a module.
COMPLEXITY_FACTOR = 25.0

# Default cost of a single smell.
SMELL_COST = 1.0

__all__ = [
    "COMPLEXITY_FACTOR",
    "COST_LIMIT",
    "COST_MULTIPLIER",
    "MAX_SCORE",
    "SMELL_COST",
    "ZERO_SCORE_COST",
]
