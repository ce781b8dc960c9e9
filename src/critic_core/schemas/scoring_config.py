"""Scoring configuration schema.

ScoringConfig is the immutable form of the scoring constants. A collection
receives one at construction; omitting it selects the defaults from
critic_core.constants.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from critic_core.constants import COST_LIMIT, MAX_SCORE, ZERO_SCORE_COST


class ScoringConfig(BaseModel):
    """Parameters of the clamped-average scoring model.

    Example:
        >>> config = ScoringConfig()
        >>> config.cost_multiplier
        6.25
        >>> # Average cost 8 scores 100 - 8 * 6.25 = 50
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cost_limit: Annotated[float, Field(gt=0)] = COST_LIMIT
    """Per-module cost ceiling applied before averaging."""

    max_score: Annotated[float, Field(gt=0)] = MAX_SCORE
    """Score of a project with zero average cost."""

    zero_score_cost: Annotated[float, Field(gt=0)] = ZERO_SCORE_COST
    """Average cost at or above which the score is 0."""

    @property
    def cost_multiplier(self) -> float:
        """Slope converting clamped average cost to score."""
        return self.max_score / self.zero_score_cost


__all__ = ["ScoringConfig"]
