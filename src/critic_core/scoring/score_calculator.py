"""Score calculator implementing the clamped-average scoring model.

The model applies two independent clamps, in order:

1. Each module cost is limited to ``cost_limit`` (32) before averaging.
2. The average of the limited costs is limited to ``zero_score_cost`` (16).

The clamped average is then mapped linearly onto [0, max_score]:

    score = max_score - clamped_average * (max_score / zero_score_cost)

An empty input scores exactly 0.0. The general formula would give
``max_score`` there; the empty case is handled before it is applied.

Negative costs are not validated. Whatever the arithmetic produces for them
is returned unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

from critic_core.critic_errors import ScoreBelowMinimumError
from critic_core.schemas.scoring_config import ScoringConfig


def limited_cost(cost: float, cost_limit: float) -> float:
    """Apply the per-module ceiling to a single cost."""
    return min(cost, cost_limit)


def average_cost(costs: Sequence[float], config: ScoringConfig) -> float:
    """Mean of the per-module limited costs.

    Args:
        costs: Raw module costs.
        config: Scoring parameters.

    Returns:
        The arithmetic mean of the limited costs, or 0.0 for no costs.
    """
    if not costs:
        return 0.0
    total = sum(limited_cost(cost, config.cost_limit) for cost in costs)
    return total / float(len(costs))


def average_limited_cost(costs: Sequence[float], config: ScoringConfig) -> float:
    """Average limited cost, clamped at ``zero_score_cost``."""
    return min(average_cost(costs, config), config.zero_score_cost)


def calculate_score(
    costs: Sequence[float],
    config: ScoringConfig | None = None,
) -> float:
    """Calculate the aggregate score for a set of module costs.

    Args:
        costs: Raw module costs, one per module. Order does not matter.
        config: Scoring parameters (defaults to ScoringConfig()).

    Returns:
        Score between 0 and ``max_score`` for non-negative costs, higher is
        better. Exactly 0.0 when ``costs`` is empty.

    Example:
        >>> calculate_score([0, 8, 16, 40])
        12.5
        >>> calculate_score([])
        0.0
    """
    if not costs:
        return 0.0

    config = config or ScoringConfig()
    clamped_average = average_limited_cost(costs, config)
    return float(config.max_score - clamped_average * config.cost_multiplier)


def check_score_thresholds(
    score: float,
    minimum_score: float | None,
) -> dict[str, bool]:
    """Check a score against the configured minimum.

    Args:
        score: The aggregate score.
        minimum_score: Required minimum, or None when no gate applies.

    Returns:
        Dict with a 'below_minimum' flag.
    """
    return {
        "below_minimum": minimum_score is not None and score < minimum_score,
    }


def enforce_minimum_score(score: float, minimum_score: float | None) -> None:
    """Raise when a score does not meet the configured minimum.

    Raises:
        ScoreBelowMinimumError: If ``score < minimum_score``.
    """
    if minimum_score is not None and check_score_thresholds(score, minimum_score)["below_minimum"]:
        raise ScoreBelowMinimumError(score=score, minimum_score=minimum_score)


__all__ = [
    "average_cost",
    "average_limited_cost",
    "calculate_score",
    "check_score_thresholds",
    "enforce_minimum_score",
    "limited_cost",
]
