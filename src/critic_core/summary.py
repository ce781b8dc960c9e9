"""Summary generation for analysed collections."""

from __future__ import annotations

from typing import TYPE_CHECKING

from critic_core.schemas.analysis_summary import AnalysisSummary, RatingSummary
from critic_core.schemas.rating import Rating

if TYPE_CHECKING:
    from critic_core.collection import AnalysedModulesCollection


def generate_summary(modules: AnalysedModulesCollection) -> AnalysisSummary:
    """Count files, churn and smells per rating.

    Every rating appears in the result, with zero totals when no module
    has it.

    Args:
        modules: The collection to summarise. It is only read.

    Returns:
        AnalysisSummary with per-rating totals and the collection score.
    """
    ratings: dict[Rating, RatingSummary] = {}
    for rating in Rating:
        rated = modules.for_rating(rating)
        ratings[rating] = RatingSummary(
            files=len(rated),
            churns=sum(module.churn for module in rated),
            smells=sum(module.smells_count for module in rated),
        )

    return AnalysisSummary(
        ratings=ratings,
        total_files=len(modules),
        score=modules.score(),
    )


__all__ = ["generate_summary"]
