"""Analysis summary schemas.

The summary groups a collection by rating, counting files, churn and smells
per grade. It is produced by critic_core.summary.generate_summary().
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from critic_core.schemas.rating import Rating


class RatingSummary(BaseModel):
    """Totals for the modules sharing one rating."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    files: Annotated[int, Field(ge=0)] = 0
    """Number of modules with this rating."""

    churns: Annotated[int, Field(ge=0)] = 0
    """Summed churn of those modules."""

    smells: Annotated[int, Field(ge=0)] = 0
    """Summed smell count of those modules."""


class AnalysisSummary(BaseModel):
    """Report-ready summary of an analysed collection.

    Every rating is present in ``ratings``, including grades no module has.

    Example:
        >>> summary = AnalysisSummary(
        ...     ratings={Rating.A: RatingSummary(files=3, smells=1)},
        ...     total_files=3,
        ...     score=98.5,
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ratings: dict[Rating, RatingSummary] = Field(
        ...,
        description="Per-rating totals",
    )

    total_files: Annotated[int, Field(ge=0)] = 0
    """Number of modules in the collection."""

    score: float = Field(..., description="Aggregate score of the collection")

    def for_rating(self, rating: Rating | str) -> RatingSummary:
        """Return the totals for a rating, matched by its text form."""
        for candidate, totals in self.ratings.items():
            if str(candidate) == str(rating):
                return totals
        return RatingSummary()


__all__ = [
    "AnalysisSummary",
    "RatingSummary",
]
