"""Rating grades assigned to analysed modules.

Ratings are compared by their canonical text form, so ``Rating.A`` and the
plain string ``"A"`` select the same modules in
AnalysedModulesCollection.for_rating().
"""

from __future__ import annotations

from enum import Enum


class Rating(str, Enum):
    """Ordered grade tiers, best (A) to worst (F).

    Attributes:
        A: Cost up to 2.
        B: Cost up to 4.
        C: Cost up to 8.
        D: Cost up to 16.
        E: Cost up to 32.
        F: Cost above 32.
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_cost(cls, cost: float) -> Rating:
        """Map a module cost to its rating.

        Args:
            cost: Module cost as computed by AnalysedModule.

        Returns:
            The rating whose upper bound is the first one >= cost.

        Example:
            >>> Rating.from_cost(3.5)
            <Rating.B: 'B'>
        """
        for upper_bound, rating in _COST_BOUNDS:
            if cost <= upper_bound:
                return rating
        return cls.F


_COST_BOUNDS: tuple[tuple[float, Rating], ...] = (
    (2, Rating.A),
    (4, Rating.B),
    (8, Rating.C),
    (16, Rating.D),
    (32, Rating.E),
)


__all__ = ["Rating"]
