"""Plain-text rendering of analysed collections."""

from __future__ import annotations

from typing import TYPE_CHECKING

from critic_core.schemas.rating import Rating

if TYPE_CHECKING:
    from collections.abc import Iterable

    from critic_core.collection import AnalysedModulesCollection
    from critic_core.schemas.analysed_module import AnalysedModule


def render_modules(modules: Iterable[AnalysedModule]) -> str:
    """Render one line per module: rating, cost, smells and name."""
    lines = [f"{'Rating':<7}{'Cost':>9}{'Smells':>8}  Module"]
    for module in modules:
        lines.append(
            f"{module.rating.value:<7}{module.cost:>9.2f}{module.smells_count:>8}  {module.name}"
        )
    return "\n".join(lines)


def render_summary(collection: AnalysedModulesCollection) -> str:
    """Render the per-rating totals table."""
    summary = collection.summary()
    lines = [f"{'Rating':<7}{'Files':>7}{'Churns':>8}{'Smells':>8}"]
    for rating in Rating:
        totals = summary.for_rating(rating)
        lines.append(f"{rating.value:<7}{totals.files:>7}{totals.churns:>8}{totals.smells:>8}")
    return "\n".join(lines)


def render_console(collection: AnalysedModulesCollection) -> str:
    """Render the module table followed by the score line.

    Example output::

        Rating      Cost  Smells  Module
        A           0.08       0  pkg.core
        F          40.00       3  pkg.legacy

        Score: 37.50
    """
    return f"{render_modules(collection)}\n\nScore: {collection.score():.2f}"


__all__ = [
    "render_console",
    "render_modules",
    "render_summary",
]
