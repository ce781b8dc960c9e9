"""Collection of analysed modules and the aggregate score.

AnalysedModulesCollection holds the ordered, immutable set of modules
analysed in one run. It exposes:

- iteration in discovery order (restartable)
- JSON-ready enumeration of every record
- score(): clamped-average project score in [0, 100]
- for_rating(): modules whose rating text matches a target
- summary(): per-rating totals from critic_core.summary

Example:
    >>> collection = AnalysedModulesCollection.from_paths(["src"])
    >>> collection.score()
    87.5
    >>> [module.name for module in collection.for_rating("F")]
    ['src.legacy.parser']
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from critic_core.analysers import AstModuleAnalyser
from critic_core.schemas.scoring_config import ScoringConfig
from critic_core.scoring import calculate_score
from critic_core.source_locator import SourceLocator
from critic_core.summary import generate_summary

if TYPE_CHECKING:
    from critic_core.analysers import ModuleAnalyser
    from critic_core.schemas.analysed_module import AnalysedModule
    from critic_core.schemas.analysis_summary import AnalysisSummary
    from critic_core.schemas.rating import Rating

logger = structlog.get_logger(__name__)


class AnalysedModulesCollection:
    """Ordered, immutable collection of analysed modules."""

    def __init__(
        self,
        modules: Iterable[AnalysedModule] = (),
        config: ScoringConfig | None = None,
    ) -> None:
        """Build a collection from already-analysed modules.

        Args:
            modules: Analysed modules, in the order they should be iterated.
            config: Scoring parameters (defaults to ScoringConfig()).
        """
        self._modules: tuple[AnalysedModule, ...] = tuple(modules)
        self._config = config or ScoringConfig()

    @classmethod
    def from_paths(
        cls,
        paths: Iterable[str | Path],
        analyser: ModuleAnalyser | None = None,
        config: ScoringConfig | None = None,
    ) -> AnalysedModulesCollection:
        """Discover and analyse every source file below ``paths``.

        One module is built per discovered path, in discovery order. An empty
        input produces an empty collection.

        Args:
            paths: Files or directories to analyse.
            analyser: Analyser to use (defaults to AstModuleAnalyser()).
            config: Scoring parameters.

        Returns:
            Fully populated collection.

        Raises:
            ModuleAnalysisError: If any discovered module cannot be analysed.
        """
        analyser = analyser or AstModuleAnalyser()
        locator = SourceLocator(paths)
        collection = cls((analyser.analyse(path) for path in locator.paths), config=config)

        logger.info("collection_built", modules=len(collection), score=collection.score())
        return collection

    @property
    def config(self) -> ScoringConfig:
        """Scoring parameters used by score()."""
        return self._config

    @property
    def modules(self) -> tuple[AnalysedModule, ...]:
        """The analysed modules, in discovery order."""
        return self._modules

    def __iter__(self) -> Iterator[AnalysedModule]:
        return iter(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(modules={len(self._modules)})"

    def to_list(self) -> list[dict[str, Any]]:
        """Every module as a JSON-compatible dict, fields unchanged."""
        return [module.model_dump(mode="json") for module in self._modules]

    def to_json(self, **kwargs: Any) -> str:
        """Serialise every module as a JSON array.

        Args:
            **kwargs: Passed through to json.dumps (indent, sort_keys, ...).
        """
        return json.dumps(self.to_list(), **kwargs)

    def score(self) -> float:
        """Aggregate quality score in [0, 100], higher is better.

        An empty collection scores exactly 0.0.
        """
        return calculate_score([module.cost for module in self._modules], self._config)

    def for_rating(self, rating: Rating | str) -> list[AnalysedModule]:
        """Modules whose rating renders as the same text as ``rating``.

        Args:
            rating: A Rating or its text form, e.g. ``Rating.A`` or ``"A"``.

        Returns:
            Matching modules in collection order; empty when none match.
        """
        target = str(rating)
        return [module for module in self._modules if str(module.rating) == target]

    def summary(self) -> AnalysisSummary:
        """Per-rating totals for this collection."""
        return generate_summary(self)


__all__ = ["AnalysedModulesCollection"]
