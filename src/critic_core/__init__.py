"""critic-core: Aggregate quality scoring for analysed source modules.

This package provides:
- AnalysedModulesCollection: ordered modules with score(), for_rating(), summary()
- AnalysedModule, Smell, Rating: per-module analysis records
- ScoringConfig: clamped-average scoring parameters
- SourceLocator: discovery of source files below input paths
- AstModuleAnalyser: default analyser built on the ``ast`` module
- Errors: CriticError hierarchy with CRITIC-* codes

Example:
    >>> from critic_core import AnalysedModulesCollection
    >>> collection = AnalysedModulesCollection.from_paths(["src"])
    >>> collection.score()
    91.25
    >>> collection.summary().for_rating("A").files
    14
"""

from __future__ import annotations

__version__ = "0.1.0"

from critic_core.analysers import AstModuleAnalyser, ModuleAnalyser
from critic_core.collection import AnalysedModulesCollection
from critic_core.constants import (
    COST_LIMIT,
    COST_MULTIPLIER,
    MAX_SCORE,
    ZERO_SCORE_COST,
)
from critic_core.critic_errors import (
    ConfigurationError,
    CriticError,
    ModuleAnalysisError,
    ScoreBelowMinimumError,
)
from critic_core.schemas import (
    AnalysedModule,
    AnalysisSummary,
    Rating,
    RatingSummary,
    ScoringConfig,
    Smell,
)
from critic_core.source_locator import SourceLocator
from critic_core.summary import generate_summary

__all__ = [
    "COST_LIMIT",
    "COST_MULTIPLIER",
    "MAX_SCORE",
    "ZERO_SCORE_COST",
    "AnalysedModule",
    "AnalysedModulesCollection",
    "AnalysisSummary",
    "AstModuleAnalyser",
    "ConfigurationError",
    "CriticError",
    "ModuleAnalysisError",
    "ModuleAnalyser",
    "Rating",
    "RatingSummary",
    "ScoreBelowMinimumError",
    "ScoringConfig",
    "Smell",
    "SourceLocator",
    "__version__",
    "generate_summary",
]
