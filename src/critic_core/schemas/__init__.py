"""Pydantic schemas for critic-core.

- Rating: grade tiers A-F
- AnalysedModule, Smell: per-module analysis records
- ScoringConfig: scoring model parameters
- AnalysisSummary, RatingSummary: per-rating totals
- CriticConfig, ReportFormat: CLI run configuration
"""

from __future__ import annotations

from critic_core.schemas.analysed_module import AnalysedModule, Smell
from critic_core.schemas.analysis_summary import AnalysisSummary, RatingSummary
from critic_core.schemas.critic_config import CriticConfig, ReportFormat
from critic_core.schemas.rating import Rating
from critic_core.schemas.scoring_config import ScoringConfig

__all__ = [
    "AnalysedModule",
    "AnalysisSummary",
    "CriticConfig",
    "Rating",
    "RatingSummary",
    "ReportFormat",
    "ScoringConfig",
    "Smell",
]
