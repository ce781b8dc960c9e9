"""Run configuration schema for the critic CLI.

Loaded from ``.critic.yml`` by critic_core.config.load_config(). Command-line
options override the values found here.

Example ``.critic.yml``::

    paths:
      - src
    minimum_score: 75
    format: json
    output: target/critic.json
    scoring:
      cost_limit: 32
      zero_score_cost: 16
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from critic_core.schemas.scoring_config import ScoringConfig


class ReportFormat(str, Enum):
    """Output formats supported by the critic CLI."""

    CONSOLE = "console"
    """Plain-text table on stdout."""

    JSON = "json"
    """JSON document with score, summary and modules."""


class CriticConfig(BaseModel):
    """Top-level critic configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    paths: list[str] = Field(
        default_factory=lambda: ["."],
        description="Files or directories to analyse",
    )

    minimum_score: Annotated[float | None, Field(ge=0, le=100)] = None
    """Fail the run when the score is below this value."""

    format: ReportFormat = Field(
        default=ReportFormat.CONSOLE,
        description="Report format (console or json)",
    )

    output: str | None = Field(
        default=None,
        description="Report file path (stdout when omitted)",
    )

    scoring: ScoringConfig = Field(
        default_factory=ScoringConfig,
        description="Scoring model parameters",
    )


__all__ = [
    "CriticConfig",
    "ReportFormat",
]
