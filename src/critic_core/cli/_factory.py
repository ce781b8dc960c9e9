"""Shared construction helpers for critic commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from critic_core.cli.utils import ExitCode, error_exit, warn
from critic_core.collection import AnalysedModulesCollection
from critic_core.config import load_config
from critic_core.critic_errors import ConfigurationError, ModuleAnalysisError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from critic_core.schemas.critic_config import CriticConfig


def load_cli_config(config_path: str | None) -> CriticConfig:
    """Load configuration, exiting with CONFIGURATION_ERROR on failure."""
    try:
        return load_config(Path(config_path) if config_path else None)
    except ConfigurationError as e:
        error_exit(str(e), exit_code=ExitCode.CONFIGURATION_ERROR)


def build_collection(
    paths: Sequence[str],
    config: CriticConfig,
) -> AnalysedModulesCollection:
    """Analyse ``paths`` (or the configured paths when empty).

    Exits with ANALYSIS_ERROR when a module cannot be analysed.
    """
    source_paths = list(paths) or list(config.paths)
    try:
        collection = AnalysedModulesCollection.from_paths(source_paths, config=config.scoring)
    except ModuleAnalysisError as e:
        error_exit(str(e), exit_code=ExitCode.ANALYSIS_ERROR, path=e.path)

    if not len(collection):
        warn("No source modules found", paths=", ".join(source_paths))
    return collection


__all__ = [
    "build_collection",
    "load_cli_config",
]
