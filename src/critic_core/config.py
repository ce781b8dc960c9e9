"""Loading of ``.critic.yml`` run configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from critic_core.critic_errors import ConfigurationError
from critic_core.schemas.critic_config import CriticConfig

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_FILE = ".critic.yml"


def load_config(path: Path | None = None) -> CriticConfig:
    """Load critic configuration from a YAML file.

    When ``path`` is None the implicit ``.critic.yml`` in the working
    directory is used if present; otherwise defaults are returned. An
    explicitly given path must exist.

    Args:
        path: Configuration file to read, or None for the implicit file.

    Returns:
        Validated CriticConfig.

    Raises:
        ConfigurationError: If the file is missing (explicit path only), is
            not valid YAML, or does not match the CriticConfig schema.
    """
    config_path = path if path is not None else Path(DEFAULT_CONFIG_FILE)
    log = logger.bind(component="config_loader", config_path=str(config_path))

    if not config_path.is_file():
        if path is not None:
            raise ConfigurationError(str(config_path), "file not found")
        log.debug("config_defaults_used")
        return CriticConfig()

    try:
        raw: Any = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(str(config_path), f"invalid YAML: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(str(config_path), "top level must be a mapping")

    try:
        config = CriticConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(str(config_path), str(e)) from e

    log.debug("config_loaded", paths=config.paths, minimum_score=config.minimum_score)
    return config


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "load_config",
]
