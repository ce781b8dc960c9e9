"""Exception hierarchy for critic-core.

All exceptions inherit from CriticError, so callers can catch every
critic failure with a single except clause.

Exception Hierarchy:
    CriticError (base)
    ├── ModuleAnalysisError       # CRITIC-001: File unreadable or unparsable
    ├── ConfigurationError        # CRITIC-002: Invalid .critic.yml
    └── ScoreBelowMinimumError    # CRITIC-003: Score under configured minimum

The scoring core itself raises none of these. Scoring and rating filters are
total over any collection; failures belong to analysis and configuration.
"""

from __future__ import annotations


class CriticError(Exception):
    """Base exception for all critic errors.

    Attributes:
        error_code: The CRITIC-* error code.
        resolution: Suggested resolution for the error.
    """

    error_code: str = "CRITIC-000"
    resolution: str = "Check critic configuration"


class ModuleAnalysisError(CriticError):
    """CRITIC-001: A source module could not be analysed.

    Raised by analysers before a record enters a collection, so a
    collection never holds a partially analysed module.

    Attributes:
        path: The module path that failed.
        reason: Why analysis failed.
    """

    error_code: str = "CRITIC-001"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        self.resolution = "Fix the syntax or encoding of the file, or exclude it from the paths"
        message = (
            f"[{self.error_code}] Could not analyse '{path}': {reason}. "
            f"Resolution: {self.resolution}"
        )
        super().__init__(message)


class ConfigurationError(CriticError):
    """CRITIC-002: The configuration file is invalid.

    Attributes:
        config_path: Path of the offending configuration file.
        reason: Description of the problem.
    """

    error_code: str = "CRITIC-002"

    def __init__(self, config_path: str, reason: str) -> None:
        self.config_path = config_path
        self.reason = reason
        self.resolution = f"Correct {config_path}; see the CriticConfig fields"
        message = (
            f"[{self.error_code}] Invalid configuration '{config_path}': {reason}. "
            f"Resolution: {self.resolution}"
        )
        super().__init__(message)


class ScoreBelowMinimumError(CriticError):
    """CRITIC-003: The aggregate score is below the required minimum.

    Attributes:
        score: The achieved score.
        minimum_score: The configured minimum.
    """

    error_code: str = "CRITIC-003"

    def __init__(self, score: float, minimum_score: float) -> None:
        self.score = score
        self.minimum_score = minimum_score
        self.resolution = "Reduce complexity and smells in the lowest-rated modules"
        message = (
            f"[{self.error_code}] Score {score:.2f} is below minimum {minimum_score:.2f}. "
            f"Resolution: {self.resolution}"
        )
        super().__init__(message)


__all__ = [
    "ConfigurationError",
    "CriticError",
    "ModuleAnalysisError",
    "ScoreBelowMinimumError",
]
