"""Unit tests for the critic exception hierarchy."""

from __future__ import annotations

import pytest

from critic_core.critic_errors import (
    ConfigurationError,
    CriticError,
    ModuleAnalysisError,
    ScoreBelowMinimumError,
)


class TestCriticErrors:
    """Tests for error codes, attributes and messages."""

    @pytest.mark.requirement("ERRORS-HIERARCHY")
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ModuleAnalysisError("a.py", "bad"), "CRITIC-001"),
            (ConfigurationError(".critic.yml", "bad"), "CRITIC-002"),
            (ScoreBelowMinimumError(10.0, 20.0), "CRITIC-003"),
        ],
    )
    def test_codes_and_base(self, error: CriticError, code: str) -> None:
        """Every error is a CriticError carrying its code in the message."""
        assert isinstance(error, CriticError)
        assert error.error_code == code
        assert str(error).startswith(f"[{code}]")
        assert "Resolution:" in str(error)

    @pytest.mark.requirement("ERRORS-HIERARCHY")
    def test_module_analysis_attributes(self) -> None:
        """ModuleAnalysisError keeps path and reason."""
        error = ModuleAnalysisError("pkg/a.py", "syntax error at line 3")
        assert error.path == "pkg/a.py"
        assert error.reason == "syntax error at line 3"
        assert "'pkg/a.py'" in str(error)

    @pytest.mark.requirement("ERRORS-HIERARCHY")
    def test_score_message_formatting(self) -> None:
        """Scores are shown with two decimals."""
        error = ScoreBelowMinimumError(score=12.5, minimum_score=80)
        assert "Score 12.50 is below minimum 80.00" in str(error)

    @pytest.mark.requirement("ERRORS-HIERARCHY")
    def test_base_defaults(self) -> None:
        """The base class has a generic code and resolution."""
        assert CriticError.error_code == "CRITIC-000"
        assert CriticError.resolution
