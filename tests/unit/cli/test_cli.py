"""Unit tests for the critic CLI commands.

Tests score and ratings commands including options, config file handling,
report output and exit codes.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from critic_core.cli.main import cli, main
from critic_core.cli.utils import ExitCode


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click test runner."""
    return CliRunner()


class TestCliRoot:
    """Tests for the root command group."""

    @pytest.mark.requirement("CLI-ROOT")
    def test_help_lists_commands(self, cli_runner: CliRunner) -> None:
        """--help shows both commands."""
        result = cli_runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "score" in result.output
        assert "ratings" in result.output

    @pytest.mark.requirement("CLI-ROOT")
    def test_invalid_log_level(self, cli_runner: CliRunner) -> None:
        """Unknown log levels are a usage error."""
        result = cli_runner.invoke(cli, ["--log-level", "LOUD", "score"])

        assert result.exit_code == ExitCode.USAGE_ERROR


class TestScoreCommand:
    """Tests for critic score."""

    @pytest.mark.requirement("CLI-SCORE")
    def test_console_report(self, cli_runner: CliRunner, source_tree: Path) -> None:
        """Console output lists modules and the score."""
        result = cli_runner.invoke(cli, ["score", str(source_tree)])

        assert result.exit_code == 0, result.output
        assert "pkg.simple" in result.output
        assert "pkg.complex" in result.output
        assert "Score: " in result.output
        names = [line.split()[-1] for line in result.output.splitlines()[1:4]]
        assert names == ["pkg", "pkg.complex", "pkg.simple"]

    @pytest.mark.requirement("CLI-SCORE")
    def test_json_report_to_file(
        self, cli_runner: CliRunner, source_tree: Path, tmp_path: Path
    ) -> None:
        """JSON reports are written to --output."""
        output = tmp_path / "out" / "critic.json"

        result = cli_runner.invoke(
            cli,
            ["score", str(source_tree), "--format", "json", "--output", str(output)],
        )

        assert result.exit_code == 0, result.output
        assert f"Report written to {output}" in result.output
        data = json.loads(output.read_text())
        assert len(data["modules"]) == 3
        assert 0.0 <= data["score"] <= 100.0
        assert data["summary"]["total_files"] == 3

    @pytest.mark.requirement("CLI-SCORE")
    def test_console_report_to_file(
        self, cli_runner: CliRunner, source_tree: Path, tmp_path: Path
    ) -> None:
        """Console reports can be written to a file."""
        output = tmp_path / "critic.txt"

        result = cli_runner.invoke(cli, ["score", str(source_tree), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_text().rstrip().splitlines()[-1].startswith("Score: ")

    @pytest.mark.requirement("CLI-SCORE")
    def test_empty_paths_score_zero(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """No source files scores 0.00 and warns."""
        result = cli_runner.invoke(cli, ["score", str(tmp_path)])

        assert result.exit_code == 0
        assert "Score: 0.00" in result.output

    @pytest.mark.requirement("CLI-SCORE")
    def test_minimum_score_met(self, cli_runner: CliRunner, source_tree: Path) -> None:
        """A met minimum exits successfully."""
        result = cli_runner.invoke(cli, ["score", str(source_tree), "--minimum-score", "50"])

        assert result.exit_code == 0, result.output

    @pytest.mark.requirement("CLI-SCORE")
    def test_minimum_score_not_met(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """An unmet minimum exits with SCORE_BELOW_MINIMUM."""
        result = cli_runner.invoke(cli, ["score", str(tmp_path), "--minimum-score", "10"])

        assert result.exit_code == ExitCode.SCORE_BELOW_MINIMUM
        assert "CRITIC-003" in result.output

    @pytest.mark.requirement("CLI-SCORE")
    def test_analysis_error_exit_code(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Unparsable sources exit with ANALYSIS_ERROR."""
        (tmp_path / "broken.py").write_text("def broken(:\n")

        result = cli_runner.invoke(cli, ["score", str(tmp_path)])

        assert result.exit_code == ExitCode.ANALYSIS_ERROR
        assert "CRITIC-001" in result.output

    @pytest.mark.requirement("CLI-CONFIG")
    def test_config_file_values_used(
        self, cli_runner: CliRunner, source_tree: Path, tmp_path: Path
    ) -> None:
        """Paths and minimum score come from --config when not given."""
        config_file = tmp_path / "critic.yml"
        config_file.write_text(f"paths:\n  - {source_tree}\nminimum_score: 100\n")

        result = cli_runner.invoke(cli, ["score", "--config", str(config_file)])

        assert "pkg.simple" in result.output
        assert result.exit_code == ExitCode.SCORE_BELOW_MINIMUM

    @pytest.mark.requirement("CLI-CONFIG")
    def test_cli_option_overrides_config(
        self, cli_runner: CliRunner, source_tree: Path, tmp_path: Path
    ) -> None:
        """--minimum-score overrides the configured minimum."""
        config_file = tmp_path / "critic.yml"
        config_file.write_text("minimum_score: 100\n")

        result = cli_runner.invoke(
            cli,
            ["score", str(source_tree), "--config", str(config_file), "--minimum-score", "0"],
        )

        assert result.exit_code == 0, result.output

    @pytest.mark.requirement("CLI-CONFIG")
    def test_invalid_config_exit_code(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Invalid configuration exits with CONFIGURATION_ERROR."""
        config_file = tmp_path / "critic.yml"
        config_file.write_text("format: xml\n")

        result = cli_runner.invoke(cli, ["score", "--config", str(config_file)])

        assert result.exit_code == ExitCode.CONFIGURATION_ERROR
        assert "CRITIC-002" in result.output


class TestRatingsCommand:
    """Tests for critic ratings."""

    @pytest.mark.requirement("CLI-RATINGS")
    def test_summary_table(self, cli_runner: CliRunner, source_tree: Path) -> None:
        """Without --rating every grade is listed with counts."""
        result = cli_runner.invoke(cli, ["ratings", str(source_tree)])

        assert result.exit_code == 0, result.output
        rows = {
            line.split()[0]: line.split()[1]
            for line in result.output.splitlines()
            if line[:1] in {"A", "B", "C", "D", "E", "F"}
        }
        assert rows == {"A": "2", "B": "1", "C": "0", "D": "0", "E": "0", "F": "0"}

    @pytest.mark.requirement("CLI-RATINGS")
    def test_filter_by_rating(self, cli_runner: CliRunner, source_tree: Path) -> None:
        """--rating lists only matching modules, case-insensitively."""
        result = cli_runner.invoke(cli, ["ratings", str(source_tree), "--rating", "b"])

        assert result.exit_code == 0, result.output
        assert "pkg.complex" in result.output
        assert "pkg.simple" not in result.output


class TestMain:
    """Tests for the main() entry point."""

    @pytest.mark.requirement("CLI-ROOT")
    def test_main_usage_error_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Click usage errors exit with their own code."""
        with pytest.raises(SystemExit) as exc_info:
            main(["score", "--format", "xml"])

        assert exc_info.value.code == ExitCode.USAGE_ERROR
        assert "xml" in capsys.readouterr().err

    @pytest.mark.requirement("CLI-ROOT")
    def test_main_success(self, source_tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A successful run returns without exiting."""
        main(["score", str(source_tree)])

        assert "Score: " in capsys.readouterr().out
