"""critic score command.

Analyses the given paths, writes a console or JSON report, and exits with
SCORE_BELOW_MINIMUM when a minimum score is configured and not met.
"""

from __future__ import annotations

from pathlib import Path

import click

from critic_core.cli._factory import build_collection, load_cli_config
from critic_core.cli.utils import ExitCode, error_exit, success
from critic_core.critic_errors import ScoreBelowMinimumError
from critic_core.reporting import export_json, render_console, render_json
from critic_core.schemas.critic_config import ReportFormat
from critic_core.scoring import enforce_minimum_score


@click.command(name="score", help="Analyse source files and report the project score.")
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--config",
    "config_path",
    type=click.Path(),
    default=None,
    help="Path to configuration file (default: .critic.yml if present).",
)
@click.option(
    "--minimum-score",
    type=click.FloatRange(0, 100),
    default=None,
    help="Exit with a non-zero code when the score is below this value.",
)
@click.option(
    "--format",
    "report_format",
    type=click.Choice([fmt.value for fmt in ReportFormat]),
    default=None,
    help="Report format (console or json).",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(),
    default=None,
    help="Write the report to this file instead of stdout.",
)
def score_command(
    paths: tuple[str, ...],
    config_path: str | None,
    minimum_score: float | None,
    report_format: str | None,
    output_path: str | None,
) -> None:
    """Report the aggregate score of the analysed modules."""
    config = load_cli_config(config_path)
    collection = build_collection(paths, config)

    resolved_format = ReportFormat(report_format) if report_format else config.format
    resolved_output = output_path or config.output
    resolved_minimum = minimum_score if minimum_score is not None else config.minimum_score

    if resolved_format is ReportFormat.JSON:
        if resolved_output:
            written_path = export_json(collection, Path(resolved_output))
            success(f"Report written to {written_path}")
        else:
            success(render_json(collection))
    else:
        report = render_console(collection)
        if resolved_output:
            output = Path(resolved_output)
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(report + "\n", encoding="utf-8")
            success(f"Report written to {output}")
        else:
            success(report)

    try:
        enforce_minimum_score(collection.score(), resolved_minimum)
    except ScoreBelowMinimumError as e:
        error_exit(str(e), exit_code=ExitCode.SCORE_BELOW_MINIMUM)


__all__ = ["score_command"]
