"""Main entry point for the critic CLI.

Commands:
    critic score: Analyse paths and report the aggregate score
    critic ratings: Show modules grouped by rating

Example:
    $ critic --help
    $ critic score src --minimum-score 80
    $ critic --log-level INFO ratings src --rating F
"""

from __future__ import annotations

import sys
from importlib.metadata import version as get_version

import click

from critic_core.cli.ratings import ratings_command
from critic_core.cli.score import score_command
from critic_core.log_config import LOG_LEVELS, configure_logging


def _get_version() -> str:
    """Get the critic-core package version.

    Returns:
        Version string from package metadata, or 'unknown' if not installed.
    """
    try:
        return get_version("critic-core")
    except Exception:
        return "unknown"


@click.group(
    name="critic",
    help="critic - Aggregate quality scoring for Python source modules.",
    epilog="Use 'critic <command> --help' for command-specific help.",
    context_settings={
        "help_option_names": ["-h", "--help"],
    },
)
@click.version_option(
    version=_get_version(),
    prog_name="critic",
    message="%(prog)s %(version)s",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Minimum level of log messages written to stderr.",
)
@click.option(
    "--log-json/--no-log-json",
    default=False,
    help="Write log messages as JSON lines.",
)
def cli(log_level: str, log_json: bool) -> None:
    """Root command group for the critic CLI."""
    configure_logging(log_level=log_level, json_output=log_json)


cli.add_command(score_command)
cli.add_command(ratings_command)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the critic CLI.

    Args:
        argv: Command-line arguments (uses sys.argv if None).
    """
    try:
        cli(args=argv, standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
