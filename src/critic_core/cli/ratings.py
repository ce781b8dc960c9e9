"""critic ratings command.

Without ``--rating`` prints per-rating totals; with it, lists the modules
holding that rating.
"""

from __future__ import annotations

import click

from critic_core.cli._factory import build_collection, load_cli_config
from critic_core.cli.utils import success
from critic_core.reporting import render_modules, render_summary
from critic_core.schemas.rating import Rating


@click.command(name="ratings", help="Show modules grouped by rating.")
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--rating",
    type=click.Choice([rating.value for rating in Rating], case_sensitive=False),
    default=None,
    help="Only list modules with this rating.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(),
    default=None,
    help="Path to configuration file (default: .critic.yml if present).",
)
def ratings_command(
    paths: tuple[str, ...],
    rating: str | None,
    config_path: str | None,
) -> None:
    """List modules for one rating, or totals for every rating."""
    config = load_cli_config(config_path)
    collection = build_collection(paths, config)

    if rating is None:
        success(render_summary(collection))
    else:
        success(render_modules(collection.for_rating(rating.upper())))


__all__ = ["ratings_command"]
