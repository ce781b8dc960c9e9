"""Command-line interface for critic-core.

See critic_core.cli.main for the command tree.
"""

from __future__ import annotations

from critic_core.cli.main import cli, main

__all__ = ["cli", "main"]
