"""Report renderers for analysed collections.

Renderers consume only the public surface of AnalysedModulesCollection:
iteration, to_list(), score(), for_rating() and summary().
"""

from __future__ import annotations

from critic_core.reporting.console import render_console, render_modules, render_summary
from critic_core.reporting.json_exporter import build_report, export_json, render_json

__all__ = [
    "build_report",
    "export_json",
    "render_console",
    "render_json",
    "render_modules",
    "render_summary",
]
