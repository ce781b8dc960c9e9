"""JSON exporter for analysed collections.

The report holds the score, the per-rating summary and every module record
as produced by AnalysedModulesCollection.to_list().

Example:
    >>> from critic_core.reporting.json_exporter import export_json
    >>> export_json(collection, Path("target/critic.json"))
    PosixPath('target/critic.json')
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from critic_core.collection import AnalysedModulesCollection

logger = structlog.get_logger(__name__)


def build_report(collection: AnalysedModulesCollection) -> dict[str, Any]:
    """Assemble the JSON-compatible report document."""
    return {
        "score": collection.score(),
        "summary": collection.summary().model_dump(mode="json"),
        "modules": collection.to_list(),
    }


def render_json(collection: AnalysedModulesCollection) -> str:
    """Render the report as pretty-printed JSON text."""
    return json.dumps(build_report(collection), indent=2, ensure_ascii=False)


def export_json(
    collection: AnalysedModulesCollection,
    output_path: Path,
) -> Path:
    """Write the JSON report to a file.

    Args:
        collection: The analysed collection.
        output_path: Where to write the report. Parent directories are created.

    Returns:
        The output path where the file was written.

    Raises:
        OSError: If the file cannot be written.
    """
    log = logger.bind(component="json_exporter", output_path=str(output_path))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_json(collection), encoding="utf-8")

    log.info("json_export_complete", modules=len(collection))
    return output_path


__all__ = [
    "build_report",
    "export_json",
    "render_json",
]
