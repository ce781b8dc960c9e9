"""Source discovery for critic.

SourceLocator expands the input paths into an ordered, de-duplicated
sequence of source files:

- Directories are searched recursively; matches are returned sorted.
  Entries below hidden directories (``.git``, ``.venv``) are ignored.
- Files are kept when their suffix matches.
- Missing paths and non-matching files are skipped with a warning.

Example:
    >>> locator = SourceLocator(["src", "scripts/tool.py"])
    >>> locator.paths
    (PosixPath('src/pkg/__init__.py'), PosixPath('src/pkg/core.py'), ...)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".py",)


class SourceLocator:
    """Locate source files below a set of input paths.

    Attributes:
        paths: Ordered tuple of discovered source files.
    """

    def __init__(
        self,
        paths: Iterable[str | Path],
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        self._initial_paths = [Path(path) for path in paths]
        self._extensions = tuple(extensions)
        self._log = logger.bind(component="SourceLocator", extensions=list(self._extensions))
        self._paths = self._locate()

    @property
    def paths(self) -> tuple[Path, ...]:
        """Discovered source files, in discovery order."""
        return self._paths

    @property
    def pathnames(self) -> tuple[Path, ...]:
        """Alias of ``paths``."""
        return self._paths

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def _locate(self) -> tuple[Path, ...]:
        # dict preserves first-seen order
        located: dict[Path, None] = {}
        for initial_path in self._initial_paths:
            for path in self._expand(initial_path):
                located.setdefault(path, None)

        self._log.debug(
            "sources_located",
            inputs=len(self._initial_paths),
            sources=len(located),
        )
        return tuple(located)

    def _expand(self, path: Path) -> list[Path]:
        if path.is_dir():
            return sorted(
                candidate
                for candidate in path.rglob("*")
                if candidate.is_file()
                and self._matches(candidate)
                and not _is_hidden(candidate.relative_to(path))
            )
        if path.is_file():
            if self._matches(path):
                return [path]
            self._log.warning("source_skipped", path=str(path), reason="unsupported_extension")
            return []
        self._log.warning("source_skipped", path=str(path), reason="not_found")
        return []

    def _matches(self, path: Path) -> bool:
        return path.suffix in self._extensions


def _is_hidden(relative_path: Path) -> bool:
    return any(part.startswith(".") for part in relative_path.parts)


__all__ = [
    "DEFAULT_EXTENSIONS",
    "SourceLocator",
]
