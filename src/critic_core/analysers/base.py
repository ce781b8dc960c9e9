"""Analyser interface.

An analyser turns one discovered path into an AnalysedModule. The scoring
core only depends on this protocol, so alternative analysers can be injected
into AnalysedModulesCollection.from_paths().
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from critic_core.schemas.analysed_module import AnalysedModule


@runtime_checkable
class ModuleAnalyser(Protocol):
    """Builds an AnalysedModule for a single source path."""

    def analyse(self, path: Path) -> AnalysedModule:
        """Analyse one module.

        Raises:
            ModuleAnalysisError: If the module cannot be read or parsed.
        """
        ...


def _package_root(path: Path) -> Path:
    root = path.parent
    while (root / "__init__.py").is_file() and root.parent != root:
        root = root.parent
    return root


def module_name_for(path: Path) -> str:
    """Derive a dotted module name from a file path.

    Relative paths are named from their parts. Absolute paths are named from
    the top of their enclosing package, so ``/work/project/pkg/core.py`` with
    ``pkg/__init__.py`` present becomes ``pkg.core``.

    Example:
        >>> module_name_for(Path("src/pkg/core.py"))
        'src.pkg.core'
        >>> module_name_for(Path("pkg/__init__.py"))
        'pkg'
    """
    if path.is_absolute():
        path = path.relative_to(_package_root(path))
    parts = [part for part in path.with_suffix("").parts if part not in (path.anchor, "..")]
    if len(parts) > 1 and parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts) or path.stem


__all__ = [
    "ModuleAnalyser",
    "module_name_for",
]
