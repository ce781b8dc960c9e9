"""Unit tests for SourceLocator path discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from critic_core.source_locator import SourceLocator


class TestSourceLocator:
    """Tests for expanding input paths into source files."""

    @pytest.mark.requirement("DISCOVERY-EXPAND")
    def test_directory_expanded_sorted(self, source_tree: Path) -> None:
        """Directories are searched recursively and sorted."""
        locator = SourceLocator([source_tree])

        assert locator.paths == (
            source_tree / "pkg" / "__init__.py",
            source_tree / "pkg" / "complex.py",
            source_tree / "pkg" / "simple.py",
        )

    @pytest.mark.requirement("DISCOVERY-EXPAND")
    def test_hidden_directories_ignored(self, source_tree: Path) -> None:
        """Files below hidden directories are not discovered."""
        locator = SourceLocator([source_tree])
        assert source_tree / ".venv" / "ignored.py" not in locator.paths

    @pytest.mark.requirement("DISCOVERY-EXPAND")
    def test_explicit_hidden_file_kept(self, source_tree: Path) -> None:
        """A hidden file named directly is still analysed."""
        hidden = source_tree / ".venv" / "ignored.py"
        assert SourceLocator([hidden]).paths == (hidden,)

    @pytest.mark.requirement("DISCOVERY-ORDER")
    def test_input_order_preserved(self, source_tree: Path) -> None:
        """Results follow the order of the input paths."""
        simple = source_tree / "pkg" / "simple.py"
        init = source_tree / "pkg" / "__init__.py"

        assert SourceLocator([simple, init]).paths == (simple, init)

    @pytest.mark.requirement("DISCOVERY-DEDUP")
    def test_duplicates_removed(self, source_tree: Path) -> None:
        """A file reached twice is kept at its first position."""
        simple = source_tree / "pkg" / "simple.py"
        locator = SourceLocator([simple, source_tree / "pkg"])

        assert locator.paths[0] == simple
        assert locator.paths.count(simple) == 1
        assert len(locator) == 3

    @pytest.mark.requirement("DISCOVERY-SKIP")
    def test_missing_and_unsupported_skipped(self, source_tree: Path) -> None:
        """Missing paths and non-source files are skipped."""
        locator = SourceLocator([source_tree / "missing.py", source_tree / "README.md"])
        assert locator.paths == ()

    @pytest.mark.requirement("DISCOVERY-SKIP")
    def test_empty_input(self) -> None:
        """No inputs yields no paths."""
        assert SourceLocator([]).paths == ()

    @pytest.mark.requirement("DISCOVERY-EXPAND")
    def test_custom_extensions(self, source_tree: Path) -> None:
        """Extensions select which files are sources."""
        locator = SourceLocator([source_tree], extensions=(".md",))
        assert locator.pathnames == (source_tree / "README.md",)

    @pytest.mark.requirement("DISCOVERY-EXPAND")
    def test_string_paths_accepted(self, source_tree: Path) -> None:
        """String inputs are converted to paths."""
        simple = source_tree / "pkg" / "simple.py"
        assert list(SourceLocator([str(simple)])) == [simple]
