"""Shared pytest fixtures for critic-core tests.

NOTE: Do NOT add __init__.py to test directories - pytest uses importlib mode
which can cause namespace collisions with __init__.py files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import structlog

if TYPE_CHECKING:
    from collections.abc import Callable, Generator
    from pathlib import Path

    from critic_core.schemas.analysed_module import AnalysedModule


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "requirement(id): Mark test as covering a specific requirement",
    )


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore default structlog configuration after each test.

    CLI tests configure structlog against CliRunner's stderr; resetting
    keeps later tests from writing to a stale stream.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_module() -> Callable[..., AnalysedModule]:
    """Factory fixture for AnalysedModule records.

    Usage:
        def test_something(make_module: Callable[..., AnalysedModule]) -> None:
            module = make_module(cost=8.0)
    """
    from critic_core.schemas.analysed_module import AnalysedModule

    counter = {"n": 0}

    def _make(**overrides: Any) -> AnalysedModule:
        counter["n"] += 1
        fields: dict[str, Any] = {
            "name": f"pkg.module_{counter['n']}",
            "path": f"pkg/module_{counter['n']}.py",
        }
        fields.update(overrides)
        return AnalysedModule(**fields)

    return _make


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small Python project on disk.

    Layout:
        project/pkg/__init__.py   (empty)
        project/pkg/simple.py     (one function, one branch)
        project/pkg/complex.py    (one function with 12 branches, 6 params)
        project/.venv/ignored.py  (hidden, never discovered)
        project/README.md         (not a source file)
    """
    project = tmp_path / "project"
    pkg = project / "pkg"
    pkg.mkdir(parents=True)
    (pkg / "__init__.py").write_text("")
    (pkg / "simple.py").write_text(
        "def check(value):\n"
        "    if value:\n"
        "        return 1\n"
        "    return 2\n"
    )
    branches = "".join(f"    if a == {i}:\n        return {i}\n" for i in range(12))
    (pkg / "complex.py").write_text(f"def dispatch(a, b, c, d, e, f):\n{branches}    return -1\n")
    hidden = project / ".venv"
    hidden.mkdir()
    (hidden / "ignored.py").write_text("x = 1\n")
    (project / "README.md").write_text("# project\n")
    return project
