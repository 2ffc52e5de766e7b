"""Shared fixtures: write throwaway route trees into tmp_path."""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def route_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Return a writer that lays out ``{relative_path: source}`` under a routes dir."""
    root = tmp_path / "routes"
    root.mkdir()

    def write(files: dict[str, str]) -> Path:
        for relative, source in files.items():
            file = root / relative
            file.parent.mkdir(parents=True, exist_ok=True)
            file.write_text(textwrap.dedent(source), encoding="utf-8")
        return root

    return write


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
