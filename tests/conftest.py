"""Test bootstrap."""

from __future__ import annotations

import shutil
import sys
import uuid
from pathlib import Path
from typing import Callable, Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Pre-create cache_dir to avoid flaky tempdir creation on Windows."""
    try:
        configured = config.getini("cache_dir")
    except ValueError:
        # cacheprovider plugin disabled (e.g. -p no:cacheprovider)
        return
    if not configured:
        return
    cache_dir = Path(configured)
    if not cache_dir.is_absolute():
        cache_dir = Path(config.rootpath) / cache_dir
    cache_dir.mkdir(parents=True, exist_ok=True)


@pytest.fixture
def workspace_temp_dir() -> Iterator[Path]:
    """Scratch dir under the workspace for preset files."""
    base = ROOT / "manual-temp-tests"
    base.mkdir(parents=True, exist_ok=True)
    case_dir = base / f"case-{uuid.uuid4().hex[:8]}"
    case_dir.mkdir(parents=True, exist_ok=False)
    try:
        yield case_dir
    finally:
        shutil.rmtree(case_dir, ignore_errors=True)


@pytest.fixture
def write_preset(workspace_temp_dir: Path) -> Callable[[str, str], Path]:
    """Write YAML text to a named file in the scratch dir and return its path."""

    def _write(name: str, text: str) -> Path:
        path = workspace_temp_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
