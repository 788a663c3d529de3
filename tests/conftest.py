"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import hello` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import io
import json
import sys
from pathlib import Path
from typing import Dict, List

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    # Add repo root first (for imports like infrastructure.*)
    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    # Add src/ for Lambda-style imports (from handlers import ...)
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

HANDLER_LOGGERS = ("handlers.hello", "handlers.health", "handlers.main")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from the documented defaults."""
    for name in ("API_VERSION", "ENVIRONMENT", "AWS_REGION"):
        monkeypatch.delenv(name, raising=False)


class LogCapture:
    """Collects the JSON lines written by the handler loggers."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()

    @property
    def lines(self) -> List[str]:
        return [line for line in self.buffer.getvalue().splitlines() if line.strip()]

    @property
    def records(self) -> List[Dict]:
        return [json.loads(line) for line in self.lines]

    def by_message(self, message: str) -> Dict:
        return next(record for record in self.records if record["message"] == message)


@pytest.fixture
def log_capture():
    """Point the handler loggers at an in-memory buffer for one test."""
    import importlib

    from utils.logging_config import json_handlers

    capture = LogCapture()
    swapped = []
    for name in HANDLER_LOGGERS:
        module = importlib.import_module(name)
        for handler in json_handlers(module.logger):
            swapped.append((handler, handler.setStream(capture.buffer)))

    yield capture

    for handler, previous in swapped:
        if previous is not None:
            handler.setStream(previous)
