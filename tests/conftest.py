"""
Shared fixtures: isolate the event log and scan history per test.
"""
import pytest

from engine.logging.event_logger import logger
from engine.history.scan_history import scan_history


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Point the global event log at a temp file and start with empty history."""
    monkeypatch.setattr(logger, "log_path", tmp_path / "events.jsonl")
    scan_history.reset()
    yield
    scan_history.reset()
