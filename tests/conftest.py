"""
Shared pytest fixtures: isolated settings, a temp SQLite store and a demo
log directory.
"""

import json
from pathlib import Path

import pytest

from configs.settings import Settings
from runtime.store.log_store import LogStore


DEMO_LOGS = {
    "NA": [
        {"raw": {"time": 1000, "log": "boot ok"}},
        {"raw": {"time": 2000, "log": "request served"}},
    ],
    "EU": [
        {"raw": {"time": 1500, "log": "cache warm"}},
    ],
    "AP": [
        {"raw": {"time": 3000, "log": "index refreshed"}},
        {"raw": {"time": 3000, "log": "index refreshed"}},
        {"raw": {"time": 4000, "log": ""}},
    ],
}


def write_demo_file(directory: Path, region: str, content) -> Path:
    path = directory / f"sample_logs_{region.lower()}.json"
    if isinstance(content, str):
        path.write_text(content, encoding="utf-8")
    else:
        path.write_text(json.dumps(content), encoding="utf-8")
    return path


@pytest.fixture
def demo_dir(tmp_path):
    """Directory holding one valid demo file per default region."""
    directory = tmp_path / "demo_logs"
    directory.mkdir()
    for region, records in DEMO_LOGS.items():
        write_demo_file(directory, region, records)
    return directory


@pytest.fixture
def settings(tmp_path, demo_dir):
    return Settings(
        LOG_DB_PATH=str(tmp_path / "logs.db"),
        DEMO_LOGS_PATH=str(demo_dir),
        LOG_REGIONS="NA,EU,AP",
        LOG_SERVER_URL="http://logserver.test",
        TEAMS_WEBHOOK_URL="",
    )


@pytest.fixture
def store(tmp_path):
    """An empty LogStore with its schema created."""
    log_store = LogStore(tmp_path / "store.db")
    log_store.create_schema_if_absent()
    yield log_store
    log_store.close()
